"""Cache value serializers."""

from shelfql.infrastructure.serializers.json import JsonSerializer

__all__ = ["JsonSerializer"]
