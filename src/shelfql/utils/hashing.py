"""Hashing utilities for cache key generation."""

import hashlib
import json
from typing import Any


def hash_value(value: Any) -> str:
    """Create a deterministic hash of a value.

    Dict keys are sorted before hashing, so equal mappings hash equally
    regardless of insertion order.

    Returns:
        The first 16 hex characters of the SHA-256 digest.
    """
    if value is None:
        return "none"

    normalized = json.dumps(value, sort_keys=True, default=str)
    return hashlib.sha256(normalized.encode()).hexdigest()[:16]


def normalize_query(query: str) -> str:
    """Collapse runs of whitespace in a GraphQL query string."""
    return " ".join(query.split())
