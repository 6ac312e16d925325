"""Domain services for shelfql."""

from shelfql.core.services.cache_control_calculator import (
    CacheControlCalculator,
    CacheControlContext,
    create_cache_control_context,
)
from shelfql.core.services.cache_service import CacheService
from shelfql.core.services.directive_parser import (
    CACHE_CONTROL_DIRECTIVE,
    DirectiveParser,
    SchemaDirectives,
    get_cache_control_directive_sdl,
)

__all__ = [
    "CacheService",
    "CacheControlCalculator",
    "CacheControlContext",
    "create_cache_control_context",
    "DirectiveParser",
    "SchemaDirectives",
    "CACHE_CONTROL_DIRECTIVE",
    "get_cache_control_directive_sdl",
]
