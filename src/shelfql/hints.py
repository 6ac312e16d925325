"""Dynamic cache hints for GraphQL resolvers.

Resolvers set hints on the field they serve, the way Apollo's
``info.cacheControl.setCacheHint`` works::

    @query.field("books")
    def resolve_books(_, info):
        private_cache(info, max_age=60)
        return books
"""

from typing import Any

from shelfql.core.entities.cache_control import CacheHint, CacheScope
from shelfql.core.services.cache_control_calculator import CacheControlContext

# Context key for cache control
CACHE_CONTROL_CONTEXT_KEY = "_shelfql_cache_control"


def get_cache_control(info: Any) -> CacheControlContext | None:
    """Get the cache control context from GraphQL resolver info."""
    context = getattr(info, "context", None)
    if not isinstance(context, dict):
        return None
    return context.get(CACHE_CONTROL_CONTEXT_KEY)


def set_cache_hint(
    info: Any,
    max_age: int | None = None,
    scope: CacheScope | str | None = None,
) -> bool:
    """Set a cache hint for the field being resolved.

    Args:
        info: The GraphQL resolver info object.
        max_age: Maximum cache age in seconds.
        scope: Cache scope ("PUBLIC" or "PRIVATE").

    Returns:
        True if the hint was set, False if cache control is not available.
    """
    cache_control = get_cache_control(info)
    if cache_control is None:
        return False

    cache_control.set_cache_hint(max_age=max_age, scope=scope, path=_field_path(info))
    return True


def cache_hint(
    max_age: int | None = None,
    scope: CacheScope | str | None = None,
) -> CacheHint:
    """Create a CacheHint object."""
    return CacheHint(max_age=max_age, scope=CacheScope.parse(scope))


def no_cache(info: Any) -> bool:
    """Make the whole response non-cacheable."""
    return set_cache_hint(info, max_age=0)


def private_cache(info: Any, max_age: int) -> bool:
    """Set a private cache hint for user-specific data."""
    return set_cache_hint(info, max_age=max_age, scope=CacheScope.PRIVATE)


def public_cache(info: Any, max_age: int) -> bool:
    """Set a public cache hint for shared data."""
    return set_cache_hint(info, max_age=max_age, scope=CacheScope.PUBLIC)


def inject_cache_control_context(
    context: dict[str, Any],
    cache_control: CacheControlContext,
) -> None:
    """Inject cache control context into GraphQL context."""
    context[CACHE_CONTROL_CONTEXT_KEY] = cache_control


def _field_path(info: Any) -> tuple[str, ...]:
    path = getattr(info, "path", None)
    if path is None or not hasattr(path, "as_list"):
        return ()
    # List indices are dropped so items share their list field's path
    return tuple(str(key) for key in path.as_list() if isinstance(key, str))
