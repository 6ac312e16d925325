"""Logging decorator for cache backends."""

import logging
from datetime import timedelta
from typing import Any

from shelfql.core.interfaces.cache_backend import ICacheBackend


class LoggingCacheBackend:
    """Cache backend that logs every call made to another backend.

    Calls are forwarded unchanged; return values and exceptions of the
    wrapped backend pass through untouched. One record is emitted per
    completed call with the operation name, the key and the result.
    A call that raises is logged with the exception and re-raised; a
    cancelled call emits nothing.
    """

    def __init__(
        self,
        backend: ICacheBackend,
        logger: logging.Logger | None = None,
        level: int = logging.INFO,
    ) -> None:
        """Initialize the decorator.

        Args:
            backend: The backend to wrap.
            logger: Logger to emit records on. Defaults to ``shelfql.cache``.
            level: Level of the per-call records.
        """
        self._backend = backend
        self._logger = logger or logging.getLogger("shelfql.cache")
        self._level = level

    @property
    def backend(self) -> ICacheBackend:
        return self._backend

    def _record(self, operation: str, key: str | None, result: Any) -> None:
        self._logger.log(
            self._level,
            "cache %s key=%r result=%r",
            operation,
            key,
            result,
            extra={"cache_operation": operation, "cache_key": key, "cache_result": result},
        )

    def _record_error(self, operation: str, key: str | None, error: Exception) -> None:
        self._logger.warning(
            "cache %s key=%r failed: %s",
            operation,
            key,
            error,
            extra={"cache_operation": operation, "cache_key": key, "cache_error": error},
        )

    async def get(self, key: str) -> str | None:
        try:
            result = await self._backend.get(key)
        except Exception as e:
            self._record_error("get", key, e)
            raise
        self._record("get", key, result)
        return result

    async def set(
        self,
        key: str,
        value: str,
        ttl: timedelta | None = None,
    ) -> None:
        try:
            result = await self._backend.set(key, value, ttl)
        except Exception as e:
            self._record_error("set", key, e)
            raise
        self._record("set", key, result)
        return result

    async def delete(self, key: str) -> bool:
        try:
            result = await self._backend.delete(key)
        except Exception as e:
            self._record_error("delete", key, e)
            raise
        self._record("delete", key, result)
        return result

    async def clear(self) -> None:
        try:
            result = await self._backend.clear()
        except Exception as e:
            self._record_error("clear", None, e)
            raise
        self._record("clear", None, result)
        return result

    async def ping(self) -> bool:
        # Health probes are not cache traffic
        return await self._backend.ping()

    async def close(self) -> None:
        close = getattr(self._backend, "close", None)
        if close is not None:
            await close()
