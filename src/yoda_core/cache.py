"""In-memory cache with TTL for coalescing repeated editor queries."""

import functools
import math
import time
import weakref
from typing import Any, Callable, Mapping, Optional, Union

from yoda_core.config import settings
from yoda_core.logging import get_logger
from yoda_core.models import CacheOptions, normalize_options

logger = get_logger(__name__)

Clock = Callable[[], float]


class _Strong:
    """Holder for values that cannot be weakly referenced."""

    __slots__ = ("value",)

    def __init__(self, value: Any):
        self.value = value

    def __call__(self) -> Any:
        return self.value


class TTLCache:
    """
    TTL cache keyed by strings.

    Entries expire lazily: an expired key is evicted when it is next read.
    Non-string keys are treated as a miss on read and ignored on write.
    Not thread-safe; wrap the instance in a lock if it is shared across threads.
    """

    def __init__(
        self,
        ttl: Optional[float] = None,
        weak: Optional[bool] = None,
        clock: Optional[Clock] = None,
    ):
        self._ttl = settings.cache_ttl if ttl is None else ttl
        self._weak = settings.cache_weak if weak is None else weak
        self._clock = clock or time.monotonic
        self._data: dict[str, Callable[[], Any]] = {}
        self._timestamps: dict[str, float] = {}

    @property
    def ttl(self) -> float:
        """Time-to-live in clock units (seconds by default)."""
        return self._ttl

    @property
    def weak(self) -> bool:
        """Whether weak-referenceable values are held weakly."""
        return self._weak

    @property
    def persistent(self) -> bool:
        """True when entries never expire."""
        return math.isinf(self._ttl)

    def _wrap(self, value: Any) -> Callable[[], Any]:
        if self._weak:
            try:
                return weakref.ref(value)
            except TypeError:
                pass
        return _Strong(value)

    def _evict(self, key: str) -> None:
        self._data.pop(key, None)
        self._timestamps.pop(key, None)

    def get(self, key: str) -> Optional[Any]:
        """Get value if exists and not expired."""
        if not isinstance(key, str):
            return None
        ref = self._data.get(key)
        if ref is None:
            return None
        value = ref()
        if value is None:
            # Reclaimed weak value or a stored None
            self._evict(key)
            return None
        if not self.persistent:
            age = self._clock() - self._timestamps[key]
            if age >= self._ttl:
                logger.debug("Evicting expired cache key %r (age %.3fs)", key, age)
                self._evict(key)
                return None
        return value

    def set(self, key: str, value: Any) -> None:
        """Store value with current timestamp."""
        if not isinstance(key, str):
            return
        self._data[key] = self._wrap(value)
        self._timestamps[key] = self._clock()

    def invalidate(self, key: str) -> None:
        """Remove a single entry."""
        if not isinstance(key, str):
            return
        self._evict(key)

    def clear(self) -> None:
        """Clear all cached entries."""
        if self._data:
            logger.debug("Clearing %d cache entries", len(self._data))
        self._data.clear()
        self._timestamps.clear()

    def has(self, key: str) -> bool:
        """Check if key exists and is not expired."""
        return self.get(key) is not None

    def get_or_compute(self, key: str, producer: Callable[[], Any]) -> Any:
        """
        Return the cached value for key, computing and storing it on a miss.

        The producer runs at most once per call and its exceptions propagate.
        Concurrent calls for the same key are not de-duplicated.
        """
        cached = self.get(key)
        if cached is not None:
            return cached

        value = producer()
        self.set(key, value)
        return value

    def memoize(self, key_func: Optional[Callable[..., str]] = None):
        """Decorator routing calls through get_or_compute."""

        def decorator(func):
            @functools.wraps(func)
            def wrapper(*args, **kwargs):
                if key_func is not None:
                    key = key_func(*args, **kwargs)
                else:
                    key = f"{func.__qualname__}:{args!r}:{sorted(kwargs.items())!r}"
                return self.get_or_compute(key, lambda: func(*args, **kwargs))

            return wrapper

        return decorator

    def __contains__(self, key: object) -> bool:
        return self.has(key)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"TTLCache(ttl={self._ttl!r}, weak={self._weak!r}, entries={len(self._data)})"


def new(
    options: Optional[Union[CacheOptions, Mapping[str, Any]]] = None,
    **overrides: Any,
) -> TTLCache:
    """
    Create a cache.

    Args:
        options: CacheOptions or a mapping with 'ttl' (seconds), 'ttl_ms' or 'weak'.
        overrides: Same keys as options, applied on top.
        clock: Optional zero-argument monotonic time function. Keyword only;
               a 'clock' key inside options is rejected like any unknown key.

    Raises:
        pydantic.ValidationError: on an invalid ttl or an unknown option.
    """
    clock = overrides.pop("clock", None)
    opts = CacheOptions.model_validate({**normalize_options(options), **normalize_options(overrides)})
    return TTLCache(ttl=opts.ttl, weak=opts.weak, clock=clock)


def new_persistent(**overrides: Any) -> TTLCache:
    """Create a cache whose entries never expire."""
    return new({"ttl": math.inf}, **overrides)
