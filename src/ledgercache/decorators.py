"""Write-path decorators.

These decorators keep a configured LedgerCache in step with functions
that change the ledger. The wrapped function runs first; the cache is
refreshed only if it returns without raising. Both plain and async
functions are supported.
"""

import functools
import inspect
from collections.abc import Callable
from typing import Any, TypeVar

from ledgercache.core.entities.day_key import Timestamp
from ledgercache.core.services.ledger_cache import LedgerCache

F = TypeVar("F", bound=Callable[..., Any])

# Module-level ledger cache reference
_ledger_cache: LedgerCache | None = None


def configure(ledger_cache: LedgerCache | None) -> None:
    """Configure the ledger cache used by the decorators.

    Args:
        ledger_cache: The cache to keep up to date. None disables the
            decorators.

    Example:
        cache = create_ledger_cache(store)
        configure(cache)
    """
    global _ledger_cache
    _ledger_cache = ledger_cache


def get_ledger_cache() -> LedgerCache | None:
    """Get the configured ledger cache.

    Returns:
        The configured cache, or None if not configured.
    """
    return _ledger_cache


def refreshes_day(arg: str = "day") -> Callable[[F], F]:
    """Decorator that refreshes one day after a ledger write.

    Args:
        arg: Name of the wrapped function's parameter holding the day
            that was written.

    Returns:
        Decorated function.

    Example:
        @refreshes_day(arg="day")
        def add_expense(day: date, amount: Decimal) -> None:
            db.insert(day, amount)
    """

    def decorator(func: F) -> F:
        signature = inspect.signature(func)
        if arg not in signature.parameters:
            raise TypeError(f"{func.__qualname__}() has no parameter named {arg!r}")

        def refresh(args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
            if _ledger_cache is None:
                return
            _ledger_cache.refresh_day(_resolve_day(signature, arg, args, kwargs))

        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                result = await func(*args, **kwargs)
                refresh(args, kwargs)
                return result

            return async_wrapper  # type: ignore

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            result = func(*args, **kwargs)
            refresh(args, kwargs)
            return result

        return wrapper  # type: ignore

    return decorator


def invalidates_all(func: F) -> F:
    """Decorator that wipes the cache after a ledger write.

    Use it for writes that touch many days at once, such as imports or
    recurring entry changes.

    Example:
        @invalidates_all
        def import_statement(path: str) -> None:
            ...
    """

    def invalidate() -> None:
        if _ledger_cache is not None:
            _ledger_cache.invalidate_all()

    if inspect.iscoroutinefunction(func):

        @functools.wraps(func)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            result = await func(*args, **kwargs)
            invalidate()
            return result

        return async_wrapper  # type: ignore

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        result = func(*args, **kwargs)
        invalidate()
        return result

    return wrapper  # type: ignore


def _resolve_day(
    signature: inspect.Signature,
    name: str,
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
) -> Timestamp:
    """Pick the named argument out of a call.

    Args:
        signature: Signature of the wrapped function.
        name: Parameter to resolve.
        args: Positional arguments of the call.
        kwargs: Keyword arguments of the call.

    Returns:
        The bound value, falling back to the parameter's default.
    """
    bound = signature.bind(*args, **kwargs)
    bound.apply_defaults()
    return bound.arguments[name]
