import inspect
from collections.abc import Callable
from typing import Any

# Internal imports
from .error_strings import NOT_CALLABLE


def _positional_arity(func: Callable, fallback: int) -> int | None:
    """
    Count the required positional parameters `func` declares.

    Parameters with defaults are left alone, so str.strip, round or dict.get
    only receive the item. Returns None when `func` takes *args (it can take
    everything). Builtins without an inspectable signature get `fallback`.
    """
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        return fallback

    count: int = 0
    for param in signature.parameters.values():
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            return None
        if param.kind not in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD):
            continue
        if param.default is inspect.Parameter.empty:
            count += 1

    return count


def adapt_callback(func: Any, operation: str, fallback: int = 1) -> Callable[..., Any]:
    """
    Validate `func` and return a wrapper that trims the arguments it is called with.

    ExtendedSet calls callbacks with (element, element, set), or
    (accumulator, element, element, set) for reduce. Most callbacks only want
    the first one or two of those, so the wrapper passes as many positional
    arguments as `func` requires.

    Args:
        func: The callback supplied by the caller.
        operation (str): Name of the calling operation, used in the error message.
        fallback (int): Number of arguments to pass when the signature can't be inspected.

    Raises:
        TypeError: `func` is not callable.
    """
    if not callable(func):
        raise TypeError(NOT_CALLABLE.format(type_name=type(func).__name__, operation=operation))

    arity: int | None = _positional_arity(func, fallback)

    if arity is None: # Takes *args, so give it everything
        return func

    def trimmed(*args):
        return func(*args[:arity])

    return trimmed
