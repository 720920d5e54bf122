from __future__ import annotations

import inspect
import logging
import reprlib
from functools import wraps
from typing import Any, Callable, Iterable, MutableMapping, Optional, Sequence, Set, TypeVar, cast

import numpy as np

F = TypeVar("F", bound=Callable[..., Any])

_repr = reprlib.Repr()
_repr.maxother = 160
_repr.maxlist = 6
_repr.maxtuple = 6


def _safe_repr(value: Any, *, max_items: int = 4, max_length: int = 300) -> str:
    if isinstance(value, np.ndarray):
        summary = f"ndarray(shape={tuple(value.shape)}, dtype={value.dtype})"
        if value.size and value.size <= max_items:
            return f"{summary}, values={_repr.repr(value.tolist())}"
        return summary

    # point sets are long lists of float tuples; only show the head
    if isinstance(value, list) and value and isinstance(value[0], tuple):
        head = ", ".join(_safe_repr(item) for item in value[:max_items])
        more = f", ... ({len(value)} points)" if len(value) > max_items else ""
        return f"[{head}{more}]"

    if isinstance(value, tuple) and all(isinstance(item, float) for item in value):
        return "(" + ", ".join(f"{item:.6g}" for item in value) + ")"

    rendered = _repr.repr(value)
    if len(rendered) > max_length:
        return rendered[:max_length] + "... (truncated)"
    return rendered


def _format_arguments(args: Sequence[Any], kwargs: MutableMapping[str, Any]) -> str:
    parts = []
    if args:
        parts.append("args=[" + ", ".join(_safe_repr(arg) for arg in args) + "]")
    if kwargs:
        parts.append(
            "kwargs={" + ", ".join(f"{key}={_safe_repr(value)}" for key, value in kwargs.items()) + "}"
        )
    return ", ".join(parts) if parts else "no-args"


def debug_log_call(
    logger: logging.Logger,
    *,
    name: Optional[str] = None,
    log_result: bool = True,
    method: bool = False,
) -> Callable[[F], F]:
    """Return a decorator that emits DEBUG logs on entry and exit of a call."""

    def decorator(func: F) -> F:
        if getattr(func, "_debug_logging_wrapped", False):
            return func

        qualname = name or getattr(func, "__qualname__", getattr(func, "__name__", "<callable>"))

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any):
            if not logger.isEnabledFor(logging.DEBUG):
                return func(*args, **kwargs)
            shown = args[1:] if method else args
            logger.debug("Entering %s (%s)", qualname, _format_arguments(shown, kwargs))
            try:
                result = func(*args, **kwargs)
            except Exception:
                logger.exception("Exception in %s", qualname)
                raise
            if log_result:
                logger.debug("Exiting %s -> %s", qualname, _safe_repr(result))
            else:
                logger.debug("Exiting %s", qualname)
            return result

        setattr(wrapper, "_debug_logging_wrapped", True)
        return cast(F, wrapper)

    return decorator


def _apply_debug_logging_to_class(cls: type, logger: logging.Logger, skip: Set[str]) -> None:
    for attr_name, attr_value in list(cls.__dict__.items()):
        if attr_name.startswith("_"):
            continue
        qualified = f"{cls.__name__}.{attr_name}"
        if attr_name in skip or qualified in skip:
            continue
        if inspect.isfunction(attr_value) and getattr(attr_value, "__module__", None) == cls.__module__:
            setattr(cls, attr_name, debug_log_call(logger, name=qualified, method=True)(attr_value))


def apply_debug_logging(
    namespace: MutableMapping[str, Any],
    *,
    logger: Optional[logging.Logger] = None,
    skip: Optional[Iterable[str]] = None,
    wrap_methods: bool = True,
) -> None:
    """Wrap the public functions and methods of a module with DEBUG tracing."""

    module_name = namespace.get("__name__")
    if not isinstance(module_name, str):
        module_name = None
    logger = logger or logging.getLogger(module_name or __name__)
    skip_set: Set[str] = set(skip or [])

    for name, value in list(namespace.items()):
        if name in skip_set or name.startswith("_"):
            continue
        if inspect.isfunction(value) and getattr(value, "__module__", None) == module_name:
            namespace[name] = debug_log_call(logger, name=name)(value)
        elif wrap_methods and inspect.isclass(value) and getattr(value, "__module__", None) == module_name:
            _apply_debug_logging_to_class(value, logger, skip_set)
