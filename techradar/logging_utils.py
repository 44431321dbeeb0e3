from __future__ import annotations

import inspect
import logging
import reprlib
from dataclasses import fields, is_dataclass
from functools import wraps
from typing import Any, Callable, Iterable, MutableMapping, Optional, Sequence, Set, TypeVar, cast

import numpy as np

F = TypeVar("F", bound=Callable[..., Any])

_repr = reprlib.Repr()
_repr.maxother = 160
_repr.maxlist = 8
_repr.maxtuple = 8
_repr.maxdict = 8


def _summarize(value: Any, *, max_items: int = 4, max_length: int = 300) -> str:
    if isinstance(value, np.ndarray):
        if value.size == 0:
            return f"ndarray(shape={tuple(value.shape)})"
        return (
            f"ndarray(shape={tuple(value.shape)}, "
            f"min={float(value.min()):.6g}, max={float(value.max()):.6g})"
        )

    # Items, points and segments are small frozen dataclasses; show their fields inline.
    if is_dataclass(value) and not isinstance(value, type):
        parts = []
        for idx, fld in enumerate(fields(value)):
            if idx >= max_items:
                parts.append("...")
                break
            parts.append(f"{fld.name}={_summarize(getattr(value, fld.name))}")
        return f"{type(value).__name__}({', '.join(parts)})"

    if isinstance(value, (list, tuple)) and len(value) > max_items:
        head = ", ".join(_summarize(item) for item in value[:max_items])
        return f"[{head}, ... ({len(value)} total)]"

    rendered = _repr.repr(value)
    if len(rendered) > max_length:
        return rendered[:max_length] + "... (truncated)"
    return rendered


def _format_arguments(args: Sequence[Any], kwargs: MutableMapping[str, Any]) -> str:
    parts = [_summarize(arg) for arg in args]
    parts.extend(f"{key}={_summarize(value)}" for key, value in kwargs.items())
    return ", ".join(parts) if parts else "no-args"


def debug_log_call(
    logger: logging.Logger, *, name: Optional[str] = None, log_result: bool = True
) -> Callable[[F], F]:
    """Return a decorator that emits DEBUG entry/exit records for a callable."""

    def decorator(func: F) -> F:
        if getattr(func, "_debug_logging_wrapped", False):
            return func

        qualname = name or getattr(func, "__qualname__", getattr(func, "__name__", "<callable>"))

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any):
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("Entering %s (%s)", qualname, _format_arguments(args, kwargs))
            result = func(*args, **kwargs)
            if logger.isEnabledFor(logging.DEBUG):
                if log_result:
                    logger.debug("Exiting %s -> %s", qualname, _summarize(result))
                else:
                    logger.debug("Exiting %s", qualname)
            return result

        setattr(wrapper, "_debug_logging_wrapped", True)
        return cast(F, wrapper)

    return decorator


def apply_debug_logging(
    namespace: MutableMapping[str, Any],
    *,
    logger: Optional[logging.Logger] = None,
    skip: Optional[Iterable[str]] = None,
) -> None:
    """Wrap the module-level functions and public methods of ``namespace``."""

    module_name = namespace.get("__name__")
    logger = logger or logging.getLogger(module_name if isinstance(module_name, str) else __name__)
    skip_set: Set[str] = set(skip or [])

    for name, value in list(namespace.items()):
        if name in skip_set:
            continue
        if inspect.isfunction(value) and value.__module__ == module_name:
            namespace[name] = debug_log_call(logger, name=name)(value)
        elif inspect.isclass(value) and value.__module__ == module_name:
            for attr_name, attr_value in list(vars(value).items()):
                qualified = f"{value.__name__}.{attr_name}"
                if attr_name.startswith("_") or qualified in skip_set:
                    continue
                if inspect.isfunction(attr_value):
                    setattr(value, attr_name, debug_log_call(logger, name=qualified)(attr_value))
