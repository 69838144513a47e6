"""Recognising the shapes of option functions and naming functions."""

from __future__ import annotations

import enum
import inspect
import typing
from typing import Any, List, Optional, Tuple


class FuncType(enum.Enum):
    """Shapes of callables accepted as options.

    ``TB`` is ``f(T) -> bool``, ``TTB`` is ``f(T, T) -> bool``, ``TRB`` is
    ``f(T, R) -> bool``, ``TIB`` is ``f(T, I) -> bool`` with ``T`` assignable
    to ``I``, and ``TR`` is ``f(T) -> R``.
    """

    TB = 1
    TTB = 2
    TRB = 3
    TIB = 4
    TR = 5

    EQUAL = 2
    EQUAL_ASSIGNABLE = 4
    TRANSFORMER = 5
    VALUE_FILTER = 2
    LESS = 2
    VALUE_PREDICATE = 1
    KEY_VALUE_PREDICATE = 3


_EMPTY = object()


def _function_and_bound(fn) -> Optional[Tuple[Any, int]]:
    """The plain function behind ``fn`` and how many leading arguments are bound."""
    if inspect.ismethod(fn):
        func = fn.__func__
        return (func, 1) if inspect.isfunction(func) else None
    if inspect.isfunction(fn):
        return fn, 0
    call = getattr(type(fn), "__call__", None)
    if inspect.isfunction(call):
        return call, 1
    return None


def _positional_annotations(fn, arity: int) -> Optional[Tuple[List[Any], Any]]:
    """Annotations of the first ``arity`` arguments and of the return value,
    or None if the callable cannot be called with exactly that many
    positional arguments."""
    found = _function_and_bound(fn)
    if found is None:
        return None
    func, bound = found
    code = func.__code__
    if code.co_flags & inspect.CO_VARARGS:
        return None

    annotations = getattr(func, "__annotations__", None) or {}
    argcount = code.co_argcount
    kwonly = code.co_varnames[argcount:argcount + code.co_kwonlyargcount]
    kwdefaults = func.__kwdefaults__ or {}
    if any(name not in kwdefaults for name in kwonly):
        return None

    names = code.co_varnames[bound:argcount]
    ndefaults = len(func.__defaults__ or ())
    required = max(0, argcount - ndefaults - bound)
    if not required <= arity <= len(names):
        return None
    params = [annotations.get(name, _EMPTY) for name in names[:arity]]
    return params, annotations.get("return", _EMPTY)


def _is_bool(annotation) -> bool:
    return annotation is _EMPTY or annotation is bool or annotation == "bool"


def _returns_nothing(annotation) -> bool:
    return annotation is None or annotation is type(None) or annotation == "None"


def _same(a, b) -> bool:
    return a is _EMPTY or b is _EMPTY or a == b


def _assignable(src, dst) -> bool:
    if src is _EMPTY or dst is _EMPTY or dst is typing.Any or dst is object:
        return True
    if src == dst:
        return True
    if isinstance(src, type) and isinstance(dst, type):
        try:
            return issubclass(src, dst)
        except TypeError:
            return False
    return False


def is_type(fn, ft) -> bool:
    """Report whether ``fn`` is a function of the shape ``ft``.

    Unannotated parameters and return values are taken to fit any shape.
    """
    if fn is None or inspect.isclass(fn) or not callable(fn):
        return False
    ft = FuncType(ft)
    arity = 2 if ft in (FuncType.TTB, FuncType.TRB, FuncType.TIB) else 1
    found = _positional_annotations(fn, arity)
    if found is None:
        return False
    params, returns = found
    if ft is FuncType.TR:
        return not _returns_nothing(returns)
    if not _is_bool(returns):
        return False
    if ft is FuncType.TTB:
        return _same(params[0], params[1])
    if ft is FuncType.TIB:
        return _assignable(params[0], params[1])
    return True


def name_of(fn) -> str:
    """Return a short qualified name of a function, such as ``module.Class.method``.

    The module is given by its last component, and ``<locals>`` markers of
    nested functions are left out. Returns ``<unknown>`` if no name is found.
    """
    target = fn
    qualname = getattr(target, "__qualname__", None)
    if not isinstance(qualname, str) and callable(fn) and not inspect.isclass(fn):
        target = type(fn).__call__
        qualname = getattr(target, "__qualname__", None)
    if not isinstance(qualname, str):
        return "<unknown>"

    module = getattr(target, "__module__", None)
    if not isinstance(module, str):
        module = getattr(getattr(target, "__objclass__", None), "__module__", None)
    prefix = module.rpartition(".")[2] if isinstance(module, str) else ""

    parts = [part for part in qualname.split(".") if part != "<locals>"]
    if prefix:
        parts.insert(0, prefix)
    return ".".join(parts)