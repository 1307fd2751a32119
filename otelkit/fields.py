"""Log fields, caller lookup and span attribute building."""

from __future__ import annotations

import inspect
import sys
from dataclasses import dataclass
from typing import Any, Iterable

from otelkit.netconv import Key, KeyValue

_UNKNOWN = "unknown"


@dataclass(frozen=True)
class Field:
    """A key/value pair attached to a log entry and its span."""

    key: str
    value: Any


def get_caller(skip: int) -> tuple[str, str]:
    """Return ("file:line", "module.function") for the frame ``skip`` levels up.

    A skip of 0 names get_caller itself; ("unknown", "unknown") is returned
    when the stack is not that deep.
    """
    try:
        frame = sys._getframe(skip)
    except ValueError:
        return _UNKNOWN, _UNKNOWN
    code = frame.f_code
    module = inspect.getmodule(frame)
    module_name = module.__name__ if module is not None else ""
    func_name = f"{module_name}.{code.co_name}" if module_name else code.co_name
    return f"{code.co_filename}:{frame.f_lineno}", func_name


def span_attributes(
    trace_id: str,
    span_id: str,
    caller: str,
    func_name: str,
    fields: Iterable[Field],
) -> list[KeyValue]:
    """Return the identifying attributes followed by one string attribute per field."""
    attrs = [
        Key("traceID").string(trace_id),
        Key("spanID").string(span_id),
        Key("caller").string(caller),
        Key("funcName").string(func_name),
    ]
    attrs.extend(Key(f.key).string(str(f.value)) for f in fields)
    return attrs