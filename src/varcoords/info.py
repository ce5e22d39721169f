"""Typed INFO-field access for Variant / VariantCall records.

Any record with an ``info`` dict of ``str -> ListValue`` works:

    variant = Variant(reference_name="chr1", start=10)
    set_info_field("DP", 10, variant)
    set_info_field("AD", [10, 20], call)
    set_info_field("STRING_KEY", "a_string", variant)

    list_values(variant.info["DP"], int)   # [10]

Writes always replace the existing binding for a key.
"""

from __future__ import annotations

import numbers
from typing import Any, Callable, Dict, Iterable, List, Optional, Protocol, TypeVar, Union

import numpy as np

from .models import ListValue, Value

T = TypeVar("T")


class InfoRecord(Protocol):
    info: Dict[str, ListValue]


class InfoValueTypeError(TypeError):
    """Raised when a ListValue entry does not hold the requested kind of value."""


def _is_number(value: Any) -> bool:
    # bool counts as a number (True -> 1.0)
    if isinstance(value, (bool, np.bool_)):
        return True
    if isinstance(value, (complex, np.complexfloating)):
        return False
    return isinstance(value, (numbers.Number, np.number))


def to_value(value: Any) -> Value:
    if value is None:
        raise ValueError("Cannot store None in an INFO field; resolve missing values first")
    if _is_number(value):
        return Value(number_value=float(value))
    return Value(string_value=str(value))


def set_info_field(key: str, values: Union[Any, Iterable[Any]], record: InfoRecord) -> None:
    """Bind ``record.info[key]`` to ``values``, replacing any previous binding.

    A str or any non-iterable is treated as a single value.
    """
    if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
        values = [values]
    record.info[key] = ListValue(values=[to_value(v) for v in values])


def get_info_field(key: str, record: InfoRecord) -> Optional[ListValue]:
    return record.info.get(key)


def list_values(list_value: ListValue, type_: Callable[[float], T] = float) -> List[T]:
    """Number values of ``list_value`` in order, converted with ``type_``."""
    out: List[T] = []
    for i, v in enumerate(list_value.values):
        if v.number_value is None:
            raise InfoValueTypeError(f"Entry {i} is a string ({v.string_value!r}), expected a number")
        out.append(type_(v.number_value))
    return out


def list_string_values(list_value: ListValue) -> List[str]:
    out: List[str] = []
    for i, v in enumerate(list_value.values):
        if v.string_value is None:
            raise InfoValueTypeError(f"Entry {i} is a number ({v.number_value!r}), expected a string")
        out.append(v.string_value)
    return out


def list_values_array(list_value: ListValue, dtype: Any = np.float64) -> np.ndarray:
    return np.asarray(list_values(list_value), dtype=dtype)
