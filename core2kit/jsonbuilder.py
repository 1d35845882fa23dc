"""Incremental builder for flat JSON objects with fixed float formatting."""

from __future__ import annotations

import enum
import struct
from typing import Any, Iterable, List


class FieldType(enum.Enum):
    """Kinds of value a field can hold."""

    STRING = enum.auto()
    FLOAT = enum.auto()
    FLOAT_DEC2 = enum.auto()
    INT = enum.auto()
    FLOAT_ARRAY = enum.auto()
    FLOAT_ARRAY_DEC2 = enum.auto()


_FLOAT_FORMAT = {
    FieldType.FLOAT: "{:f}",
    FieldType.FLOAT_ARRAY: "{:f}",
    FieldType.FLOAT_DEC2: "{:.2f}",
    FieldType.FLOAT_ARRAY_DEC2: "{:.2f}",
}


def _format_float(value: float, field_type: FieldType) -> str:
    # Values are stored as single-precision floats before being printed.
    single = struct.unpack("f", struct.pack("f", float(value)))[0]
    return _FLOAT_FORMAT[field_type].format(single)


class JsonBuilder:
    """Builds a JSON object one field at a time; serialize() closes it."""

    def __init__(self) -> None:
        self._parts: List[str] = ["{ "]
        self._need_comma = False
        self._finished = False

    def _check_open(self) -> None:
        if self._finished:
            raise RuntimeError("JSON object has already been serialized")

    def _format_value(self, data: Any, field_type: FieldType) -> str:
        if field_type is FieldType.STRING:
            return '"' + str(data) + '"'
        if field_type in (FieldType.FLOAT, FieldType.FLOAT_DEC2):
            return _format_float(data, field_type)
        if field_type is FieldType.INT:
            return "%d" % int(data)
        if field_type in (FieldType.FLOAT_ARRAY, FieldType.FLOAT_ARRAY_DEC2):
            items: Iterable[float] = data
            return "[ " + ", ".join(_format_float(x, field_type) for x in items) + " ]"
        raise ValueError(f"unknown field type {field_type!r}")

    def add_field(self, name: str, data: Any, field_type: FieldType) -> None:
        """Append a field of the given type."""
        self._check_open()
        value = self._format_value(data, FieldType(field_type))
        self._parts.append(', "' if self._need_comma else '"')
        self._parts.append(f'{name}": {value}')
        self._need_comma = True

    def add_string(self, name: str, value: str) -> None:
        """Append a string field; the text is inserted as given."""
        self.add_field(name, value, FieldType.STRING)

    def add_int(self, name: str, value: int) -> None:
        """Append an integer field."""
        self.add_field(name, value, FieldType.INT)

    def serialize(self) -> str:
        """Close the object and return its text; the builder cannot be used afterwards."""
        self._check_open()
        self._parts.append(" }")
        self._finished = True
        return "".join(self._parts)