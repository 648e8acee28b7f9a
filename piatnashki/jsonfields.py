"""Reader for the flat, single-level JSON objects stored in session files.

Only integer, time and small-integer array values are understood; a field
whose name has no known type is reported with no data.
"""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import Iterator, Mapping, Optional, Tuple, Union

__all__ = ["FieldType", "Field", "parse_fields"]


class FieldType(enum.Enum):
    """The kinds of value a field may be declared to hold."""

    ERR = enum.auto()
    INT = enum.auto()
    TIME = enum.auto()
    CHAR = enum.auto()
    STRING = enum.auto()
    INT_ARRAY = enum.auto()
    CHAR_ARRAY = enum.auto()


FieldData = Union[int, bytes, None]


@dataclass(frozen=True)
class Field:
    """One name/value pair read from the object."""

    name: str
    type: FieldType
    data: FieldData = None


_NUMBER = re.compile(r"\s*([0-9]*)")


def _parse_int(text: str, pos: int) -> Tuple[int, int]:
    match = _NUMBER.match(text, pos)
    digits = match.group(1)
    return (int(digits) if digits else 0), match.end()


def _parse_char_array(text: str, pos: int) -> Tuple[bytes, int]:
    opening = text.find("[", pos)
    if opening < 0:
        raise ValueError(f"expected '[' after position {pos}")
    closing = text.find("]", opening)
    if closing < 0:
        raise ValueError(f"unterminated array starting at position {opening}")
    body = text[opening + 1:closing]
    if not body.strip():
        return b"", closing + 1
    values = []
    for item in body.split(","):
        item = "".join(item.split())
        if not item:
            values.append(0)
        elif item.isascii() and item.isdigit():
            values.append(int(item) % 256)
        else:
            raise ValueError(f"bad array element {item!r}")
    return bytes(values), closing + 1


def _parse_value(text: str, pos: int, ftype: FieldType) -> Tuple[FieldData, int]:
    if ftype in (FieldType.INT, FieldType.TIME):
        return _parse_int(text, pos)
    if ftype is FieldType.CHAR_ARRAY:
        return _parse_char_array(text, pos)
    return None, pos


def parse_fields(text: str, types: Mapping[str, FieldType]) -> Iterator[Field]:
    """Yield the fields of the object in ``text`` in the order they appear.

    ``types`` maps field names to the type their value is read as; unknown
    names come out as ``FieldType.ERR`` with no data. Text without an opening
    brace yields nothing. A malformed array raises ``ValueError``.
    """
    pos = text.find("{")
    if pos < 0:
        return
    while True:
        start = text.find('"', pos)
        if start < 0:
            return
        end = text.find('"', start + 1)
        if end < 0:
            return
        name = text[start + 1:end]
        colon = text.find(":", end)
        if colon < 0:
            return
        ftype = types.get(name, FieldType.ERR)
        data, pos = _parse_value(text, colon + 1, ftype)
        yield Field(name, ftype, data)