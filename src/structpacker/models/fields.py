"""Sized field type aliases.

Each alias annotates an int (or bool) field with its registered scalar type
and the pydantic range bounds of that type, e.g.::

    class Reading(BaseRecord):
        channel: UInt8
        raw: Int16
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import Field

from ..codec.registry import ScalarType


def _sized(scalar_type: ScalarType) -> Any:
    return Annotated[
        int,
        scalar_type,
        Field(ge=scalar_type.min_value, le=scalar_type.max_value),
    ]


Int8 = _sized(ScalarType.INT8)
UInt8 = _sized(ScalarType.UINT8)
Int16 = _sized(ScalarType.INT16)
UInt16 = _sized(ScalarType.UINT16)
Int32 = _sized(ScalarType.INT32)
UInt32 = _sized(ScalarType.UINT32)
Int64 = _sized(ScalarType.INT64)
UInt64 = _sized(ScalarType.UINT64)
Bool = Annotated[bool, ScalarType.BOOL]
