"""Base record class and structpacker-specific pydantic configuration.

This module provides the BaseRecord class that fixed-layout records should
inherit from.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict

from ..codec.directives import parse


class BaseRecord(BaseModel):
    """Base class for fixed-layout records.

    A record's fields, in declaration order, are the value slots when packing
    and the output slots when unpacking. Annotate fields with ``bool``,
    ``int``, or one of the sized aliases (``UInt16``, ``Int32`` ...) to
    declare the slot type and its range.

    Example:
        >>> from typing import ClassVar
        >>> class MotorStatus(BaseRecord):
        ...     struct_format: ClassVar[str] = ">HxI?"
        ...
        ...     motor_id: UInt16
        ...     position: UInt32
        ...     enabled: bool

    Attributes:
        struct_format: Default format string for pack_record/unpack_record
            (optional, validated when the class is defined)
    """

    model_config = ConfigDict(
        # Lax mode coerces compatible input; the sized aliases still bound ranges
        strict=False,
        # Validate on assignment
        validate_assignment=True,
        # Forbid extra fields not defined in schema
        extra="forbid",
    )

    struct_format: ClassVar[str | None] = None

    def __init_subclass__(cls, **kwargs: Any) -> None:
        """Reject an invalid struct_format when the subclass is created."""
        super().__init_subclass__(**kwargs)

        if cls.struct_format is not None:
            parse(cls.struct_format)
