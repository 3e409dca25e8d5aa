"""Schema introspection for pydantic records.

This module analyzes pydantic models and extracts the output shape used to
unpack into them: one slot per field, in declaration order, typed by the
field annotation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Type, Union, get_origin

from pydantic import BaseModel
from pydantic.fields import FieldInfo

from ..exceptions import SchemaError
from .registry import ScalarType

SlotType = Union[ScalarType, Type[int], Type[bool], None]


@dataclass(frozen=True)
class SlotSchema:
    """Schema information for a single record field.

    Attributes:
        name: Field name
        slot_type: Output slot type passed to the unpack engine
    """

    name: str
    slot_type: SlotType


class RecordSchema:
    """Output shape of a record.

    Example:
        >>> schema = RecordSchema.from_model(Status)
        >>> [slot.name for slot in schema.slots]
        ['device_id', 'ready']
    """

    def __init__(self, model_class: Type[BaseModel]) -> None:
        """Initialize schema from a pydantic model.

        Args:
            model_class: Pydantic model class to introspect
        """
        self.model_class = model_class
        self.slots: List[SlotSchema] = []
        self._introspect()

    @classmethod
    def from_model(cls, model_class: Type[BaseModel]) -> RecordSchema:
        return cls(model_class)

    @property
    def field_names(self) -> List[str]:
        return [slot.name for slot in self.slots]

    @property
    def slot_types(self) -> List[SlotType]:
        return [slot.slot_type for slot in self.slots]

    def resolve_format(self, fmt: Optional[str] = None) -> str:
        """Return the explicit format, or the model's ``struct_format``.

        Raises:
            SchemaError: If neither is available
        """
        if fmt is not None:
            return fmt

        declared = getattr(self.model_class, "struct_format", None)
        if declared is None:
            raise SchemaError(
                f"{self.model_class.__name__} has no struct_format; pass a format explicitly"
            )
        return declared

    def _introspect(self) -> None:
        for field_name, field_info in self.model_class.model_fields.items():
            self.slots.append(self._extract_slot_schema(field_name, field_info))

    def _extract_slot_schema(self, name: str, field_info: FieldInfo) -> SlotSchema:
        annotation = field_info.annotation
        if annotation is None:
            raise SchemaError(f"Field {name} has no type annotation")

        if get_origin(annotation) is not None:
            raise SchemaError(
                f"Field {name}: unsupported annotation {annotation}. Supported: int, bool."
            )

        # Annotated[...] markers end up in the pydantic metadata list
        declared = [item for item in field_info.metadata if isinstance(item, ScalarType)]
        if len(declared) > 1:
            raise SchemaError(f"Field {name}: more than one scalar type declared")
        scalar_type = declared[0] if declared else None

        if annotation is bool:
            if scalar_type is not None and scalar_type is not ScalarType.BOOL:
                raise SchemaError(f"Field {name}: bool field declared as {scalar_type.name}")
            return SlotSchema(name=name, slot_type=bool)

        if annotation is int:
            if scalar_type is ScalarType.BOOL:
                raise SchemaError(f"Field {name}: int field declared as BOOL")
            return SlotSchema(name=name, slot_type=scalar_type if scalar_type else int)

        raise SchemaError(
            f"Field {name}: unsupported type {annotation}. Supported: int, bool."
        )
