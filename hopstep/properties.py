"""Reflected fields and properties that read and export attributes of objects."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum, IntFlag
from typing import Any, Callable, ClassVar

from hopstep.names import Name


class CastFlags(IntFlag):
    NONE = 0x0
    FIELD = 0x1
    PROPERTY = 0x2


class TypeFlag(IntFlag):
    NONE = 0x00
    PRIMITIVE = 0x01 << 0
    CLASS = 0x01 << 1
    CONTAINER = 0x01 << 2
    GARBAGE_COLLECTABLE = 0x01 << 3


class PropertyFlag(IntFlag):
    INT = 0x01 << 0
    FLOAT = 0x01 << 1
    UNSIGNED = 0x01 << 2
    CLASS = 0x01 << 3
    ARRAY = 0x01 << 4


class PropertyGenFlags(IntEnum):
    """Kind of value a generated property holds."""

    NONE = 0x00
    BYTE = 0x00
    INT8 = 0x01
    INT16 = 0x02
    INT32 = 0x03
    INT64 = 0x04
    UINT16 = 0x05
    UINT32 = 0x06
    UINT64 = 0x07
    FLOAT = 0x08
    DOUBLE = 0x09
    BOOL = 0x0A
    CLASS = 0x0B
    INTERFACE = 0x0C
    NAME = 0x0D
    STRING = 0x0E
    ARRAY = 0x0F
    MAP = 0x10
    SET = 0x11
    STRUCT = 0x12
    DELEGATE = 0x13
    ENUM = 0x14
    OBJECT_PTR = 0x15


@dataclass
class PropertyParam:
    """Parameters a generated property is built from."""

    name: str
    offset: int = 0
    array_dimension: int = 1
    flags: PropertyGenFlags = PropertyGenFlags.NONE
    size: int = 0


class Field:
    """A named member of a reflected type."""

    STATIC_CAST_FLAGS: ClassVar[CastFlags] = CastFlags.FIELD

    def __init__(self, name: str, field_class: FieldClass | None = None) -> None:
        self.type_flag = TypeFlag.NONE
        self.field_class = field_class
        self._name = Name(name)

    @property
    def name(self) -> Name:
        return self._name

    def is_primitive_type(self) -> bool:
        return bool(self.type_flag & TypeFlag.PRIMITIVE)

    def is_class_type(self) -> bool:
        return bool(self.type_flag & TypeFlag.CLASS)

    def is_container_type(self) -> bool:
        return bool(self.type_flag & TypeFlag.CONTAINER)

    def is_garbage_collectable(self) -> bool:
        return bool(self.type_flag & TypeFlag.GARBAGE_COLLECTABLE)


class FieldClass:
    """Describes a kind of field and knows how to construct one."""

    _all: ClassVar[list[FieldClass]] = []
    _by_name: ClassVar[dict[Name, FieldClass]] = {}

    def __init__(
        self,
        name: str,
        id: int,
        cast_flags: int,
        super_class: FieldClass | None,
        construct_fn: Callable[[Name], Field | None],
    ) -> None:
        self._name = Name(name)
        self.id = id
        self.cast_flags = cast_flags
        self.super_class = super_class
        self._construct_fn = construct_fn
        self._default_object: Field | None = None
        FieldClass._all.append(self)
        FieldClass._by_name.setdefault(self._name, self)

    @property
    def name(self) -> str:
        return self._name.to_string()

    @property
    def hname(self) -> Name:
        return self._name

    def construct(self, name: Name) -> Field | None:
        return self._construct_fn(name)

    def default_object(self) -> Field:
        """Return the default field of this class, building it on first use."""
        if self._default_object is None:
            default = self.construct(Name("Default__" + self.name))
            if default is None:
                raise RuntimeError(f"field class {self.name!r} built no default object")
            self._default_object = default
        return self._default_object

    @classmethod
    def all_field_classes(cls) -> list[FieldClass]:
        return cls._all

    @classmethod
    def name_field_class_map(cls) -> dict[Name, FieldClass]:
        return cls._by_name


class Property(Field):
    """A field bound to an attribute of the objects it describes."""

    STATIC_CAST_FLAGS: ClassVar[CastFlags] = CastFlags.FIELD | CastFlags.PROPERTY

    def __init__(
        self, name: str, offset: int = 0, element_size: int = 0, array_dimension: int = 1
    ) -> None:
        super().__init__(name, None)
        self.attribute = name
        self.offset = offset
        self.element_size = element_size
        self.array_dimension = array_dimension
        self.total_size = element_size * array_dimension
        self.property_flags = PropertyFlag(0)

    def get_value(self, obj: Any) -> Any:
        return getattr(obj, self.attribute)

    def set_value(self, obj: Any, value: Any) -> None:
        setattr(obj, self.attribute, value)

    def set_property_flag(self, flag: PropertyFlag) -> None:
        self.property_flags |= flag

    def get_property_flag(self, flag: PropertyFlag) -> bool:
        return bool(self.property_flags & flag)

    def export_to_string(self, obj: Any) -> str:
        """Return the text form of this property's value on ``obj``."""
        return ""


class NumericProperty(Property):
    def export_to_string(self, obj: Any) -> str:
        value = self.get_value(obj)
        if self.get_property_flag(PropertyFlag.FLOAT):
            (single,) = struct.unpack("=f", struct.pack("=f", float(value)))
            return f"{single:f}"
        if self.get_property_flag(PropertyFlag.INT):
            width = self.element_size if self.element_size in (1, 2, 4) else 8
            bits = width * 8
            number = int(value) & ((1 << bits) - 1)
            if not self.get_property_flag(PropertyFlag.UNSIGNED) and number >= 1 << (bits - 1):
                number -= 1 << bits
            return str(number)
        return ""


class BooleanProperty(Property):
    def export_to_string(self, obj: Any) -> str:
        return "true" if self.get_value(obj) else "false"


class CharacterProperty(Property):
    def export_to_string(self, obj: Any) -> str:
        value = self.get_value(obj)
        return value if isinstance(value, str) else chr(value)


class StringProperty(Property):
    pass


class EnumProperty(Property):
    def __init__(
        self, name: str, offset: int = 0, element_size: int = 0, array_dimension: int = 1
    ) -> None:
        super().__init__(name, offset, element_size, array_dimension)
        self.enum: Any = None


class ArrayProperty(Property):
    pass


class ClassProperty(Property):
    pass


class ObjectPtrProperty(Property):
    def __init__(self, param: PropertyParam) -> None:
        super().__init__(param.name, param.offset, param.size)