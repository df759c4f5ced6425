"""Runtime type descriptions: structs, classes, their properties and callable functions."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from typing import Any, Callable, NamedTuple, Union

from hopstep.properties import (
    ArrayProperty,
    ObjectPtrProperty,
    Property,
    PropertyFlag,
    PropertyGenFlags,
    PropertyParam,
    TypeFlag,
)
from hopstep.variadic_stack import VariadicStack

CALL_FRAME_SIZE = 256


class Type:
    """A named runtime type."""

    def __init__(self, name: str) -> None:
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._name!r})"


class Enum(Type):
    """A reflected enumeration type."""


class Struct(Type):
    """A type with an optional parent and a list of properties."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self._super: Struct | None = None
        self._properties: list[Property] = []

    @property
    def super_struct(self) -> Struct | None:
        return self._super

    @property
    def own_properties(self) -> tuple[Property, ...]:
        return tuple(self._properties)

    def get_properties(self, include_super: bool = True) -> list[Property]:
        """Return the properties, those of the parents first when asked for."""
        result: list[Property] = []
        if include_super:
            ancestor = self._super
            while ancestor is not None:
                result.extend(ancestor._properties)
                ancestor = ancestor._super
        result.extend(self._properties)
        return result

    def find_property(self, name: str) -> Property | None:
        """Return the first property called ``name``, parents included."""
        return next(
            (prop for prop in self.get_properties() if prop.name.to_string() == name),
            None,
        )

    def is_child_of(self, other: Struct | type) -> bool:
        """Return True if ``other`` is this struct or one of its parents."""
        target = _resolve_struct(other)
        current: Struct | None = self
        while current is not None:
            if current is target:
                return True
            current = current._super
        return False


class Class(Struct):
    """A struct that also carries callable functions."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self._functions: list[Function] = []

    def get_functions(self) -> list[Function]:
        return list(self._functions)

    def find_function(self, name: str) -> Function | None:
        return next((func for func in self._functions if func.name == name), None)


class FunctionCallFrame(VariadicStack):
    """The argument stack handed to a function when it is invoked."""

    def __init__(self) -> None:
        super().__init__(CALL_FRAME_SIZE)

    def pop_params(self, count: int) -> list[Any]:
        """Pop ``count`` arguments and return them in the order they were passed."""
        popped = [self.pop_reference() for _ in range(count)]
        popped.reverse()
        return popped


NativeFunc = Callable[[Any, FunctionCallFrame], Any]


class Function(Struct, ABC):
    """A callable member of a reflected class."""

    def __init__(self, name: str, owner: Struct | None = None) -> None:
        super().__init__(name)
        self._owner = owner

    @property
    def owner(self) -> Struct | None:
        return self._owner

    def invoke(self, instance: Any, *args: Any) -> Any:
        """Push ``args`` on a fresh frame, call on ``instance`` and return the result."""
        frame = FunctionCallFrame()
        for arg in args:
            frame.push_reference(arg)
        return self._invoke_impl(instance, frame)

    @abstractmethod
    def _invoke_impl(self, instance: Any, frame: FunctionCallFrame) -> Any:
        """Run the function body against ``frame``."""


class NativeFunction(Function):
    """A function whose body is a Python callable taking (instance, frame)."""

    def __init__(
        self, name: str, owner: Struct | None = None, func: NativeFunc | None = None
    ) -> None:
        super().__init__(name, owner)
        self._func = func

    def _invoke_impl(self, instance: Any, frame: FunctionCallFrame) -> Any:
        if instance is None or self._func is None:
            raise ValueError(f"function {self.name!r} needs an instance and a body")
        return self._func(instance, frame)


class _FieldTraits(NamedTuple):
    label: str
    size: int
    integral: bool = False
    floating: bool = False
    unsigned: bool = False
    is_class: bool = False
    collectable: bool = False


class FieldType(enum.Enum):
    """The native kind of value a reflected field holds."""

    BOOL = _FieldTraits("bool", 1, integral=True, unsigned=True)
    CHAR = _FieldTraits("char", 2, integral=True, unsigned=True)
    INT8 = _FieldTraits("int8", 1, integral=True)
    INT16 = _FieldTraits("int16", 2, integral=True)
    INT32 = _FieldTraits("int32", 4, integral=True)
    INT64 = _FieldTraits("int64", 8, integral=True)
    UINT8 = _FieldTraits("uint8", 1, integral=True, unsigned=True)
    UINT16 = _FieldTraits("uint16", 2, integral=True, unsigned=True)
    UINT32 = _FieldTraits("uint32", 4, integral=True, unsigned=True)
    UINT64 = _FieldTraits("uint64", 8, integral=True, unsigned=True)
    FLOAT = _FieldTraits("float", 4, floating=True)
    DOUBLE = _FieldTraits("double", 8, floating=True)
    ENUM = _FieldTraits("enum", 4)
    STRING = _FieldTraits("string", 32, is_class=True)
    ARRAY = _FieldTraits("array", 24, is_class=True)
    CLASS_POINTER = _FieldTraits("class_pointer", 8, is_class=True)
    OBJECT_POINTER = _FieldTraits("object_pointer", 8, is_class=True, collectable=True)

    @property
    def size(self) -> int:
        return self.value.size

    @property
    def integral(self) -> bool:
        return self.value.integral

    @property
    def floating(self) -> bool:
        return self.value.floating

    @property
    def unsigned(self) -> bool:
        return self.value.unsigned

    @property
    def is_class(self) -> bool:
        return self.value.is_class

    @property
    def collectable(self) -> bool:
        return self.value.collectable


def _resolve_struct(target: Union[Struct, type]) -> Struct:
    if isinstance(target, Struct):
        return target
    static_class = getattr(target, "static_class", None)
    if isinstance(target, type) and callable(static_class):
        return static_class()
    raise TypeError(f"{target!r} is neither a struct nor a reflected class")


class StructBuilder:
    """Fills structs and classes with properties, parents and functions."""

    @staticmethod
    def add_property(
        struct: Struct, name: str, field_type: FieldType, property_type: type[Property]
    ) -> Property:
        """Append a property of ``property_type`` describing attribute ``name``."""
        if not (isinstance(property_type, type) and issubclass(property_type, Property)):
            raise TypeError(f"{property_type!r} is not a property type")
        field_type = FieldType(field_type)
        offset = sum(prop.total_size for prop in struct._properties)
        if issubclass(property_type, ObjectPtrProperty):
            prop = property_type(
                PropertyParam(name, offset, 1, PropertyGenFlags.OBJECT_PTR, field_type.size)
            )
        else:
            prop = property_type(name, offset, field_type.size)
        StructBuilder._initialize_property_flags(prop, field_type, property_type)
        struct._properties.append(prop)
        return prop

    @staticmethod
    def _initialize_property_flags(
        prop: Property, field_type: FieldType, property_type: type[Property]
    ) -> None:
        if field_type.integral:
            prop.set_property_flag(PropertyFlag.INT)
        elif field_type.floating:
            prop.set_property_flag(PropertyFlag.FLOAT)
        if field_type.unsigned:
            prop.set_property_flag(PropertyFlag.UNSIGNED)
        if field_type.is_class:
            prop.set_property_flag(PropertyFlag.CLASS)
            prop.type_flag |= TypeFlag.CLASS
        if property_type is ArrayProperty:
            prop.set_property_flag(PropertyFlag.ARRAY)
            prop.type_flag |= TypeFlag.CONTAINER
        if field_type.collectable:
            prop.type_flag |= TypeFlag.GARBAGE_COLLECTABLE
        if not prop.is_class_type() and not prop.is_container_type():
            prop.type_flag |= TypeFlag.PRIMITIVE

    @staticmethod
    def set_super(struct: Struct, super_type: Union[Struct, type]) -> None:
        """Make ``super_type`` (a struct or reflected class) the parent of ``struct``."""
        struct._super = _resolve_struct(super_type)

    @staticmethod
    def add_native_function(owner: Class, func: NativeFunc, name: str) -> NativeFunction:
        """Append a native function called ``name`` to ``owner``."""
        function = NativeFunction(name, owner, func)
        owner._functions.append(function)
        return function


class Reflected:
    """Mixin giving a Python class a lazily built runtime Class description."""

    @classmethod
    def static_class(cls) -> Class:
        """Return this class's description, building it on first use."""
        existing = cls.__dict__.get("_reflected_class")
        if existing is None:
            existing = Class(cls.__name__)
            cls._reflected_class = existing
            cls.fill_class(existing)
        return existing

    @classmethod
    def fill_class(cls, static_class: Class) -> None:
        """Describe this class's properties, parent and functions; none by default."""