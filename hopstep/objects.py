"""Garbage-collected engine objects, object pointers and weak object pointers."""

from __future__ import annotations

import itertools
import threading
from typing import Any, TypeVar

from hopstep.garbage_collector import (
    INVALID_GC_POOL_INDEX,
    GCObject,
    get_garbage_collector,
)
from hopstep.reflection import Class, Reflected, StructBuilder

_U32 = 0xFFFFFFFF
_MAX_CLASS_NAME_LENGTH = 1024

_registered: list[type] = []

T = TypeVar("T", bound="ObjectBase")


def registered_classes() -> list[type]:
    """Return every object class defined so far, in order of definition."""
    return list(_registered)


class ObjectBase(GCObject, Reflected):
    """Root of all reflected, garbage-collected objects."""

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        _registered.append(cls)

    def __init__(self) -> None:
        super().__init__()
        self._class: Class | None = None
        self._name = ""

    @classmethod
    def fill_class(cls, static_class: Class) -> None:
        """Make the nearest object base class the parent of ``static_class``."""
        parent = next(
            (
                base
                for base in cls.__mro__[1:]
                if isinstance(base, type) and issubclass(base, ObjectBase)
            ),
            None,
        )
        if parent is not None:
            StructBuilder.set_super(static_class, parent)

    @property
    def name(self) -> str:
        return self._name

    def get_class(self) -> Class | None:
        return self._class

    def set_class(self, cls: Class) -> None:
        """Attach the runtime class description ``cls`` to this object."""
        if cls is None:
            raise ValueError("an object needs a class")
        self._name = cls.name
        self._class = cls

    def is_a(self, cls: type | Class) -> bool:
        """Return True if this object's class is ``cls`` or derives from it."""
        if self._class is None:
            raise RuntimeError("object has no class")
        target = cls.static_class() if isinstance(cls, type) else cls
        return self._class.is_child_of(target)


_registered.append(ObjectBase)


class Object(ObjectBase):
    """An engine object whose collectable properties keep other objects alive."""

    def gc_properties(self) -> list[GCObject | None]:
        """Return the values of this object's garbage-collectable properties."""
        cls = self.get_class()
        if cls is None:
            raise RuntimeError("object has no class")
        return [
            prop.get_value(self)
            for prop in cls.get_properties()
            if prop is not None
            and not prop.is_primitive_type()
            and prop.is_garbage_collectable()
        ]


def new_object(cls: type[T], *args: Any, **kwargs: Any) -> T:
    """Create an instance of ``cls``, give it its class and register it for collection."""
    if not (isinstance(cls, type) and issubclass(cls, ObjectBase)):
        raise TypeError(f"{cls!r} is not an object class")
    static_class = cls.static_class()
    if not 0 < len(static_class.name) < _MAX_CLASS_NAME_LENGTH:
        raise ValueError(f"class name {static_class.name!r} has an invalid length")
    obj = cls(*args, **kwargs)
    obj.set_class(static_class)
    get_garbage_collector().register(obj)
    return obj


def do_garbage_collect() -> list[GCObject]:
    """Run a full mark and sweep and return the objects it removed."""
    return get_garbage_collector().mark_and_sweep()


def is_valid_low_level(obj: GCObject | None) -> bool:
    """Return True if ``obj`` exists and is held in the collector's pool."""
    return obj is not None and obj.gc_pool_index != INVALID_GC_POOL_INDEX


class ObjectPtr:
    """A plain, nullable reference to an object."""

    __slots__ = ("_handle",)

    def __init__(self, obj: Object | None = None) -> None:
        self._handle = obj

    def get(self) -> Object | None:
        return self._handle

    def __bool__(self) -> bool:
        return self.get() is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ObjectPtr):
            return NotImplemented
        return self._handle is other._handle

    def __hash__(self) -> int:
        return id(self._handle)


class WeakObjectPtr:
    """Refers to an object by pool slot and serial number without keeping it alive."""

    __slots__ = ("_index", "_serial")

    def __init__(
        self, index: int = INVALID_GC_POOL_INDEX, serial_number: int = INVALID_GC_POOL_INDEX
    ) -> None:
        self._index = index
        self._serial = serial_number

    @property
    def index(self) -> int:
        return self._index

    @property
    def serial_number(self) -> int:
        return self._serial

    def is_valid(self) -> bool:
        obj = get_garbage_collector().get_object(self._index)
        return obj is not None and obj.serial_number == self._serial

    def get(self) -> Object | None:
        if not self.is_valid():
            return None
        return get_garbage_collector().get_object(self._index)  # type: ignore[return-value]


_serial_counter = itertools.count(0)
_serial_lock = threading.Lock()


def make_weak_object_ptr(obj: Object) -> WeakObjectPtr:
    """Give ``obj`` a fresh serial number and return a weak pointer to it."""
    if not isinstance(obj, Object):
        raise TypeError(f"{obj!r} is not an Object")
    with _serial_lock:
        serial = next(_serial_counter) & _U32
    obj.serial_number = serial
    return WeakObjectPtr(obj.gc_pool_index, serial)


class World(Object):
    """The game world."""

    def init_world(self) -> bool:
        return False


class StaticMesh(Object):
    """A static mesh asset."""