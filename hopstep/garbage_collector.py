"""Mark-and-sweep collection over a pool of registered objects."""

from __future__ import annotations

from abc import ABC, abstractmethod

INVALID_GC_POOL_INDEX = 0xFFFFFFFF


class GCObject(ABC):
    """An object that the garbage collector tracks."""

    def __init__(self) -> None:
        self.gc_pool_index = INVALID_GC_POOL_INDEX
        self.serial_number = INVALID_GC_POOL_INDEX
        self.gc_root = False
        self.gc_mark = False

    @abstractmethod
    def gc_properties(self) -> list[GCObject | None]:
        """Return the collectable objects this one refers to."""


class GarbageCollector:
    """Keeps registered objects in a pool and frees the unreachable ones."""

    def __init__(self) -> None:
        self._objects: list[GCObject | None] = []
        self._free_indexes: list[int] = []

    def __len__(self) -> int:
        return sum(1 for obj in self._objects if obj is not None)

    def register(self, obj: GCObject) -> int:
        """Place ``obj`` in the pool and return its index."""
        if obj is None or obj.gc_pool_index != INVALID_GC_POOL_INDEX:
            raise ValueError("object is missing or already registered")
        if self._free_indexes:
            index = self._free_indexes.pop()
            self._objects[index] = obj
        else:
            index = len(self._objects)
            self._objects.append(obj)
        obj.gc_pool_index = index
        return index

    def mark(self) -> None:
        """Mark every object reachable from a root."""
        frontier = [obj for obj in self._objects if obj is not None and obj.gc_root]
        for obj in frontier:
            obj.gc_mark = True
        while frontier:
            pending: list[GCObject] = []
            for obj in frontier:
                for child in obj.gc_properties():
                    if child is None or child.gc_mark:
                        continue
                    child.gc_mark = True
                    pending.append(child)
            frontier = pending

    def sweep(self) -> list[GCObject]:
        """Remove unmarked objects, clear marks, and return what was removed."""
        removed: list[GCObject] = []
        for index, obj in enumerate(self._objects):
            if obj is None:
                continue
            if obj.gc_mark:
                obj.gc_mark = False
                continue
            if obj.gc_pool_index != index:
                raise RuntimeError(
                    f"object at slot {index} claims pool index {obj.gc_pool_index}"
                )
            self._objects[index] = None
            self._free_indexes.append(index)
            removed.append(obj)
        for obj in removed:
            obj.gc_pool_index = INVALID_GC_POOL_INDEX
        return removed

    def mark_and_sweep(self) -> list[GCObject]:
        self.mark()
        return self.sweep()

    def shutdown(self) -> None:
        """Collect, then release every remaining object and empty the pool."""
        self.mark_and_sweep()
        for obj in self._objects:
            if obj is not None:
                obj.gc_pool_index = INVALID_GC_POOL_INDEX
        self._objects.clear()
        self._free_indexes.clear()

    def get_object(self, index: int) -> GCObject | None:
        if index < 0 or index >= len(self._objects):
            return None
        return self._objects[index]


_COLLECTOR = GarbageCollector()


def get_garbage_collector() -> GarbageCollector:
    """Return the process-wide garbage collector."""
    return _COLLECTOR