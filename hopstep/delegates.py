"""Single-cast delegates bound to lambdas, plain functions or methods."""

from __future__ import annotations

import itertools
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable

_U64 = 0xFFFFFFFFFFFFFFFF

_id_counter = itertools.count(1)
_id_lock = threading.Lock()


def _generate_new_id() -> int:
    with _id_lock:
        result = next(_id_counter) & _U64
        if result == 0:
            result = next(_id_counter) & _U64
    return result


@dataclass(eq=True)
class DelegateHandle:
    """Identifies one binding of a delegate; zero means no binding."""

    id: int = 0

    @classmethod
    def generate(cls) -> DelegateHandle:
        """Return a handle with a fresh, non-zero identifier."""
        return cls(_generate_new_id())

    def is_valid(self) -> bool:
        return self.id != 0

    def reset(self) -> None:
        self.id = 0


class DelegateInstance(ABC):
    """A bound callable plus the payload values appended to every call."""

    def __init__(self, *payload: Any) -> None:
        self._payload = payload
        self._handle = DelegateHandle.generate()
        self._function_name = ""
        self._bound_object: Any = None

    @property
    def handle(self) -> DelegateHandle:
        return self._handle

    @property
    def payload(self) -> tuple[Any, ...]:
        return self._payload

    @property
    def function_name(self) -> str:
        """Name of the bound function; instances here carry no name."""
        return self._function_name

    @property
    def bound_object(self) -> Any:
        """Engine object the binding belongs to; instances here have none."""
        return self._bound_object

    def is_executable(self) -> bool:
        return True

    @abstractmethod
    def execute(self, *args: Any) -> Any:
        """Call the bound target and return its result."""

    @abstractmethod
    def execute_if_safe(self, *args: Any) -> bool:
        """Call the bound target if possible; return whether it was called."""


class FunctorDelegateInstance(DelegateInstance):
    """Delegate instance wrapping any callable object."""

    def __init__(self, functor: Callable[..., Any], *payload: Any) -> None:
        if not callable(functor):
            raise TypeError("functor must be callable")
        super().__init__(*payload)
        self._functor = functor

    def execute(self, *args: Any) -> Any:
        return self._functor(*args, *self._payload)

    def execute_if_safe(self, *args: Any) -> bool:
        self._functor(*args, *self._payload)
        return True


class StaticDelegateInstance(DelegateInstance):
    """Delegate instance wrapping a free function."""

    def __init__(self, function: Callable[..., Any], *payload: Any) -> None:
        if function is None:
            raise ValueError("a static delegate needs a function")
        if not callable(function):
            raise TypeError("function must be callable")
        super().__init__(*payload)
        self._function = function

    def execute(self, *args: Any) -> Any:
        return self._function(*args, *self._payload)

    def execute_if_safe(self, *args: Any) -> bool:
        self._function(*args, *self._payload)
        return True


class MethodDelegateInstance(DelegateInstance):
    """Delegate instance calling an unbound method on a given object."""

    def __init__(self, obj: Any, method: Callable[..., Any], *payload: Any) -> None:
        if obj is None or method is None:
            raise ValueError("a method delegate needs both an object and a method")
        if not callable(method):
            raise TypeError("method must be callable")
        super().__init__(*payload)
        self._obj = obj
        self._method = method

    def execute(self, *args: Any) -> Any:
        return self._method(self._obj, *args, *self._payload)

    def execute_if_safe(self, *args: Any) -> bool:
        if self._obj is None or self._method is None:
            return False
        self._method(self._obj, *args, *self._payload)
        return True


class Delegate:
    """Holds at most one bound target and calls it on demand."""

    def __init__(self) -> None:
        self._instance: DelegateInstance | None = None

    @property
    def instance(self) -> DelegateInstance | None:
        return self._instance

    @property
    def handle(self) -> DelegateHandle:
        """Handle of the current binding, or an invalid handle when unbound."""
        if self._instance is None:
            return DelegateHandle()
        return self._instance.handle

    def bind_lambda(self, functor: Callable[..., Any], *args: Any) -> None:
        self.unbind()
        self._instance = FunctorDelegateInstance(functor, *args)

    def bind_static(self, function: Callable[..., Any], *args: Any) -> None:
        self.unbind()
        self._instance = StaticDelegateInstance(function, *args)

    def bind_method(self, obj: Any, method: Callable[..., Any], *args: Any) -> None:
        self.unbind()
        self._instance = MethodDelegateInstance(obj, method, *args)

    def unbind(self) -> None:
        self._instance = None

    def is_bound(self) -> bool:
        return self._instance is not None

    def execute(self, *args: Any) -> Any:
        """Call the bound target; raise RuntimeError when nothing is bound."""
        if self._instance is None:
            raise RuntimeError("delegate is not bound")
        return self._instance.execute(*args)

    def execute_if_bound(self, *args: Any) -> bool:
        """Call the bound target if there is one; return whether it ran."""
        if self._instance is None:
            return False
        return self._instance.execute_if_safe(*args)

    def __bool__(self) -> bool:
        return self.is_bound()