"""Output devices that receive serialized text."""

from __future__ import annotations

from abc import ABC, abstractmethod

from hopstep.logger import LogType
from hopstep.names import Name


class OutputDevice(ABC):
    """Destination for serialized text."""

    @abstractmethod
    def serialize(self, value: str, verbosity: LogType, category: Name) -> None:
        """Receive one piece of text."""


class StringOutputDevice(OutputDevice):
    """Accumulates everything it receives into one string."""

    def __init__(self, name: str = "") -> None:
        self._value = name

    @property
    def value(self) -> str:
        return self._value

    def serialize(self, value: str, verbosity: LogType, category: Name) -> None:
        self._value += value

    def __iadd__(self, other: str) -> StringOutputDevice:
        self._value += other
        return self

    def __str__(self) -> str:
        return self._value