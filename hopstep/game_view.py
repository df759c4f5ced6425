"""Keyboard input dispatch and a simple free-moving camera view."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import NamedTuple

VK_ESCAPE = 0x1B

_STATE_TEXT = {True: "On", False: "Off"}


def _key_code(key: int | str) -> int:
    if isinstance(key, str):
        if len(key) != 1:
            raise ValueError("a key given as text must be a single character")
        return ord(key)
    return int(key)


class InputHandleable(ABC):
    """Receives key presses and releases."""

    @abstractmethod
    def on_key_down(self, key: int | str) -> None:
        """Handle a key press."""

    @abstractmethod
    def on_key_up(self, key: int | str) -> None:
        """Handle a key release."""


class MessageHandler:
    """Forwards key events to every registered handler in order."""

    def __init__(self) -> None:
        self._handlers: list[InputHandleable] = []

    @property
    def handlers(self) -> tuple[InputHandleable, ...]:
        return tuple(self._handlers)

    def register_key_handler(self, handler: InputHandleable) -> None:
        self._handlers.append(handler)

    def handle_key_up(self, key: int | str) -> None:
        for handler in self._handlers:
            handler.on_key_up(key)

    def handle_key_down(self, key: int | str) -> None:
        for handler in self._handlers:
            handler.on_key_down(key)


class Vec3(NamedTuple):
    x: float
    y: float
    z: float


@dataclass
class KeyPressed:
    w: bool = False
    a: bool = False
    s: bool = False
    d: bool = False


def _format_float(value: float) -> str:
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


class GameView(InputHandleable):
    """A camera moved on the XZ plane with the W, A, S and D keys."""

    def __init__(self) -> None:
        self.press_state = KeyPressed()
        self.position = Vec3(0.0, 0.0, 0.0)
        self.move_speed = 20.0
        self.turn_speed = math.pi / 2
        self.yaw = math.pi
        self.pitch = 0.0
        self.look_direction = Vec3(0.0, 0.0, -1.0)
        self.up_direction = Vec3(0.0, 1.0, 0.0)

    def init(self, position: Vec3 | tuple[float, float, float]) -> None:
        """Set the position, then restore the default camera state."""
        self.position = Vec3(*position)
        self.reset()

    def update(self, delta_time: float) -> None:
        """Move according to the pressed keys and refresh the look direction."""
        move_x = 0.0
        move_z = 0.0
        if self.press_state.a:
            move_x -= 1.0
        if self.press_state.d:
            move_x += 1.0
        if self.press_state.w:
            move_z -= 1.0
        if self.press_state.s:
            move_z += 1.0

        if abs(move_x) > 0.1 and abs(move_z) > 0.1:
            length = math.hypot(move_x, move_z)
            move_x /= length
            move_z /= length

        interval = self.move_speed * delta_time
        step_x = move_x * -math.cos(self.yaw) - move_z * math.sin(self.yaw)
        step_z = move_x * math.sin(self.yaw) - move_z * math.cos(self.yaw)
        self.position = Vec3(
            self.position.x + step_x * interval,
            self.position.y,
            self.position.z + step_z * interval,
        )

        radius = math.cos(self.pitch)
        self.look_direction = Vec3(
            radius * math.sin(self.yaw),
            math.sin(self.pitch),
            radius * math.cos(self.yaw),
        )

    def _set_key(self, key: int | str, pressed: bool) -> bool:
        code = _key_code(key)
        attribute = {ord("W"): "w", ord("A"): "a", ord("S"): "s", ord("D"): "d"}.get(code)
        if attribute is None:
            return False
        setattr(self.press_state, attribute, pressed)
        return True

    def on_key_down(self, key: int | str) -> None:
        if not self._set_key(key, True) and _key_code(key) == VK_ESCAPE:
            self.reset()

    def on_key_up(self, key: int | str) -> None:
        self._set_key(key, False)

    def reset(self) -> None:
        self.position = Vec3(0.0, 0.0, 0.0)
        self.yaw = math.pi
        self.pitch = 0.0
        self.look_direction = Vec3(0.0, 0.0, -1.0)

    def to_string(self) -> str:
        pressed = self.press_state
        lines = [
            "PressState:",
            f"\tW: {_STATE_TEXT[bool(pressed.w)]}",
            f"\tA: {_STATE_TEXT[bool(pressed.a)]}",
            f"\tS: {_STATE_TEXT[bool(pressed.s)]}",
            f"\tD: {_STATE_TEXT[bool(pressed.d)]}",
            "\tPos: " + ",".join(_format_float(v) for v in self.position),
        ]
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.to_string()