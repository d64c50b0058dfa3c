"""Mapping of keyboard, mouse and controller events to named actions."""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass
from typing import ClassVar, Optional

ActionCallback = Callable[[bool], None]


class MouseButton(enum.IntEnum):
    """Mouse buttons, valued with the button numbers carried by mouse events."""

    LEFT = 1
    MIDDLE = 2
    RIGHT = 3
    X1 = 4
    X2 = 5


class EventType(enum.Enum):
    """Kinds of input events understood by :class:`InputManager`."""

    CONTROLLER_BUTTON_DOWN = enum.auto()
    CONTROLLER_BUTTON_UP = enum.auto()
    KEY_DOWN = enum.auto()
    KEY_UP = enum.auto()
    MOUSE_BUTTON_DOWN = enum.auto()
    MOUSE_BUTTON_UP = enum.auto()
    QUIT = enum.auto()


@dataclass(frozen=True)
class InputEvent:
    """A single input event.

    ``code`` is the key code for key events, the button number for mouse
    events and the controller button for controller events.
    """

    type: EventType
    code: int = 0


@dataclass
class _ActionData:
    func: Optional[ActionCallback] = None
    is_active: bool = False
    is_pressed: bool = False
    is_released: bool = False


_TRIGGERS = {
    EventType.CONTROLLER_BUTTON_DOWN: ("controller", True),
    EventType.CONTROLLER_BUTTON_UP: ("controller", False),
    EventType.KEY_DOWN: ("key", True),
    EventType.KEY_UP: ("key", False),
    EventType.MOUSE_BUTTON_DOWN: ("mouse", True),
    EventType.MOUSE_BUTTON_UP: ("mouse", False),
}


class InputManager:
    """Binds inputs to actions and tracks their state; only one may exist at a time."""

    _instance: ClassVar[Optional[InputManager]] = None

    def __init__(self) -> None:
        if InputManager._instance is not None:
            raise RuntimeError("only one InputManager can be created")
        self._bindings: dict[str, dict[int, str]] = {
            "key": {},
            "mouse": {},
            "controller": {},
        }
        self._actions: dict[str, _ActionData] = {}
        InputManager._instance = self

    def close(self) -> None:
        """Release the global instance slot held by this manager."""
        if InputManager._instance is self:
            InputManager._instance = None

    def __enter__(self) -> InputManager:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def bind_key_pressed(self, key_code: int, action: str) -> None:
        """Make ``key_code`` trigger ``action``; an empty action removes the binding."""
        keys = self._bindings["key"]
        if action:
            keys[key_code] = action
        else:
            keys.pop(key_code, None)

    def bind_mouse_button_pressed(self, button: MouseButton, action: str) -> None:
        """Make the mouse ``button`` trigger ``action``."""
        self._bindings["mouse"][MouseButton(button).value] = action

    def bind_controller_button(self, button: int, action: str) -> None:
        """Make the controller ``button`` trigger ``action``."""
        self._bindings["controller"][button] = action

    def clear_bindings(self) -> None:
        """Forget every key, mouse and controller binding."""
        for table in self._bindings.values():
            table.clear()

    def handle_event(self, event: InputEvent) -> None:
        """Trigger or release the action bound to the event's input, if any."""
        route = _TRIGGERS.get(event.type)
        if route is None:
            return
        kind, down = route
        action = self._bindings[kind].get(int(event.code))
        if action is None:
            return
        if down:
            self._trigger(action)
        else:
            self._release(action)

    def is_active(self, action: str) -> bool:
        """Return whether the action is currently held."""
        data = self._actions.get(action)
        return data is not None and data.is_active

    def is_pressed(self, action: str) -> bool:
        """Return whether the action started this frame."""
        data = self._actions.get(action)
        return data is not None and data.is_pressed

    def is_released(self, action: str) -> bool:
        """Return whether the action ended this frame."""
        data = self._actions.get(action)
        return data is not None and data.is_released

    def on_action(self, action: str, func: Optional[ActionCallback]) -> None:
        """Call ``func(active)`` whenever ``action`` is triggered or released."""
        self._action_data(action).func = func

    def update(self) -> None:
        """End the frame: clear every pressed and released flag."""
        for data in self._actions.values():
            data.is_pressed = False
            data.is_released = False

    @classmethod
    def instance(cls) -> InputManager:
        """Return the live manager; raises RuntimeError if there is none."""
        if InputManager._instance is None:
            raise RuntimeError("InputManager hasn't been instantiated")
        return InputManager._instance

    def _action_data(self, action: str) -> _ActionData:
        return self._actions.setdefault(action, _ActionData())

    def _trigger(self, action: str) -> None:
        data = self._action_data(action)
        if not data.is_active:
            data.is_pressed = True
        data.is_active = True
        if data.func is not None:
            data.func(True)

    def _release(self, action: str) -> None:
        data = self._action_data(action)
        if data.is_active:
            data.is_released = True
        data.is_active = False
        if data.func is not None:
            data.func(False)