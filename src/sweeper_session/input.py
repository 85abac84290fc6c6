"""
Translation of raw pointer, touch and keyboard input into game commands.

Whatever the platform gesture, a cell interaction always ends up as one
of exactly two engine calls: reveal or toggle_flag.
"""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Union


# ============================================================================
# Commands
# ============================================================================

class Action(Enum):
    """What the controller should do in response to an input."""

    REVEAL = auto()
    FLAG = auto()
    NEW_GAME = auto()
    TOGGLE_FLAG_MODE = auto()


@dataclass(frozen=True)
class Command:
    """A translated input, with a target cell for REVEAL and FLAG."""

    action: Action
    row: Optional[int] = None
    col: Optional[int] = None


# ============================================================================
# Raw Events
# ============================================================================

class Button(Enum):
    """Mouse button."""

    PRIMARY = auto()
    SECONDARY = auto()


@dataclass(frozen=True)
class Click:
    """Mouse click on a cell."""

    row: int
    col: int
    button: Button = Button.PRIMARY
    ctrl: bool = False
    meta: bool = False
    shift: bool = False
    double: bool = False

    @property
    def has_modifier(self) -> bool:
        return self.ctrl or self.meta or self.shift


@dataclass(frozen=True)
class Touch:
    """Completed touch on a cell, from touchstart to touchend."""

    row: int
    col: int
    duration: float
    moved: bool = False
    cancelled: bool = False


@dataclass(frozen=True)
class KeyPress:
    """Keyboard key, independent of any cell."""

    key: str
    ctrl: bool = False
    meta: bool = False


InputEvent = Union[Click, Touch, KeyPress]


# ============================================================================
# Translator
# ============================================================================

class InputTranslator:
    """
    Maps input events to commands.

    Flag mode turns a plain primary click or tap into a flag toggle, for
    players without a secondary button.
    """

    def __init__(self, long_press_delay: float = 0.5) -> None:
        self.long_press_delay = long_press_delay
        self.flag_mode = False

    def translate(self, event: InputEvent) -> Optional[Command]:
        """
        Turn one event into a command.

        Returns:
            The command, or None if the event means nothing to the game.
        """
        if isinstance(event, Click):
            return self._translate_click(event)
        if isinstance(event, Touch):
            return self._translate_touch(event)
        if isinstance(event, KeyPress):
            return self._translate_key(event)
        raise TypeError(f"Unsupported input event: {event!r}")

    def _translate_click(self, click: Click) -> Command:
        flag = (
            click.button is Button.SECONDARY
            or click.double
            or click.has_modifier
            or self.flag_mode
        )
        return self._cell_command(flag, click.row, click.col)

    def _translate_touch(self, touch: Touch) -> Optional[Command]:
        if touch.moved or touch.cancelled:
            return None
        long_press = touch.duration >= self.long_press_delay
        return self._cell_command(long_press or self.flag_mode, touch.row, touch.col)

    def _translate_key(self, press: KeyPress) -> Optional[Command]:
        key = press.key.lower()
        if key == "r" and (press.ctrl or press.meta):
            return Command(Action.NEW_GAME)
        if key == "n":
            return Command(Action.NEW_GAME)
        if key == "f":
            return Command(Action.TOGGLE_FLAG_MODE)
        return None

    @staticmethod
    def _cell_command(flag: bool, row: int, col: int) -> Command:
        return Command(Action.FLAG if flag else Action.REVEAL, row, col)
