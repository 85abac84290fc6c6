"""
Play session layer.

Connects a UI to the board engine: input translation, the game
controller and the elapsed-time ticker.
"""
from .ticker import Ticker
from .input import (
    Action,
    Button,
    Click,
    Command,
    InputTranslator,
    KeyPress,
    Touch,
)
from .controller import GameController, SessionConfig

__all__ = [
    "Ticker",
    "Action",
    "Button",
    "Click",
    "Command",
    "InputTranslator",
    "KeyPress",
    "Touch",
    "GameController",
    "SessionConfig",
]
