from gazool.console.model import CONSOLE_HEIGHT, CONSOLE_WIDTH, Console
from gazool.console.view import BaseView, ScriptedView

__all__ = [
    "CONSOLE_HEIGHT",
    "CONSOLE_WIDTH",
    "Console",
    "BaseView",
    "ScriptedView",
]
