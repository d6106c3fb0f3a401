"""
Triage actions and the interactive menu used to choose them.
"""

from enum import Enum
from typing import Callable, Optional

from rich.console import Console

from .constants import get_console


class Action(Enum):
    """What to do with a single photo. Values are the 1-based menu positions."""

    MOVE = 1
    COPY = 2
    SKIP = 3
    DELETE = 4
    EXIT = 5

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @classmethod
    def parse(cls, response: str) -> Optional["Action"]:
        """Resolve a menu response: index, name or initial letter. ``0`` cancels."""
        response = response.strip().lower()
        if not response:
            return None
        if response.isdecimal():
            index = int(response)
            if index == 0:
                return cls.EXIT
            for action in cls:
                if action.value == index:
                    return action
            return None
        for action in cls:
            if action.name.lower() == response or action.name[0].lower() == response:
                return action
        return None


class ActionPrompt:
    """Numbered text menu offering every Action, in menu order."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or get_console()

    def show_menu(self) -> None:
        for action in Action:
            self.console.print(f"{action.value}: {action.label}")

    def __call__(self) -> Action:
        self.show_menu()
        while True:
            try:
                response = self.console.input("\nSelection: ")
            except (EOFError, KeyboardInterrupt):
                self.console.print()
                return Action.EXIT

            action = Action.parse(response)
            if action is not None:
                return action
            self.console.print("[yellow]Enter an item from the menu, or 0 to exit[/yellow]")


# Anything returning an Action can stand in for the interactive menu
PromptFunc = Callable[[], Action]
