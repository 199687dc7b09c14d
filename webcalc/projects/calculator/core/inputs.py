"""
Input translation: buttons and keyboard keys both become a Command
before they reach the controller.
"""
import enum
from dataclasses import dataclass
from typing import Optional

from webcalc.projects.calculator.core.constants import (
    ACTION_KEYS,
    ACTIONS,
    DIGITS,
    DOT,
    OPERATOR_GLYPHS,
    OPERATORS,
    PARENTHESES,
)


class CommandKind(enum.Enum):
    DIGIT = "digit"
    OPERATOR = "operator"
    DOT = "dot"
    PARENTHESIS = "parenthesis"
    CLEAR = "clear"
    DELETE = "delete"
    PERCENT = "percent"
    CALCULATE = "calculate"


# Kinds that carry a token to append to the buffer
TOKEN_KINDS = (CommandKind.DIGIT, CommandKind.OPERATOR, CommandKind.DOT, CommandKind.PARENTHESIS)

_ACTION_KINDS = {
    "clear": CommandKind.CLEAR,
    "delete": CommandKind.DELETE,
    "percent": CommandKind.PERCENT,
    "calculate": CommandKind.CALCULATE,
}


@dataclass(frozen=True)
class Command:
    kind: CommandKind
    token: Optional[str] = None

    @property
    def appends(self) -> bool:
        return self.kind in TOKEN_KINDS


def command_for_token(token) -> Optional[Command]:
    """Classify a literal token (digit, operator, dot, parenthesis). None if not a token."""
    if not isinstance(token, str) or len(token) != 1:
        return None
    if token in DIGITS:
        return Command(CommandKind.DIGIT, token)
    if token in OPERATORS or token in OPERATOR_GLYPHS:
        return Command(CommandKind.OPERATOR, token)
    if token == DOT:
        return Command(CommandKind.DOT, token)
    if token in PARENTHESES:
        return Command(CommandKind.PARENTHESIS, token)
    return None


def command_for_action(action) -> Optional[Command]:
    if action not in ACTIONS:
        return None
    return Command(_ACTION_KINDS[action])


def command_from_button(value=None, action=None) -> Optional[Command]:
    """
    Translate an on-screen button activation.

    Buttons carry either an action (clear, delete, calculate, percent) or a
    literal value to append. The action wins when both are present.

    Returns:
        Command or None when the button payload is not recognized
    """
    if action:
        return command_for_action(action)
    return command_for_token(value)


def command_from_key(key) -> Optional[Command]:
    """
    Translate a KeyboardEvent.key value.

    Returns:
        Command, or None for keys the calculator ignores (the browser keeps
        its default handling for those)
    """
    if not isinstance(key, str):
        return None
    if key in ACTION_KEYS:
        return command_for_action(ACTION_KEYS[key])
    if key in OPERATOR_GLYPHS:
        # glyphs are button values, not keys
        return None
    return command_for_token(key)


def commands_from_keys(sequence: str) -> list[Command]:
    """Translate a string of typed characters, skipping the ones that are not bound."""
    commands = []
    for key in sequence:
        command = command_from_key(key)
        if command is not None:
            commands.append(command)
    return commands
