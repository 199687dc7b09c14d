"""
Expression buffer controller.

Owns the text of the expression being typed and the display that shows it.
Every operation runs to completion and never raises: a bad expression puts
the controller into the error state (display "Error", empty buffer) and the
next keypress starts over.
"""
import enum
import logging
import re

from webcalc.projects.calculator.core.constants import (
    DIGITS,
    EMPTY_DISPLAY,
    ERROR_DISPLAY,
    MAX_LENGTH,
    PRECISION,
)
from webcalc.projects.calculator.core.evaluator import CalculatorError, calculate_expression
from webcalc.projects.calculator.core.inputs import Command, CommandKind
from webcalc.projects.calculator.core.numbers import format_number, parse_number

logger = logging.getLogger(__name__)

# Shortest prefix, then the longest number the buffer ends with
TRAILING_NUMBER = re.compile(r"(.*?)([0-9]+\.?[0-9]*)")


class CalculatorState(enum.Enum):
    IDLE = "idle"
    ERROR = "error"


class CalculatorController:
    """
    Calculator state machine over a single expression buffer.

    Args:
        max_length (int): Longest buffer append() will grow
        precision (int): Significant digits kept in calculated results
        renderer (callable, optional): Called with the display text after every refresh
    """

    def __init__(self, max_length=MAX_LENGTH, precision=PRECISION, renderer=None):
        self.max_length = max_length
        self.precision = precision
        self.renderer = renderer
        self._expression = ""
        self._display = EMPTY_DISPLAY
        self._state = CalculatorState.IDLE
        self.clear()

    @property
    def expression(self):
        return self._expression

    @property
    def display(self):
        return self._display

    @property
    def state(self):
        return self._state

    def _show(self, text):
        self._display = text
        if self.renderer is not None:
            self.renderer(text)

    def _update_display(self):
        self._state = CalculatorState.IDLE
        self._show(self._expression if self._expression else EMPTY_DISPLAY)

    def _fail(self, reason):
        logger.info(f"Calculation failed for {self._expression!r}: {reason}")
        self._expression = ""
        self._state = CalculatorState.ERROR
        self._show(ERROR_DISPLAY)

    def append(self, token):
        """Append a digit, operator, dot or parenthesis."""
        if len(self._expression) >= self.max_length:
            return
        # no "00"; "0" followed by a digit becomes that digit
        if self._expression == "0" and token == "0":
            return
        if self._expression == "0" and any(ch in DIGITS for ch in token):
            self._expression = token
        else:
            self._expression += token
        self._update_display()

    def delete(self):
        """Remove the last character."""
        self._expression = self._expression[:-1]
        self._update_display()

    def clear(self):
        self._expression = ""
        self._update_display()

    def percent(self):
        """Replace the trailing number with that number divided by 100."""
        match = TRAILING_NUMBER.fullmatch(self._expression)
        if not match:
            return
        prefix, number = match.groups()
        self._expression = prefix + format_number(parse_number(number) / 100)
        self._update_display()

    def calculate(self):
        """Evaluate the buffer and replace it with the result."""
        if not self._expression:
            return
        try:
            result = calculate_expression(self._expression, self.precision)
        except CalculatorError as e:
            self._fail(str(e))
            return
        self._expression = result
        self._update_display()

    def dispatch(self, command: Command):
        """Apply a Command from the button or keyboard translation."""
        if command.appends:
            self.append(command.token)
        elif command.kind == CommandKind.CLEAR:
            self.clear()
        elif command.kind == CommandKind.DELETE:
            self.delete()
        elif command.kind == CommandKind.PERCENT:
            self.percent()
        elif command.kind == CommandKind.CALCULATE:
            self.calculate()

    def snapshot(self) -> dict:
        """Serializable state, e.g. for the Flask session."""
        return {
            "expression": self._expression,
            "error": self._state == CalculatorState.ERROR,
        }

    @classmethod
    def from_snapshot(cls, snapshot, **kwargs):
        """Rebuild a controller from snapshot(); missing or malformed data gives a cleared one."""
        controller = cls(**kwargs)
        if not isinstance(snapshot, dict):
            return controller
        if snapshot.get("error"):
            controller._expression = ""
            controller._state = CalculatorState.ERROR
            controller._display = ERROR_DISPLAY
            return controller
        expression = snapshot.get("expression")
        if isinstance(expression, str):
            controller._expression = expression
            controller._display = expression if expression else EMPTY_DISPLAY
        return controller

    def to_dict(self) -> dict:
        return {
            "display": self._display,
            "expression": self._expression,
            "state": self._state.value,
        }
