"""
Constants for the calculator: limits, display tokens, key bindings.
Single source of truth for the controller, the input translation and the page template.
"""

MAX_LENGTH = 30
PRECISION = 12

EMPTY_DISPLAY = "0"
ERROR_DISPLAY = "Error"

DIGITS = "0123456789"
OPERATORS = "+-*/"
PARENTHESES = "()"
DOT = "."

# Glyphs shown on the buttons -> ASCII operators the evaluator understands
OPERATOR_GLYPHS = {
    "\u00d7": "*",  # ×
    "\u00f7": "/",  # ÷
    "\u2212": "-",  # − (minus sign, not hyphen)
}

ACTIONS = ("clear", "delete", "calculate", "percent")

# Non-character keys (KeyboardEvent.key) -> action
ACTION_KEYS = {
    "Enter": "calculate",
    "=": "calculate",
    "Backspace": "delete",
    "c": "clear",
    "C": "clear",
    "%": "percent",
}

# Every key the page intercepts; anything else keeps its browser default
KEY_BINDINGS = sorted(
    set(DIGITS) | set(OPERATORS) | set(PARENTHESES) | {DOT} | set(ACTION_KEYS)
)

# Button layout rendered by calculator.html: (label, kind, payload)
BUTTON_ROWS = [
    [("C", "action", "clear"), ("(", "value", "("), (")", "value", ")"), ("÷", "value", "÷")],
    [("7", "value", "7"), ("8", "value", "8"), ("9", "value", "9"), ("×", "value", "×")],
    [("4", "value", "4"), ("5", "value", "5"), ("6", "value", "6"), ("−", "value", "−")],
    [("1", "value", "1"), ("2", "value", "2"), ("3", "value", "3"), ("+", "value", "+")],
    [("%", "action", "percent"), ("0", "value", "0"), (".", "value", "."), ("⌫", "action", "delete")],
    [("=", "action", "calculate")],
]

SESSION_KEY = "calculator"
