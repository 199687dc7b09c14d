"""
Arithmetic evaluation for calculator expressions.

Input is checked against a character allow-list, then tokenized and evaluated
by a small recursive-descent parser. Nothing is ever handed to eval().

Semantics follow browser arithmetic so results match what users expect from
a web calculator:
  - precedence: + -  <  * /  <  ** (right-associative)  <  unary + -
  - "-2**2" is rejected (unary operator as the base of **), "2**-1" is fine
  - "++" / "--" written together are rejected, "2- -3" is fine
  - numbers like "05" (leading zero before another digit) are rejected
  - division by zero gives Infinity or NaN instead of raising
"""
import math
import re

from webcalc.projects.calculator.core.constants import OPERATOR_GLYPHS, PRECISION
from webcalc.projects.calculator.core.numbers import format_number, parse_number, to_precision

# allowed: digits, whitespace, + - * / ( ) .
SAFE_PATTERN = re.compile(r"[0-9\s+\-*/().]+")
NUMBER_PATTERN = re.compile(r"[0-9]+\.?[0-9]*|\.[0-9]+")

ADDITIVE = ("+", "-")
MULTIPLICATIVE = ("*", "/")
POWER = "**"


class CalculatorError(ValueError):
    """Base class for expressions the calculator cannot turn into a number."""


class InvalidExpression(CalculatorError):
    """Expression contains characters outside the allow-list."""


class EvaluationFailure(CalculatorError):
    """Expression is malformed or its value is not a finite number."""


def normalize_operators(text: str) -> str:
    """Replace the display glyphs (multiply, divide, minus sign) with ASCII operators."""
    for glyph, operator in OPERATOR_GLYPHS.items():
        text = text.replace(glyph, operator)
    return text


def is_safe(text: str) -> bool:
    """True if text only contains digits, whitespace and + - * / ( ) ."""
    return SAFE_PATTERN.fullmatch(text) is not None


def tokenize(text: str) -> list:
    """
    Split an expression into tokens.

    Numbers become floats; operators and parentheses stay strings.

    Raises:
        InvalidExpression: a character outside the allow-list
        EvaluationFailure: an operator sequence that is not valid arithmetic
    """
    tokens = []
    i, n = 0, len(text)
    while i < n:
        ch = text[i]
        nxt = text[i + 1] if i + 1 < n else ""

        if ch.isspace():
            i += 1
            continue

        if ch.isdigit() or (ch == "." and nxt.isdigit()):
            match = NUMBER_PATTERN.match(text, i)
            if match is None:
                raise InvalidExpression(f"Unexpected character {ch!r}")
            literal = match.group()
            whole = literal.split(".")[0]
            if len(whole) > 1 and whole.startswith("0"):
                raise EvaluationFailure(f"Leading zero in number {literal!r}")
            tokens.append(parse_number(literal))
            i = match.end()
            continue

        if ch == "*":
            if nxt == "*":
                tokens.append(POWER)
                i += 2
            else:
                tokens.append("*")
                i += 1
            continue

        if ch == "/":
            if nxt in ("/", "*"):
                raise EvaluationFailure(f"Unexpected {ch + nxt!r}")
            tokens.append("/")
            i += 1
            continue

        if ch in ADDITIVE:
            if nxt == ch:
                raise EvaluationFailure(f"Unexpected {ch + nxt!r}")
            tokens.append(ch)
            i += 1
            continue

        if ch in "().":
            tokens.append(ch)
            i += 1
            continue

        raise InvalidExpression(f"Unexpected character {ch!r}")
    return tokens


def _divide(left: float, right: float) -> float:
    if right == 0:
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


def _is_odd_integer(value: float) -> bool:
    return math.isfinite(value) and value.is_integer() and value % 2 == 1


def _power(base: float, exponent: float) -> float:
    if math.isnan(exponent):
        return math.nan
    if exponent == 0:
        return 1.0
    if math.isnan(base) or (abs(base) == 1 and math.isinf(exponent)):
        return math.nan
    try:
        return math.pow(base, exponent)
    except OverflowError:
        return -math.inf if base < 0 and _is_odd_integer(exponent) else math.inf
    except ValueError:
        if base == 0:
            negative = math.copysign(1.0, base) < 0 and _is_odd_integer(exponent)
            return -math.inf if negative else math.inf
        return math.nan


class _Parser:
    """Recursive-descent parser that evaluates while it parses."""

    def __init__(self, tokens):
        self.tokens = tokens
        self.pos = 0

    def peek(self):
        return self.tokens[self.pos] if self.pos < len(self.tokens) else None

    def advance(self):
        token = self.peek()
        if token is None:
            raise EvaluationFailure("Unexpected end of expression")
        self.pos += 1
        return token

    def parse(self) -> float:
        if not self.tokens:
            raise EvaluationFailure("Empty expression")
        value = self.additive()
        if self.peek() is not None:
            raise EvaluationFailure(f"Unexpected token {self.peek()!r}")
        return value

    def additive(self) -> float:
        value = self.multiplicative()
        while self.peek() in ADDITIVE:
            operator = self.advance()
            right = self.multiplicative()
            value = value + right if operator == "+" else value - right
        return value

    def multiplicative(self) -> float:
        value = self.exponential()
        while self.peek() in MULTIPLICATIVE:
            operator = self.advance()
            right = self.exponential()
            value = value * right if operator == "*" else _divide(value, right)
        return value

    def exponential(self) -> float:
        if self.peek() in ADDITIVE:
            value = self.unary()
            if self.peek() == POWER:
                raise EvaluationFailure("Unary operator used as the base of **")
            return value
        base = self.primary()
        if self.peek() == POWER:
            self.advance()
            return _power(base, self.exponential())
        return base

    def unary(self) -> float:
        if self.peek() in ADDITIVE:
            operator = self.advance()
            operand = self.unary()
            return -operand if operator == "-" else operand
        return self.primary()

    def primary(self) -> float:
        token = self.advance()
        if isinstance(token, float):
            return token
        if token == "(":
            value = self.additive()
            if self.advance() != ")":
                raise EvaluationFailure("Expected ')'")
            return value
        raise EvaluationFailure(f"Unexpected token {token!r}")


def evaluate(text: str) -> float:
    """
    Evaluate an ASCII arithmetic expression and return the raw float result.
    Infinity and NaN are returned, not raised; callers decide what to do with them.
    """
    try:
        return _Parser(tokenize(text)).parse()
    except RecursionError:
        raise EvaluationFailure("Expression is nested too deeply")


def calculate_expression(text: str, precision: int = PRECISION) -> str:
    """
    Normalize, validate and evaluate an expression.

    Args:
        text (str): Expression as typed, display glyphs allowed
        precision (int): Significant digits kept in the result

    Returns:
        str: The result as display text, e.g. "14" or "3.33333333333"

    Raises:
        InvalidExpression: characters outside the allow-list (nothing is evaluated)
        EvaluationFailure: malformed expression, or an infinite / NaN result
    """
    expression = normalize_operators(text)
    if not is_safe(expression):
        raise InvalidExpression("Expression contains disallowed characters")

    result = evaluate(expression)
    if not math.isfinite(result):
        raise EvaluationFailure("Math error")
    return format_number(to_precision(result, precision))
