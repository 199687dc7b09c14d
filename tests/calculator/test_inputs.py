"""
Unit tests for button and keyboard translation into calculator commands.
"""
import unittest

from webcalc.projects.calculator.core.constants import KEY_BINDINGS
from webcalc.projects.calculator.core.inputs import (
    Command,
    CommandKind,
    command_for_token,
    command_from_button,
    command_from_key,
    commands_from_keys,
)


class TestKeys(unittest.TestCase):

    def test_digits(self):
        for key in "0123456789":
            with self.subTest(key=key):
                self.assertEqual(command_from_key(key), Command(CommandKind.DIGIT, key))

    def test_operators_dot_and_parentheses(self):
        self.assertEqual(command_from_key("*"), Command(CommandKind.OPERATOR, "*"))
        self.assertEqual(command_from_key("."), Command(CommandKind.DOT, "."))
        self.assertEqual(command_from_key(")"), Command(CommandKind.PARENTHESIS, ")"))

    def test_action_keys(self):
        self.assertEqual(command_from_key("Enter").kind, CommandKind.CALCULATE)
        self.assertEqual(command_from_key("=").kind, CommandKind.CALCULATE)
        self.assertEqual(command_from_key("Backspace").kind, CommandKind.DELETE)
        self.assertEqual(command_from_key("c").kind, CommandKind.CLEAR)
        self.assertEqual(command_from_key("C").kind, CommandKind.CLEAR)
        self.assertEqual(command_from_key("%").kind, CommandKind.PERCENT)

    def test_unbound_keys_ignored(self):
        for key in ["x", "Shift", "Escape", "×", "", None]:
            with self.subTest(key=key):
                self.assertIsNone(command_from_key(key))

    def test_key_bindings_list(self):
        self.assertIn("Enter", KEY_BINDINGS)
        self.assertIn("Backspace", KEY_BINDINGS)
        self.assertIn("7", KEY_BINDINGS)
        self.assertNotIn("x", KEY_BINDINGS)


class TestButtons(unittest.TestCase):

    def test_value_button(self):
        self.assertEqual(command_from_button(value="7"), Command(CommandKind.DIGIT, "7"))

    def test_glyph_buttons_are_operators(self):
        for glyph in ["×", "÷", "−"]:
            with self.subTest(glyph=glyph):
                self.assertEqual(command_from_button(value=glyph).kind, CommandKind.OPERATOR)

    def test_action_button(self):
        self.assertEqual(command_from_button(action="percent"), Command(CommandKind.PERCENT))

    def test_action_wins_over_value(self):
        self.assertEqual(command_from_button(value="7", action="clear").kind, CommandKind.CLEAR)

    def test_unknown_payloads(self):
        self.assertIsNone(command_from_button(action="explode"))
        self.assertIsNone(command_from_button(value="a"))
        self.assertIsNone(command_from_button(value="12"))
        self.assertIsNone(command_from_button())

    def test_token_classification(self):
        self.assertTrue(command_for_token("(").appends)
        self.assertIsNone(command_for_token(5))


class TestKeySequence(unittest.TestCase):

    def test_unbound_characters_skipped(self):
        commands = commands_from_keys("2+3x=")
        self.assertEqual(
            [c.kind for c in commands],
            [CommandKind.DIGIT, CommandKind.OPERATOR, CommandKind.DIGIT, CommandKind.CALCULATE],
        )


if __name__ == "__main__":
    unittest.main()
