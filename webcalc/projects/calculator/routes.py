"""
Calculator - keypad page plus a small JSON API.
The expression buffer lives in the session: each request rebuilds the
controller, applies one command and stores the new state back.
"""

import logging

from flask import Blueprint, current_app, jsonify, render_template, request, session

from webcalc.projects.calculator.core.constants import (
    BUTTON_ROWS,
    ERROR_DISPLAY,
    KEY_BINDINGS,
    MAX_LENGTH,
    PRECISION,
    SESSION_KEY,
)
from webcalc.projects.calculator.core.controller import CalculatorController
from webcalc.projects.calculator.core.evaluator import CalculatorError, calculate_expression
from webcalc.projects.calculator.core.inputs import command_from_button, command_from_key
from webcalc.utils.logging import log_project_visit

logger = logging.getLogger(__name__)

# Longest expression accepted by the stateless evaluate endpoint
MAX_EVALUATE_LENGTH = 256
COMMAND_FIELDS = ("value", "action", "key")

calculator_bp = Blueprint('calculator', __name__,
                          template_folder='templates')


def _precision():
    return current_app.config.get('CALCULATOR_PRECISION', PRECISION)


def _load_controller():
    """Controller restored from the session (a cleared one on first use)."""
    return CalculatorController.from_snapshot(
        session.get(SESSION_KEY),
        max_length=current_app.config.get('CALCULATOR_MAX_LENGTH', MAX_LENGTH),
        precision=_precision(),
    )


def _save_controller(controller):
    session[SESSION_KEY] = controller.snapshot()


def _json_body():
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else None


@calculator_bp.route('/')
def index():
    """Display the calculator keypad"""
    log_project_visit('calculator', 'Calculator')
    controller = _load_controller()
    return render_template('calculator.html',
                           display=controller.display,
                           button_rows=BUTTON_ROWS,
                           key_bindings=KEY_BINDINGS)


@calculator_bp.route('/api/state')
def api_state():
    """Current display and buffer. Returns {display, expression, state}."""
    return jsonify(_load_controller().to_dict())


@calculator_bp.route('/api/command', methods=['POST'])
def api_command():
    """
    Apply one button press or key press.
    Body: exactly one of {"value": token}, {"action": name}, {"key": KeyboardEvent.key}.
    Returns {display, expression, state, handled} or {error}.
    """
    data = _json_body()
    if data is None:
        return jsonify({"error": "Request body must be a JSON object."}), 400

    fields = [f for f in COMMAND_FIELDS if f in data]
    if len(fields) != 1:
        return jsonify({"error": "Provide exactly one of value, action or key."}), 400

    controller = _load_controller()
    if fields[0] == 'key':
        command = command_from_key(data['key'])
        if command is None:
            # Unbound key: leave it to the browser
            return jsonify({**controller.to_dict(), "handled": False})
    else:
        command = command_from_button(value=data.get('value'), action=data.get('action'))
        if command is None:
            return jsonify({"error": f"Unknown button {fields[0]}: {data[fields[0]]!r}"}), 400

    controller.dispatch(command)
    _save_controller(controller)
    return jsonify({**controller.to_dict(), "handled": True})


@calculator_bp.route('/api/evaluate', methods=['POST'])
def api_evaluate():
    """Evaluate an expression without touching the session. Returns {result} or {error, reason}."""
    data = _json_body()
    expression = data.get('expression') if data else None
    if not isinstance(expression, str) or not expression.strip():
        return jsonify({"error": "Expression is required."}), 400
    if len(expression) > MAX_EVALUATE_LENGTH:
        return jsonify({"error": f"Expression must be at most {MAX_EVALUATE_LENGTH} characters."}), 400

    try:
        result = calculate_expression(expression, _precision())
    except CalculatorError as e:
        logger.info(f"Rejected expression {expression!r}: {e}")
        return jsonify({"error": ERROR_DISPLAY, "reason": str(e)}), 422

    return jsonify({"result": result})
