import click
from flask import current_app
from flask.cli import with_appcontext
from webcalc.projects.calculator.core.constants import ERROR_DISPLAY, MAX_LENGTH, PRECISION
from webcalc.projects.calculator.core.controller import CalculatorController
from webcalc.projects.calculator.core.evaluator import CalculatorError, calculate_expression
from webcalc.projects.calculator.core.inputs import commands_from_keys
import logging

logger = logging.getLogger(__name__)

@click.group(name='calculator')
def calculator_cli():
    """Calculator commands."""
    pass

@calculator_cli.command('eval')
@click.argument('expression')
@with_appcontext
def eval_command(expression):
    """Evaluate EXPRESSION and print the result."""
    precision = current_app.config.get('CALCULATOR_PRECISION', PRECISION)
    try:
        result = calculate_expression(expression, precision)
    except CalculatorError as e:
        logger.info(f"Rejected expression {expression!r}: {e}")
        click.echo(ERROR_DISPLAY)
        raise click.exceptions.Exit(1)
    click.echo(result)

@calculator_cli.command('keys')
@click.argument('sequence')
@click.option('--verbose', is_flag=True, help='Print the display after every key')
@with_appcontext
def keys_command(sequence, verbose):
    """Type SEQUENCE on a fresh calculator (e.g. "2+3*4=") and print the display."""
    controller = CalculatorController(
        max_length=current_app.config.get('CALCULATOR_MAX_LENGTH', MAX_LENGTH),
        precision=current_app.config.get('CALCULATOR_PRECISION', PRECISION),
        renderer=click.echo if verbose else None,
    )
    for command in commands_from_keys(sequence):
        controller.dispatch(command)
    if not verbose:
        click.echo(controller.display)

def init_app(app):
    """Register CLI commands with the app."""
    app.cli.add_command(calculator_cli)
