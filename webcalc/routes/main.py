from flask import Blueprint, redirect, url_for

main_bp = Blueprint('main', __name__)

@main_bp.route('/')
def index():
    # The calculator is the only page
    return redirect(url_for('calculator.index'))
