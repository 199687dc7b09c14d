from flask import Flask
from flask_migrate import Migrate
from flask_sqlalchemy import SQLAlchemy
from flask_wtf.csrf import CSRFProtect
from dotenv import load_dotenv
import logging

load_dotenv()

db = SQLAlchemy()
migrate = Migrate()
csrf = CSRFProtect()

def create_app(test_config=None):
    app = Flask(__name__)
    app.config.from_object('config')
    if test_config:
        app.config.update(test_config)

    # Validate required configuration
    required_vars = ['SECRET_KEY']
    for var in required_vars:
        if not app.config.get(var):
            raise ValueError(f"Required environment variable {var} is not set")

    # Configure logging
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    # Jinja2 whitespace control
    app.jinja_env.trim_blocks = app.config.get('JINJA2_TRIM_BLOCKS', False)
    app.jinja_env.lstrip_blocks = app.config.get('JINJA2_LSTRIP_BLOCKS', False)

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    csrf.init_app(app)

    # Register blueprints
    from webcalc.routes.main import main_bp
    from webcalc.projects.calculator.routes import calculator_bp

    app.register_blueprint(main_bp)
    app.register_blueprint(calculator_bp, url_prefix='/calculator')

    # Register CLI commands
    from webcalc.projects.calculator import commands as calculator_commands
    calculator_commands.init_app(app)

    # Import models to ensure they're known to Flask-SQLAlchemy
    from webcalc.models import LogEntry

    return app
