import os

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///webcalc.db").replace("postgres://", "postgresql://", 1)
SQLALCHEMY_DATABASE_URI = DATABASE_URL

SECRET_KEY = os.getenv("SECRET_KEY")

# Calculator limits
CALCULATOR_MAX_LENGTH = int(os.getenv("CALCULATOR_MAX_LENGTH", "30"))
CALCULATOR_PRECISION = int(os.getenv("CALCULATOR_PRECISION", "12"))

# Jinja2 whitespace control - prevents unwanted line breaks in rendered HTML
JINJA2_TRIM_BLOCKS = True
JINJA2_LSTRIP_BLOCKS = True
