"""
Flask Extensions
"""

from flask_sqlalchemy import SQLAlchemy

# Database instance, one pooled engine shared by all requests
db = SQLAlchemy()
