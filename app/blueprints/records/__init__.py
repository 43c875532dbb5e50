# app/blueprints/records/__init__.py
"""
Records Blueprint

Responsible for:
- Creating records
- Looking up a record by id
- Export to PDF
- Export to Excel
"""

from flask import Blueprint

records_bp = Blueprint('records', __name__, url_prefix='/records')

# Import routes after blueprint creation to avoid circular imports
from . import routes
