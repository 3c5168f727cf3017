# app/routes/__init__.py
from flask import Blueprint, abort
from maintenance_manager.app.fields import resolve_module

# Create blueprints
fields_bp = Blueprint('fields', __name__, url_prefix='/fields')
records_bp = Blueprint('records', __name__, url_prefix='/records')

def get_module_or_404(module):
    try:
        return resolve_module(module)
    except ValueError:
        abort(404, description=f"Unknown module: {module}")

# Import views after blueprints are created
from . import fields, records
