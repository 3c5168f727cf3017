# app/fields/__init__.py
from flask import current_app

from .defaults import build_default_fields
from .errors import FieldConfigError, FieldNameConflictError, InvalidFieldError, SystemFieldError
from .form_data import generate_form_data
from .registry import FieldRegistry, validate_field_value
from .storage import MemoryStorage, SettingStorage
from .store import FieldSchemaStore
from .types import Field, FieldType, FieldValidation, ModuleName, ValidationResult, resolve_module


def init_field_registry(app, default_fields=None, storage=None):
    """Create the app's FieldRegistry from its config, defaults and storage backend."""
    store = FieldSchemaStore(
        storage if storage is not None else SettingStorage(),
        default_fields if default_fields is not None else build_default_fields(),
        storage_key=app.config['FIELDS_STORAGE_KEY'],
    )
    registry = FieldRegistry(store)
    app.extensions['field_registry'] = registry
    return registry


def get_field_registry():
    return current_app.extensions['field_registry']


__all__ = ['Field', 'FieldType', 'FieldValidation', 'ModuleName', 'ValidationResult', 'resolve_module',
           'FieldConfigError', 'InvalidFieldError', 'FieldNameConflictError', 'SystemFieldError',
           'FieldSchemaStore', 'FieldRegistry', 'MemoryStorage', 'SettingStorage',
           'build_default_fields', 'generate_form_data', 'validate_field_value',
           'init_field_registry', 'get_field_registry']
