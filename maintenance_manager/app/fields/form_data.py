# app/fields/form_data.py
from .types import FieldType


def empty_value(field):
    if field.type == FieldType.NUMBER.value:
        return 0
    if field.type == FieldType.CHECKBOX.value:
        return False
    return ''


def generate_form_data(fields, existing=None):
    """Initial value map for a form over `fields`, keyed by field name.

    Values supplied in `existing` win, then the field's default value, then a
    type-appropriate empty value. Keys of `existing` that match no field are
    dropped.
    """
    existing = existing or {}
    form_data = {}
    for field in fields:
        if existing.get(field.name) is not None:
            form_data[field.name] = existing[field.name]
        elif field.default_value is not None:
            form_data[field.name] = field.default_value
        else:
            form_data[field.name] = empty_value(field)
    return form_data
