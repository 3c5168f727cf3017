# app/fields/forms.py
from datetime import date

from wtforms.form import BaseForm
from wtforms.fields import (BooleanField, DateField, EmailField, FloatField, SelectField,
                            StringField, TelField, TextAreaField)
from wtforms.validators import InputRequired, Optional, ValidationError

from .registry import validate_field_value
from .types import FieldType

EQUIPMENT_FIELD = 'equipmentId'

_CONTROLS = {
    FieldType.TEXT: ('input', 'text'),
    FieldType.EMAIL: ('input', 'email'),
    FieldType.TEL: ('input', 'tel'),
    FieldType.NUMBER: ('input', 'number'),
    FieldType.DATE: ('input', 'date'),
    FieldType.TEXTAREA: ('textarea', None),
    FieldType.SELECT: ('select', None),
    FieldType.CHECKBOX: ('checkbox', None),
}

_WTFORMS_FIELDS = {
    FieldType.TEXT: StringField,
    FieldType.EMAIL: EmailField,
    FieldType.TEL: TelField,
    FieldType.TEXTAREA: TextAreaField,
}


def equipment_options(records):
    """Select options for the work order equipment picker, one per equipment record."""
    options = []
    for record in records:
        data = record.data or {}
        options.append({
            'value': str(record.id),
            'label': f"{data.get('name', '')} - {data.get('location', '')}",
        })
    return options


def _select_options(field, equipment=None):
    if field.name == EQUIPMENT_FIELD and equipment:
        return [dict(option) for option in equipment]
    return [{'value': option, 'label': option} for option in field.options or []]


def describe_form(fields, values=None, equipment=None):
    """Render descriptors for a generic UI: one entry per field, in order."""
    values = values or {}
    descriptors = []
    for field in fields:
        field_type = field.field_type
        control, input_type = _CONTROLS.get(field_type, ('input', 'text'))
        rules = field.validation
        descriptor = {
            'id': field.id,
            'name': field.name,
            'label': field.label,
            'control': control,
            'inputType': input_type,
            'required': field.required,
            'placeholder': field.placeholder,
            'min': rules.min if rules else None,
            'max': rules.max if rules else None,
            'helpText': rules.message if rules else None,
            'value': values.get(field.name),
            'wide': field_type is FieldType.TEXTAREA,
        }
        if field_type is FieldType.SELECT:
            descriptor['options'] = _select_options(field, equipment)
            if field.name == EQUIPMENT_FIELD and equipment:
                descriptor['placeholder'] = 'Select equipment'
            else:
                descriptor['placeholder'] = f"Select {field.label.lower()}"
        descriptors.append(descriptor)
    return descriptors


class FieldRules:
    """Runs the field's required/min/max/pattern rules as a WTForms validator."""

    def __init__(self, field):
        self.field = field

    def __call__(self, form, form_field):
        result = validate_field_value(self.field, form_field.data)
        if not result.is_valid:
            raise ValidationError(result.message)


def _unbound_field(field, equipment=None):
    field_type = field.field_type
    if field.required:
        validators = [InputRequired(message=f"{field.label} is required")]
    else:
        validators = [Optional()]
    validators.append(FieldRules(field))

    kwargs = {
        'validators': validators,
        'description': field.validation.message if field.validation and field.validation.message else '',
    }
    if field.placeholder:
        kwargs['render_kw'] = {'placeholder': field.placeholder}

    if field_type is FieldType.NUMBER:
        return FloatField(field.label, **kwargs)
    if field_type is FieldType.DATE:
        return DateField(field.label, format='%Y-%m-%d', **kwargs)
    if field_type is FieldType.CHECKBOX:
        return BooleanField(field.label, **kwargs)
    if field_type is FieldType.SELECT:
        choices = [(o['value'], o['label']) for o in _select_options(field, equipment)]
        return SelectField(field.label, choices=choices, validate_choice=bool(choices), **kwargs)
    return _WTFORMS_FIELDS.get(field_type, StringField)(field.label, **kwargs)


def build_form(fields, formdata=None, data=None, equipment=None):
    """Build and process a WTForms form with one control per field."""
    form = BaseForm([(field.name, _unbound_field(field, equipment)) for field in fields])
    form.process(formdata=formdata, data=data)
    return form


def serialize_form_data(form):
    values = {}
    for name, value in form.data.items():
        if isinstance(value, date):
            value = value.isoformat()
        values[name] = value
    return values
