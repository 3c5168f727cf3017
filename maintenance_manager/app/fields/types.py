# app/fields/types.py
from collections.abc import Mapping
from copy import deepcopy
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional


class FieldType(Enum):
    TEXT = "text"
    NUMBER = "number"
    SELECT = "select"
    TEXTAREA = "textarea"
    DATE = "date"
    CHECKBOX = "checkbox"
    EMAIL = "email"
    TEL = "tel"


class ModuleName(Enum):
    EQUIPMENT = "equipment"
    WORKORDERS = "workorders"
    INVENTORY = "inventory"
    SCHEDULING = "scheduling"
    DASHBOARD = "dashboard"


def resolve_module(module):
    """Return the ModuleName for `module`, raising ValueError for unknown modules."""
    if isinstance(module, ModuleName):
        return module
    return ModuleName(module)


# JSON (camelCase) key -> attribute name, where they differ
_JSON_KEYS = {
    'defaultValue': 'default_value',
    'isSystem': 'is_system',
}
_ATTRIBUTE_KEYS = {v: k for k, v in _JSON_KEYS.items()}

_TRUE_STRINGS = ('true', '1', 'yes', 'on')
_FALSE_STRINGS = ('false', '0', 'no', 'off', '')


def as_bool(value):
    """Parse a JSON or form boolean. Raises TypeError for anything else."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE_STRINGS:
            return True
        if text in _FALSE_STRINGS:
            return False
    raise TypeError(f"Expected a boolean, got {value!r}")


@dataclass
class FieldValidation:
    min: Optional[float] = None
    max: Optional[float] = None
    pattern: Optional[str] = None
    message: Optional[str] = None

    def to_dict(self):
        data = {
            'min': self.min,
            'max': self.max,
            'pattern': self.pattern,
            'message': self.message,
        }
        return {k: v for k, v in data.items() if v is not None}

    @classmethod
    def from_dict(cls, data):
        if data is None:
            return None
        if isinstance(data, FieldValidation):
            return deepcopy(data)
        if not isinstance(data, Mapping):
            raise TypeError(f"validation must be an object, got {type(data).__name__}")
        return cls(
            min=data.get('min'),
            max=data.get('max'),
            pattern=data.get('pattern') or None,
            message=data.get('message') or None,
        )


@dataclass
class Field:
    """A single entry of a module's form schema."""
    id: str
    name: str
    label: str
    type: str
    required: bool = False
    placeholder: Optional[str] = None
    options: Optional[List[str]] = None
    default_value: Any = None
    validation: Optional[FieldValidation] = None
    order: int = 0
    is_system: bool = False

    @property
    def field_type(self):
        return FieldType(self.type)

    def copy(self):
        return deepcopy(self)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with camelCase keys, leaving out unset optional attributes."""
        data = {
            'id': self.id,
            'name': self.name,
            'label': self.label,
            'type': self.type,
            'required': self.required,
            'placeholder': self.placeholder,
            'options': list(self.options) if self.options is not None else None,
            'default_value': self.default_value,
            'validation': self.validation.to_dict() if self.validation else None,
            'order': self.order,
            'is_system': self.is_system,
        }
        return {_ATTRIBUTE_KEYS.get(k, k): v for k, v in data.items() if v is not None}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Field':
        """Build a Field from its camelCase mapping. Raises KeyError/TypeError on malformed input."""
        values = {_JSON_KEYS.get(k, k): v for k, v in data.items()}
        options = values.get('options')
        return cls(
            id=str(values['id']),
            name=values['name'],
            label=values['label'],
            type=values['type'],
            required=as_bool(values.get('required')),
            placeholder=values.get('placeholder') or None,
            options=list(options) if options is not None else None,
            default_value=values.get('default_value'),
            validation=FieldValidation.from_dict(values.get('validation')),
            order=int(values.get('order') or 0),
            is_system=as_bool(values.get('is_system')),
        )

    def __repr__(self):
        return f"Field('{self.id}', '{self.name}', '{self.type}', order={self.order})"


@dataclass
class ValidationResult:
    is_valid: bool
    message: Optional[str] = None

    def to_dict(self):
        data = {'isValid': self.is_valid}
        if self.message is not None:
            data['message'] = self.message
        return data
