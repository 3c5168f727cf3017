# app/fields/registry.py
import logging
import numbers
import re
import time

from .errors import FieldNameConflictError, InvalidFieldError, SystemFieldError
from .form_data import generate_form_data
from .types import Field, FieldType, ModuleName, ValidationResult, resolve_module

logger = logging.getLogger(__name__)


def is_empty_value(value):
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value.strip() == ''
    if isinstance(value, (list, tuple, set, dict)):
        return len(value) == 0
    return False


def _as_number(value):
    if isinstance(value, bool):
        return None
    if isinstance(value, numbers.Real):
        return value
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


def validate_field_value(field, value):
    """Check `value` against the field's rules: required, min, max, pattern.

    Only the first failing rule is reported. Never raises.
    """
    if field.required and is_empty_value(value):
        return ValidationResult(False, f"{field.label} is required")

    rules = field.validation
    if rules is None or is_empty_value(value):
        return ValidationResult(True)

    number = _as_number(value)
    if rules.min is not None and number is not None and number < rules.min:
        return ValidationResult(False, rules.message or f"{field.label} must be greater than or equal to {rules.min}")

    if rules.max is not None and number is not None and number > rules.max:
        return ValidationResult(False, rules.message or f"{field.label} must be less than or equal to {rules.max}")

    if rules.pattern and isinstance(value, str):
        try:
            matched = re.search(rules.pattern, value)
        except re.error as e:
            logger.warning("Invalid pattern on field '%s': %s", field.id, e)
            return ValidationResult(True)
        if not matched:
            return ValidationResult(False, rules.message or f"{field.label} has an invalid format")

    return ValidationResult(True)


class FieldRegistry:
    """Module-scoped CRUD over the merged field set.

    Every operation reloads the overlay, merges it with the defaults, mutates
    and persists only the custom subset. Mutations hold the store lock.
    """

    def __init__(self, store):
        self.store = store

    def get_module_fields(self, module):
        module = resolve_module(module)
        config = self.store.load()
        return sorted(config[module], key=lambda f: f.order)

    def get_field(self, module, field_id):
        return next((f for f in self.get_module_fields(module) if f.id == field_id), None)

    def add_custom_field(self, module, field_data):
        module = resolve_module(module)
        with self.store.lock:
            config = self.store.load()
            fields = config[module]

            data = {k: v for k, v in dict(field_data).items() if k not in ('id', 'isSystem', 'is_system')}
            if data.get('order') in (None, ''):
                data['order'] = max((f.order for f in fields), default=0) + 1
            data['id'] = self._new_field_id(fields)
            data['isSystem'] = False

            field = self._build_field(module, data)
            self._check_name_available(module, fields, field.name)

            fields.append(field)
            self.store.save_overlay(config)
            logger.info("Added custom field '%s' (%s) to '%s'", field.name, field.id, module.value)
            return field

    def update_field(self, module, field_id, updates):
        """Shallow-merge `updates` into a custom field.

        Returns False when the module has no field with that id. System fields
        cannot be edited and raise SystemFieldError.
        """
        module = resolve_module(module)
        with self.store.lock:
            config = self.store.load()
            fields = config[module]
            index = next((i for i, f in enumerate(fields) if f.id == field_id), None)
            if index is None:
                return False

            existing = fields[index]
            if existing.is_system:
                logger.warning("Refusing to update system field '%s' in '%s'", field_id, module.value)
                raise SystemFieldError(module.value, field_id)

            data = existing.to_dict()
            data.update({k: v for k, v in dict(updates).items() if k not in ('id', 'isSystem', 'is_system')})
            updated = self._build_field(module, data)
            if updated.name != existing.name:
                others = [f for f in fields if f.id != field_id]
                self._check_name_available(module, others, updated.name)

            fields[index] = updated
            self.store.save_overlay(config)
            logger.info("Updated custom field '%s' in '%s'", field_id, module.value)
            return True

    def delete_custom_field(self, module, field_id):
        module = resolve_module(module)
        with self.store.lock:
            config = self.store.load()
            field = next((f for f in config[module] if f.id == field_id), None)
            if field is None or field.is_system:
                return False

            config[module] = [f for f in config[module] if f.id != field_id]
            self.store.save_overlay(config)
            logger.info("Deleted custom field '%s' from '%s'", field_id, module.value)
            return True

    def reorder_fields(self, module, field_ids):
        module = resolve_module(module)
        with self.store.lock:
            config = self.store.load()
            by_id = {f.id: f for f in config[module]}
            for position, field_id in enumerate(field_ids):
                field = by_id.get(field_id)
                if field:
                    field.order = position + 1
            # only custom field orders are persisted
            self.store.save_overlay(config)
            return sorted(config[module], key=lambda f: f.order)

    def validate_field_value(self, field, value):
        return validate_field_value(field, value)

    def generate_form_data(self, module, existing=None):
        return generate_form_data(self.get_module_fields(module), existing)

    def find_custom_fields(self, term):
        """Custom fields in any module whose type is `term` or whose name or label contains it.

        An empty term matches every custom field.
        """
        term = (term or '').strip().lower()
        config = self.store.load()
        matches = []
        for module in ModuleName:
            for field in config[module]:
                if field.is_system:
                    continue
                if field.type == term or term in field.name.lower() or term in field.label.lower():
                    matches.append((module, field))
        return matches

    def _new_field_id(self, fields):
        taken = {f.id for f in fields}
        field_id = f"custom_{int(time.time() * 1000)}"
        candidate, suffix = field_id, 1
        while candidate in taken:
            candidate = f"{field_id}_{suffix}"
            suffix += 1
        return candidate

    def _check_name_available(self, module, fields, name):
        if any(f.name == name for f in fields):
            raise FieldNameConflictError(module.value, name)

    def _build_field(self, module, data):
        name = str(data.get('name') or '').strip()
        if not name:
            raise InvalidFieldError("Field name is required")
        label = str(data.get('label') or '').strip() or name
        data['name'] = name
        data['label'] = label

        try:
            field_type = FieldType(data.get('type') or FieldType.TEXT.value)
        except ValueError:
            raise InvalidFieldError(f"Invalid field type: {data.get('type')}")
        data['type'] = field_type.value

        if field_type is FieldType.SELECT:
            options = data.get('options')
            if isinstance(options, str):
                options = [o.strip() for o in options.split(',')]
            elif options is not None and not isinstance(options, (list, tuple)):
                raise InvalidFieldError(f"Options for '{name}' must be a list or a comma-separated string")
            data['options'] = [str(o) for o in options or [] if str(o).strip()]
        else:
            data.pop('options', None)

        try:
            field = Field.from_dict(data)
        except (TypeError, ValueError) as e:
            raise InvalidFieldError(f"Invalid field definition for '{name}' in '{module.value}': {e}")

        rules = field.validation
        if rules is not None:
            for bound in ('min', 'max'):
                value = getattr(rules, bound)
                if value is None or value == '':
                    setattr(rules, bound, None)
                    continue
                number = _as_number(value)
                if number is None:
                    raise InvalidFieldError(f"Validation {bound} for '{name}' must be a number")
                setattr(rules, bound, number)
            if rules.pattern:
                try:
                    re.compile(rules.pattern)
                except (re.error, TypeError) as e:
                    raise InvalidFieldError(f"Invalid validation pattern for '{name}': {e}")
            if not rules.to_dict():
                field.validation = None
        return field
