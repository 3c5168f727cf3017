# app/fields/errors.py


class FieldConfigError(Exception):
    """Base class for field configuration failures."""


class InvalidFieldError(FieldConfigError, ValueError):
    """A field definition is incomplete or inconsistent."""


class FieldNameConflictError(InvalidFieldError):
    def __init__(self, module, name):
        self.module = module
        self.name = name
        super().__init__(f"A field named '{name}' already exists in module '{module}'")


class SystemFieldError(FieldConfigError):
    def __init__(self, module, field_id):
        self.module = module
        self.field_id = field_id
        super().__init__(f"System field '{field_id}' in module '{module}' cannot be modified")
