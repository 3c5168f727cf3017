# app/models/__init__.py
from maintenance_manager.app import db

# Import models after db
from .setting import Setting
from .user import User
from .record import ModuleRecord
from .field_history import FieldHistory

__all__ = ['Setting', 'User', 'ModuleRecord', 'FieldHistory']
