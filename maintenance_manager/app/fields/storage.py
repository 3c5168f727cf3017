# app/fields/storage.py
from typing import Dict, Optional, Protocol

from maintenance_manager.app import db
from maintenance_manager.app.models.setting import Setting


class KeyValueStorage(Protocol):
    """Synchronous string key-value backend used by the FieldSchemaStore."""

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...


class SettingStorage:
    """Keeps each key as a row of the `setting` table."""

    def get(self, key):
        setting = db.session.get(Setting, key)
        return setting.value if setting else None

    def set(self, key, value):
        setting = db.session.get(Setting, key)
        if setting is None:
            setting = Setting(key=key, value=value)
            db.session.add(setting)
        else:
            setting.value = value
        db.session.commit()


class MemoryStorage:
    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.data = dict(initial or {})

    def get(self, key):
        return self.data.get(key)

    def set(self, key, value):
        self.data[key] = value
