# app/fields/store.py
import json
import logging
import threading

from .types import Field, FieldType, ModuleName

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = 'custom_fields_config'


class FieldSchemaStore:
    """Owns the system field table and the persisted custom-field overlay.

    Reads always return defaults followed by the overlay, unsorted; ordering is
    left to the FieldRegistry. Only custom fields ever reach the storage backend.
    Every module lives under the one storage key, so callers hold `lock` across
    a whole load, mutate and save_overlay cycle.
    """

    def __init__(self, storage, default_fields, storage_key=DEFAULT_STORAGE_KEY):
        self.storage = storage
        self.default_fields = default_fields
        self.storage_key = storage_key
        self.lock = threading.RLock()

    def get_defaults(self):
        return {
            module: [field.copy() for field in self.default_fields.get(module, [])]
            for module in ModuleName
        }

    def load_overlay(self):
        overlay = {module: [] for module in ModuleName}
        stored = self.storage.get(self.storage_key)
        if not stored:
            return overlay

        try:
            config = json.loads(stored)
        except ValueError as e:
            logger.error("Error parsing fields config under '%s': %s", self.storage_key, e)
            return overlay
        if not isinstance(config, dict):
            logger.error("Fields config under '%s' is not an object, ignoring it", self.storage_key)
            return overlay

        for module in ModuleName:
            entries = config.get(module.value) or []
            if not isinstance(entries, list):
                logger.warning("Ignoring non-list overlay for module '%s'", module.value)
                continue
            for entry in entries:
                try:
                    field = Field.from_dict(entry)
                    FieldType(field.type)
                except (KeyError, TypeError, ValueError, AttributeError) as e:
                    logger.warning("Skipping malformed custom field in '%s': %r (%s)", module.value, entry, e)
                    continue
                if field.is_system:
                    logger.warning("Skipping stored field '%s' in '%s' flagged as system", field.id, module.value)
                    continue
                overlay[module].append(field)
        return overlay

    def save_overlay(self, overlay):
        custom_config = {
            module.value: [f.to_dict() for f in overlay.get(module, []) if not f.is_system]
            for module in ModuleName
        }
        self.storage.set(self.storage_key, json.dumps(custom_config))

    def load(self):
        defaults = self.get_defaults()
        overlay = self.load_overlay()
        return {module: defaults[module] + overlay[module] for module in ModuleName}
