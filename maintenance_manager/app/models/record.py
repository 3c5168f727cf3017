# app/models/record.py
from datetime import datetime
from maintenance_manager.app import db
from maintenance_manager.app.fields.types import resolve_module

class ModuleRecord(db.Model):
    """A business record of one module (equipment item, work order, ...).

    `data` maps field names to values, following the module's current fields.
    """
    id = db.Column(db.Integer, primary_key=True)
    module = db.Column(db.String(20), nullable=False, index=True)
    data = db.Column(db.JSON, nullable=False, default=dict)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __init__(self, module, data=None):
        self.module = resolve_module(module).value
        self.data = data or {}

    def to_dict(self):
        return {
            'id': self.id,
            'module': self.module,
            'data': self.data,
            'createdAt': self.created_at.isoformat() if self.created_at else None,
            'updatedAt': self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self):
        return f'<ModuleRecord {self.id}: {self.module}>'
