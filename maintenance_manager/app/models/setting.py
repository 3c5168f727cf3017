# app/models/setting.py
from maintenance_manager.app import db

class Setting(db.Model):
    """Durable key-value entry, e.g. the custom field configuration."""
    key = db.Column(db.String(100), primary_key=True)
    value = db.Column(db.Text, nullable=False)

    def __repr__(self):
        return f"Setting('{self.key}')"
