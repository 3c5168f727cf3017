from maintenance_manager.app import db
from datetime import datetime

class FieldHistory(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    module = db.Column(db.String(20), nullable=False)
    field_id = db.Column(db.String(100), nullable=True) # Nullable for module-wide events
    user_id = db.Column(db.Integer, db.ForeignKey('user.id'), nullable=True)
    event_type = db.Column(db.String(100), nullable=False)
    details = db.Column(db.String(500), nullable=True)
    timestamp = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'module': self.module,
            'fieldId': self.field_id,
            'userId': self.user_id,
            'eventType': self.event_type,
            'details': self.details,
            'timestamp': self.timestamp.isoformat(),
        }

    def __repr__(self):
        return f"FieldHistory('{self.event_type}', '{self.timestamp}')"
