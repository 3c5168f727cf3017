import logging
from maintenance_manager.app import db
from maintenance_manager.app.models import User

logger = logging.getLogger(__name__)

def seed_admin(app):
    """Create the administrator account from config if no admin exists yet."""
    with app.app_context():
        if User.query.filter_by(role='admin').first():
            return None

        password = app.config.get('ADMIN_PASSWORD')
        if not password:
            logger.warning("ADMIN_PASSWORD is not set, skipping administrator seed")
            return None

        admin = User(username=app.config['ADMIN_USERNAME'], email=app.config['ADMIN_EMAIL'], role='admin')
        admin.set_password(password)
        db.session.add(admin)
        db.session.commit()
        logger.info("Created administrator account '%s'", admin.email)
        return admin
