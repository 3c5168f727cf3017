import logging
from flask import Flask, jsonify
from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager
from flask_bcrypt import Bcrypt
from werkzeug.exceptions import HTTPException
from maintenance_manager.config import Config

db = SQLAlchemy()
bcrypt = Bcrypt()
login_manager = LoginManager()

def configure_logging(app):
    logging.basicConfig(
        level=app.config.get('LOG_LEVEL', 'INFO'),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )
    logging.getLogger('maintenance_manager').setLevel(app.config.get('LOG_LEVEL', 'INFO'))

def create_app(config_class=Config, default_fields=None, field_storage=None):
    app = Flask(__name__)
    app.config.from_object(config_class)
    configure_logging(app)

    db.init_app(app)
    bcrypt.init_app(app)
    login_manager.init_app(app)

    from maintenance_manager.app.models.user import User
    from maintenance_manager.app.fields import init_field_registry

    @login_manager.user_loader
    def load_user(user_id):
        return db.session.get(User, int(user_id))

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        return jsonify({'error': e.description}), e.code

    @login_manager.unauthorized_handler
    def unauthorized():
        return jsonify({'error': 'Authentication required'}), 401

    init_field_registry(app, default_fields=default_fields, storage=field_storage)

    with app.app_context():
        from maintenance_manager.app import models  # noqa: F401
        from maintenance_manager.app.fields.types import ModuleName

        @app.route('/')
        def index():
            return jsonify({'modules': [m.value for m in ModuleName]})

        # Import blueprints inside context
        from maintenance_manager.app.routes import fields_bp, records_bp
        from maintenance_manager.app.routes.users import users_bp

        # Register blueprints
        app.register_blueprint(fields_bp)
        app.register_blueprint(records_bp)
        app.register_blueprint(users_bp)

        # Create all database tables
        db.create_all()

    return app
