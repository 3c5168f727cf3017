import logging
from flask import jsonify, request, Blueprint
from flask_login import login_user, current_user, logout_user, login_required
from flask_wtf.csrf import generate_csrf
from maintenance_manager.app.models.user import User
from maintenance_manager.app.forms import LoginForm

logger = logging.getLogger(__name__)

users_bp = Blueprint('users', __name__)

@users_bp.route("/login", methods=['GET', 'POST'])
def login():
    if current_user.is_authenticated:
        return jsonify({'user': current_user.username, 'role': current_user.role})
    if request.method == 'GET':
        return jsonify({'csrfToken': generate_csrf()})

    form = LoginForm()
    if not form.validate_on_submit():
        return jsonify({'errors': form.errors}), 400

    user = User.query.filter_by(email=form.email.data).first()
    if user and user.check_password(form.password.data):
        login_user(user, remember=form.remember.data)
        logger.info("User '%s' logged in", user.username)
        return jsonify({'user': user.username, 'role': user.role})

    logger.warning("Failed login for '%s'", form.email.data)
    return jsonify({'error': 'Login Unsuccessful. Please check email and password'}), 401


@users_bp.route("/logout", methods=['POST'])
@login_required
def logout():
    logout_user()
    return jsonify({'status': 'logged out'})
