# app/routes/fields.py
from flask import request, jsonify, abort
from flask_login import login_required, current_user
from maintenance_manager.app import db
from maintenance_manager.app.fields import get_field_registry, InvalidFieldError, SystemFieldError, ModuleName
from maintenance_manager.app.fields.forms import describe_form, equipment_options
from maintenance_manager.app.models import FieldHistory, ModuleRecord
from maintenance_manager.app.routes import fields_bp as bp, get_module_or_404


def log_field_event(module, event_type, field_id=None, details=None):
    history_log = FieldHistory(
        module=module.value,
        field_id=field_id,
        user_id=current_user.id,
        event_type=event_type,
        details=details
    )
    db.session.add(history_log)
    db.session.commit()


def load_equipment_options():
    records = ModuleRecord.query.filter_by(module=ModuleName.EQUIPMENT.value).order_by(ModuleRecord.id).all()
    return equipment_options(records)


def get_field_or_404(module, field_id):
    field = get_field_registry().get_field(module, field_id)
    if field is None:
        abort(404, description=f"Field '{field_id}' not found in '{module.value}'")
    return field


@bp.route('/search')
@login_required
def search_fields():
    matches = get_field_registry().find_custom_fields(request.args.get('q', ''))
    return jsonify([dict(field.to_dict(), module=module.value) for module, field in matches])


@bp.route('/<module>')
@login_required
def list_fields(module):
    module = get_module_or_404(module)
    return jsonify([f.to_dict() for f in get_field_registry().get_module_fields(module)])


@bp.route('/<module>', methods=['POST'])
@login_required
def add_field(module):
    if current_user.role != 'admin':
        return jsonify({'error': 'Unauthorized'}), 403

    module = get_module_or_404(module)
    payload = request.get_json(force=True)
    if not isinstance(payload, dict):
        return jsonify({'error': 'Field definition must be an object'}), 400
    try:
        field = get_field_registry().add_custom_field(module, payload)
    except ValueError as e:
        return jsonify({'error': str(e)}), 400

    log_field_event(module, 'Field Added', field.id, f"Custom field {field.name} created.")
    return jsonify(field.to_dict()), 201


@bp.route('/<module>/reorder', methods=['POST'])
@login_required
def reorder_fields(module):
    if current_user.role != 'admin':
        return jsonify({'error': 'Unauthorized'}), 403

    module = get_module_or_404(module)
    payload = request.get_json(force=True)
    field_ids = payload.get('fieldIds') if isinstance(payload, dict) else None
    if not isinstance(field_ids, list):
        return jsonify({'error': 'fieldIds must be a list of field ids'}), 400

    fields = get_field_registry().reorder_fields(module, [str(i) for i in field_ids])
    log_field_event(module, 'Fields Reordered', details=', '.join(str(i) for i in field_ids)[:500])
    return jsonify([f.to_dict() for f in fields])


@bp.route('/<module>/form-data', methods=['GET', 'POST'])
@login_required
def form_data(module):
    module = get_module_or_404(module)
    existing = request.get_json(force=True, silent=True) if request.method == 'POST' else None
    if existing is not None and not isinstance(existing, dict):
        return jsonify({'error': 'Existing data must be an object'}), 400
    return jsonify(get_field_registry().generate_form_data(module, existing))


@bp.route('/<module>/form')
@login_required
def form_layout(module):
    module = get_module_or_404(module)
    registry = get_field_registry()
    fields = registry.get_module_fields(module)
    equipment = load_equipment_options() if module is ModuleName.WORKORDERS else None
    values = registry.generate_form_data(module)
    return jsonify(describe_form(fields, values, equipment))


@bp.route('/<module>/history')
@login_required
def field_history(module):
    module = get_module_or_404(module)
    events = FieldHistory.query.filter_by(module=module.value).order_by(FieldHistory.timestamp.desc()).all()
    return jsonify([e.to_dict() for e in events])


@bp.route('/<module>/<field_id>')
@login_required
def view_field(module, field_id):
    module = get_module_or_404(module)
    return jsonify(get_field_or_404(module, field_id).to_dict())


@bp.route('/<module>/<field_id>', methods=['PATCH'])
@login_required
def update_field(module, field_id):
    if current_user.role != 'admin':
        return jsonify({'error': 'Unauthorized'}), 403

    module = get_module_or_404(module)
    registry = get_field_registry()
    payload = request.get_json(force=True)
    if not isinstance(payload, dict):
        return jsonify({'error': 'Field updates must be an object'}), 400
    try:
        updated = registry.update_field(module, field_id, payload)
    except SystemFieldError as e:
        return jsonify({'error': str(e)}), 403
    except InvalidFieldError as e:
        return jsonify({'error': str(e)}), 400

    if not updated:
        abort(404, description=f"Field '{field_id}' not found in '{module.value}'")

    field = registry.get_field(module, field_id)
    log_field_event(module, 'Field Updated', field_id, f"Custom field {field.name} updated.")
    return jsonify(field.to_dict())


@bp.route('/<module>/<field_id>', methods=['DELETE'])
@login_required
def delete_field(module, field_id):
    if current_user.role != 'admin':
        return jsonify({'error': 'Unauthorized'}), 403

    module = get_module_or_404(module)
    if not get_field_registry().delete_custom_field(module, field_id):
        abort(404, description=f"No custom field '{field_id}' in '{module.value}'")

    log_field_event(module, 'Field Deleted', field_id, f"Custom field {field_id} deleted.")
    return jsonify({'status': 'deleted', 'id': field_id})


@bp.route('/<module>/<field_id>/validate', methods=['POST'])
@login_required
def validate_value(module, field_id):
    module = get_module_or_404(module)
    field = get_field_or_404(module, field_id)
    payload = request.get_json(force=True, silent=True) or {}
    if not isinstance(payload, dict):
        return jsonify({'error': 'Request body must be an object'}), 400
    result = get_field_registry().validate_field_value(field, payload.get('value'))
    return jsonify(result.to_dict())
