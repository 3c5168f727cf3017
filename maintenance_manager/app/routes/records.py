# app/routes/records.py
import logging
from flask import request, jsonify
from flask_login import login_required
from maintenance_manager.app import db
from maintenance_manager.app.fields import get_field_registry, ModuleName
from maintenance_manager.app.fields.forms import build_form, equipment_options, serialize_form_data
from maintenance_manager.app.models import ModuleRecord
from maintenance_manager.app.routes import records_bp as bp, get_module_or_404

logger = logging.getLogger(__name__)


def get_record_or_404(module, record_id):
    return ModuleRecord.query.filter_by(id=record_id, module=module.value).first_or_404(
        description=f"Record {record_id} not found in '{module.value}'")


def validated_form(module):
    fields = get_field_registry().get_module_fields(module)
    equipment = None
    if module is ModuleName.WORKORDERS:
        records = ModuleRecord.query.filter_by(module=ModuleName.EQUIPMENT.value).order_by(ModuleRecord.id).all()
        equipment = equipment_options(records)
    form = build_form(fields, formdata=request.form, equipment=equipment)
    return form, form.validate()


@bp.route('/<module>')
@login_required
def list_records(module):
    module = get_module_or_404(module)
    records = ModuleRecord.query.filter_by(module=module.value).order_by(ModuleRecord.id).all()
    return jsonify([r.to_dict() for r in records])


@bp.route('/<module>', methods=['POST'])
@login_required
def add_record(module):
    module = get_module_or_404(module)
    form, valid = validated_form(module)
    if not valid:
        return jsonify({'errors': form.errors}), 400

    try:
        record = ModuleRecord(module, serialize_form_data(form))
        db.session.add(record)
        db.session.commit()
    except Exception:
        db.session.rollback()
        logger.exception("Could not create %s record", module.value)
        return jsonify({'error': 'An error occurred while creating the record'}), 500

    logger.info("Created %s record %s", module.value, record.id)
    return jsonify(record.to_dict()), 201


@bp.route('/<module>/<int:record_id>')
@login_required
def view_record(module, record_id):
    module = get_module_or_404(module)
    return jsonify(get_record_or_404(module, record_id).to_dict())


@bp.route('/<module>/<int:record_id>', methods=['POST'])
@login_required
def update_record(module, record_id):
    module = get_module_or_404(module)
    record = get_record_or_404(module, record_id)
    form, valid = validated_form(module)
    if not valid:
        return jsonify({'errors': form.errors}), 400

    # values of fields removed from the schema are kept
    record.data = {**(record.data or {}), **serialize_form_data(form)}
    try:
        db.session.commit()
    except Exception:
        db.session.rollback()
        logger.exception("Could not update %s record %s", module.value, record_id)
        return jsonify({'error': 'An error occurred while updating the record'}), 500
    return jsonify(record.to_dict())


@bp.route('/<module>/<int:record_id>/form-data')
@login_required
def record_form_data(module, record_id):
    module = get_module_or_404(module)
    record = get_record_or_404(module, record_id)
    return jsonify(get_field_registry().generate_form_data(module, record.data))
