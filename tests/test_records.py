from maintenance_manager.app import db
from maintenance_manager.app.models import ModuleRecord


def test_records_require_login(client):
    assert client.get('/records/equipment').status_code == 401


def test_create_record(user_client):
    response = user_client.post('/records/scheduling', data={
        'taskName': 'Lubricate bearings',
        'frequency': 'monthly',
        'priority': 'high',
        'estimatedDuration': '45',
    })
    assert response.status_code == 201
    record = response.get_json()
    assert record['module'] == 'scheduling'
    assert record['data'] == {
        'taskName': 'Lubricate bearings',
        'frequency': 'monthly',
        'priority': 'high',
        'estimatedDuration': 45.0,
    }

    listed = user_client.get('/records/scheduling').get_json()
    assert [r['id'] for r in listed] == [record['id']]


def test_invalid_record_reports_field_errors(user_client):
    response = user_client.post('/records/scheduling', data={'frequency': 'hourly'})
    assert response.status_code == 400
    errors = response.get_json()['errors']
    assert errors['taskName'] == ['Task Name is required']
    assert 'frequency' in errors


def test_custom_fields_flow_into_records(admin_client):
    admin_client.post('/fields/equipment', json={
        'name': 'warrantyMonths', 'label': 'Warranty Months', 'type': 'number',
        'required': True, 'validation': {'min': 0},
    })
    equipment = {
        'name': 'Pump A', 'type': 'Bomba', 'location': 'Plant 1',
        'criticality': 'High', 'status': 'Operational',
    }

    response = admin_client.post('/records/equipment', data=dict(equipment, warrantyMonths='-1'))
    assert response.status_code == 400
    assert 'warrantyMonths' in response.get_json()['errors']

    response = admin_client.post('/records/equipment', data=dict(equipment, warrantyMonths='12'))
    assert response.status_code == 201
    assert response.get_json()['data']['warrantyMonths'] == 12.0


def test_work_orders_pick_existing_equipment(user_client, app):
    with app.app_context():
        pump = ModuleRecord('equipment', {'name': 'Pump A', 'location': 'Plant 1'})
        db.session.add(pump)
        db.session.commit()
        pump_id = pump.id

    work_order = {
        'type': 'Corrective', 'description': 'Replace seal', 'priority': 'High',
    }
    response = user_client.post('/records/workorders', data=dict(work_order, equipmentId='999'))
    assert response.status_code == 400
    assert 'equipmentId' in response.get_json()['errors']

    response = user_client.post('/records/workorders', data=dict(work_order, equipmentId=str(pump_id)))
    assert response.status_code == 201
    assert response.get_json()['data']['equipmentId'] == str(pump_id)


def test_update_record_and_form_data(user_client):
    record = user_client.post('/records/dashboard', data={'widgetType': 'KPI', 'title': 'MTBF'}).get_json()

    response = user_client.post(f"/records/dashboard/{record['id']}", data={'widgetType': 'Chart', 'title': 'MTTR'})
    assert response.status_code == 200
    assert response.get_json()['data'] == {'widgetType': 'Chart', 'title': 'MTTR'}

    form_data = user_client.get(f"/records/dashboard/{record['id']}/form-data").get_json()
    assert form_data == {'widgetType': 'Chart', 'title': 'MTTR'}


def test_missing_record(user_client):
    assert user_client.get('/records/equipment/42').status_code == 404
    assert user_client.get('/records/unknown/1').status_code == 404
