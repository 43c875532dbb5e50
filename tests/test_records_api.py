from models import Record


def valid_payload(**overrides):
    data = {'name': 'Ann', 'surname': 'Lee', 'age': 30, 'phone_number': '555-1'}
    data.update(overrides)
    return data


def test_create_returns_created_record_with_location(client):
    rv = client.post('/records', json=valid_payload())
    assert rv.status_code == 201
    body = rv.get_json()
    assert isinstance(body['id'], int)
    assert body['name'] == 'Ann'
    assert body['phone_number'] == '555-1'
    assert rv.headers['Location'].endswith(f"/records/{body['id']}")


def test_create_assigns_distinct_identifiers(client):
    first = client.post('/records', json=valid_payload()).get_json()
    second = client.post('/records', json=valid_payload(name='Bo')).get_json()
    assert first['id'] != second['id']
    assert Record.query.count() == 2


def test_lookup_returns_submitted_fields(client):
    created = client.post('/records', json=valid_payload(name='Bo', surname='Kim', age=41, phone_number='555-2')).get_json()
    rv = client.get(f"/records/{created['id']}")
    assert rv.status_code == 200
    assert rv.get_json() == {
        'id': created['id'],
        'name': 'Bo',
        'surname': 'Kim',
        'age': 41,
        'phone_number': '555-2',
    }


def test_lookup_missing_record_is_not_found(client):
    rv = client.get('/records/9999')
    assert rv.status_code == 404
    assert rv.get_json() == {'success': False, 'error': 'Record not found'}


def test_create_reports_every_invalid_field(client):
    rv = client.post('/records', json={'name': '  ', 'age': 'old'})
    assert rv.status_code == 400
    body = rv.get_json()
    assert body['success'] is False
    assert set(body['errors']) == {'name', 'surname', 'age', 'phone_number'}
    assert Record.query.count() == 0


def test_create_rejects_caller_supplied_id(client):
    rv = client.post('/records', json=valid_payload(id=7))
    assert rv.status_code == 400
    assert 'id' in rv.get_json()['errors']
    assert Record.query.count() == 0


def test_create_rejects_non_json_body(client):
    rv = client.post('/records', data='name=Ann', content_type='application/x-www-form-urlencoded')
    assert rv.status_code == 400
    assert rv.get_json()['success'] is False


def test_create_accepts_numeric_string_age(client):
    rv = client.post('/records', json=valid_payload(age='42'))
    assert rv.status_code == 201
    assert rv.get_json()['age'] == 42


def test_unknown_route_returns_json_404(client):
    rv = client.get('/records/not-a-number')
    assert rv.status_code == 404
    assert rv.get_json()['success'] is False
