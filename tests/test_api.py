import pytest

from double_slit.api import CONFIGURATIONS_PATH, create_app


@pytest.fixture
def client(store):
    app = create_app(store)
    app.config["TESTING"] = True
    return app.test_client()


def test_create_list_delete(client):
    resp = client.post(CONFIGURATIONS_PATH, json={"name": "Test", "wavelength": 450, "separation": 0.3, "distance": 50})
    assert resp.status_code == 201
    created = resp.get_json()
    assert created["name"] == "Test"
    assert created["wavelength"] == 450
    assert "id" in created and "createdAt" in created

    listed = client.get(CONFIGURATIONS_PATH).get_json()
    assert listed == [created]

    resp = client.delete(f"{CONFIGURATIONS_PATH}/{created['id']}")
    assert resp.status_code == 204
    assert client.get(CONFIGURATIONS_PATH).get_json() == []


def test_create_requires_name(client):
    resp = client.post(CONFIGURATIONS_PATH, json={"name": "", "wavelength": 450, "separation": 0.3, "distance": 50})
    assert resp.status_code == 400
    assert resp.get_json() == {"message": "Name is required", "field": "name"}


def test_create_missing_field(client):
    resp = client.post(CONFIGURATIONS_PATH, json={"name": "x", "wavelength": 450, "separation": 0.3})
    assert resp.status_code == 400
    assert resp.get_json()["field"] == "distance"


def test_create_rejects_non_object_body(client):
    resp = client.post(CONFIGURATIONS_PATH, data="not json", content_type="text/plain")
    assert resp.status_code == 400
    assert "message" in resp.get_json()


def test_delete_invalid_id(client):
    resp = client.delete(f"{CONFIGURATIONS_PATH}/abc")
    assert resp.status_code == 400
    assert resp.get_json() == {"message": "Invalid ID"}


def test_delete_unknown_id(client):
    resp = client.delete(f"{CONFIGURATIONS_PATH}/999")
    assert resp.status_code == 404
    assert resp.get_json() == {"message": "Configuration not found"}


@pytest.mark.parametrize("field", ["wavelength", "separation", "distance"])
@pytest.mark.parametrize("token", ["Infinity", "-Infinity", "NaN"])
def test_create_rejects_non_finite_numbers(client, field, token):
    values = {"wavelength": "450", "separation": "0.3", "distance": "50"}
    values[field] = token
    body = '{"name": "x", ' + ", ".join(f'"{k}": {v}' for k, v in values.items()) + "}"
    resp = client.post(CONFIGURATIONS_PATH, data=body, content_type="application/json")
    assert resp.status_code == 400
    assert resp.get_json()["field"] == field
    assert client.get(CONFIGURATIONS_PATH).get_json() == []


def test_delete_id_too_large_for_database(client):
    resp = client.delete(f"{CONFIGURATIONS_PATH}/99999999999999999999")
    assert resp.status_code == 404
    assert resp.get_json() == {"message": "Configuration not found"}
