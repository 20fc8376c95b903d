"""Users router with a mocked service: status codes and response shapes."""

from unittest.mock import MagicMock

from userhub.core.errors import ObjectNotFoundError
from userhub.models.user import User, UserRequest

USER = User(id="testID", name="Guilherme", email="guilherm@email.com", password="123456")
BODY = {"name": "Guilherme", "email": "guilherme@email.com", "password": "123"}


async def test_save_returns_201_with_empty_body(api_client, mock_service):
    mock_service.save.return_value = USER

    res = await api_client.post("/users", json=BODY)

    assert res.status_code == 201
    assert res.content == b""
    mock_service.save.assert_awaited_once_with(UserRequest(**BODY))


async def test_save_with_padded_name_returns_400(api_client, mock_service):
    res = await api_client.post("/users", json={**BODY, "name": " Guilherme"})

    assert res.status_code == 400
    body = res.json()
    assert body["path"] == "/users"
    assert body["status"] == 400
    assert body["error"] == "Validation ERROR"
    assert body["message"] == "Validation Error on validation attributes"
    assert body["errors"] == [{
        "fieldName": "name",
        "message": "field cannot have blank space at the beginning or at the end",
    }]
    assert "timestamp" in body
    mock_service.save.assert_not_awaited()


async def test_save_with_malformed_json_returns_400_envelope(api_client, mock_service):
    res = await api_client.post(
        "/users", content=b"{not json", headers={"Content-Type": "application/json"},
    )

    assert res.status_code == 400
    body = res.json()
    assert body["error"] == "Validation ERROR"
    assert [e["fieldName"] for e in body["errors"]] == ["body"]
    mock_service.save.assert_not_awaited()


async def test_save_with_invalid_utf8_returns_standard_envelope(api_client, mock_service):
    res = await api_client.post(
        "/users",
        content=b'{"name": "\xff\xfe", "email": "a@b.com", "password": "123"}',
        headers={"Content-Type": "application/json"},
    )

    assert res.status_code == 400
    body = res.json()
    assert "detail" not in body
    assert body["status"] == 400
    assert body["path"] == "/users"
    assert body["error"] == "Bad Request"
    assert "timestamp" in body
    mock_service.save.assert_not_awaited()


async def test_unknown_route_returns_standard_envelope(api_client):
    res = await api_client.get("/nowhere")

    assert res.status_code == 404
    body = res.json()
    assert body["error"] == "Not Found"
    assert body["path"] == "/nowhere"
    assert body["status"] == 404


async def test_wrong_method_returns_405_envelope(api_client):
    res = await api_client.put("/users/testID", json={})

    assert res.status_code == 405
    assert res.json()["error"] == "Method Not Allowed"
    assert "allow" in res.headers


async def test_save_with_array_body_returns_400(api_client):
    res = await api_client.post("/users", json=[BODY])

    assert res.status_code == 400
    assert res.json()["errors"][0]["fieldName"] == "body"


async def test_find_by_id_returns_user(api_client, mock_service):
    mock_service.find_by_id.return_value = USER

    res = await api_client.get("/users/testID")

    assert res.status_code == 200
    assert res.json() == {
        "id": "testID",
        "name": "Guilherme",
        "email": "guilherm@email.com",
        "password": "123456",
    }


async def test_find_by_id_not_found_returns_404(api_client, mock_service):
    mock_service.find_by_id.side_effect = ObjectNotFoundError.for_id("12345", "User")

    res = await api_client.get("/users/12345")

    assert res.status_code == 404
    body = res.json()
    assert body["error"] == "Not Found"
    assert body["message"] == "Object not found. Id: 12345, Type: User"
    assert body["path"] == "/users/12345"


async def test_find_all_returns_array(api_client, mock_service):
    async def stream():
        yield USER

    mock_service.find_all = MagicMock(return_value=stream())

    res = await api_client.get("/users")

    assert res.status_code == 200
    assert res.json() == [{
        "id": "testID",
        "name": "Guilherme",
        "email": "guilherm@email.com",
        "password": "123456",
    }]


async def test_update_returns_user(api_client, mock_service):
    mock_service.update.return_value = USER

    res = await api_client.patch("/users/testID", json=BODY)

    assert res.status_code == 200
    assert res.json()["id"] == "testID"
    mock_service.update.assert_awaited_once_with("testID", UserRequest(**BODY))


async def test_update_validates_body(api_client, mock_service):
    res = await api_client.patch("/users/testID", json={**BODY, "password": "123 "})

    assert res.status_code == 400
    assert res.json()["errors"][0]["fieldName"] == "password"
    mock_service.update.assert_not_awaited()


async def test_update_missing_returns_404(api_client, mock_service):
    mock_service.update.side_effect = ObjectNotFoundError.for_id("nope", "User")

    res = await api_client.patch("/users/nope", json=BODY)

    assert res.status_code == 404


async def test_delete_returns_200_with_empty_body(api_client, mock_service):
    mock_service.delete.return_value = USER

    res = await api_client.delete("/users/testID")

    assert res.status_code == 200
    assert res.content == b""
    mock_service.delete.assert_awaited_once_with("testID")


async def test_unhandled_error_returns_500_without_details(api_client, mock_service):
    mock_service.find_by_id.side_effect = RuntimeError("connection refused to 10.0.0.1")

    res = await api_client.get("/users/testID")

    assert res.status_code == 500
    body = res.json()
    assert body["error"] == "Internal Server Error"
    assert "10.0.0.1" not in res.text


async def test_health(api_client):
    res = await api_client.get("/health")
    assert res.status_code == 200
    assert res.json()["status"] == "ok"


async def test_openapi_documents_user_request_body(api_client):
    paths = (await api_client.get("/openapi.json")).json()["paths"]

    for path, method in (("/users", "post"), ("/users/{user_id}", "patch")):
        body = paths[path][method]["requestBody"]
        schema = body["content"]["application/json"]["schema"]
        assert body["required"] is True
        assert set(schema["properties"]) == {"name", "email", "password"}
        assert set(schema["required"]) == {"name", "email", "password"}
