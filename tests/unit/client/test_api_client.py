"""Unit tests for ProfileApiClient."""

import json

import httpx
import pytest

from client.api import PROFILE_PATH, ProfileApiClient, ProfileData
from client.results import Err, ErrorKind, Ok


def _client(handler) -> ProfileApiClient:
    http = httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://test")
    return ProfileApiClient(http)


def _error(status_code: int, error_code: str, message: str) -> httpx.Response:
    return httpx.Response(
        status_code, json={"error_code": error_code, "message": message, "details": None}
    )


class TestFetchProfile:
    async def test_returns_profile_data(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.method == "GET"
            assert request.url.path == PROFILE_PATH
            return httpx.Response(
                200,
                json={"id": "u-1", "name": "Alice", "email": "alice@example.com", "image": None},
            )

        result = await _client(handler).fetch_profile()

        assert result == Ok(ProfileData(id="u-1", name="Alice", email="alice@example.com"))

    async def test_malformed_body_is_unexpected(self):
        result = await _client(lambda request: httpx.Response(200, json={"id": "u-1"})).fetch_profile()

        assert isinstance(result, Err)
        assert result.kind == ErrorKind.UNEXPECTED

    @pytest.mark.parametrize(
        ("status_code", "kind"),
        [
            (400, ErrorKind.INVALID_ARGUMENT),
            (401, ErrorKind.UNAUTHORIZED),
            (404, ErrorKind.NOT_FOUND),
            (500, ErrorKind.STORAGE_ERROR),
            (429, ErrorKind.UNEXPECTED),
        ],
    )
    async def test_status_maps_to_error_kind(self, status_code: int, kind: ErrorKind):
        result = await _client(
            lambda request: _error(status_code, "SOME_CODE", "Something failed")
        ).fetch_profile()

        assert result == Err(kind, "Something failed", status_code)
        assert not result.ok

    async def test_transport_failure_is_unexpected(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        result = await _client(handler).fetch_profile()

        assert isinstance(result, Err)
        assert result.kind == ErrorKind.UNEXPECTED
        assert result.status_code is None

    async def test_non_json_error_body_gets_generic_message(self):
        result = await _client(
            lambda request: httpx.Response(502, text="<html>Bad gateway</html>")
        ).fetch_profile()

        assert result == Err(ErrorKind.STORAGE_ERROR, "Request failed with status 502", 502)


class TestUpdateProfile:
    async def test_sends_full_payload(self):
        sent: list[dict] = []

        def handler(request: httpx.Request) -> httpx.Response:
            assert request.method == "PUT"
            sent.append(json.loads(request.content))
            return httpx.Response(200, json={"message": "Profile updated successfully"})

        result = await _client(handler).update_profile(
            name="Alice B", password="newpass123", image="https://cdn.example.com/a.png"
        )

        assert result == Ok("Profile updated successfully")
        assert sent == [
            {"name": "Alice B", "password": "newpass123", "image": "https://cdn.example.com/a.png"}
        ]

    async def test_empty_password_is_omitted(self):
        sent: list[dict] = []

        def handler(request: httpx.Request) -> httpx.Response:
            sent.append(json.loads(request.content))
            return httpx.Response(200, json={"message": "ok"})

        await _client(handler).update_profile(name="Alice", password="")

        assert sent == [{"name": "Alice", "image": None}]

    async def test_bad_request_is_invalid_argument(self):
        result = await _client(
            lambda request: _error(400, "VALIDATION_ERROR", "Name is required")
        ).update_profile(name="")

        assert result == Err(ErrorKind.INVALID_ARGUMENT, "Name is required", 400)


class TestDeleteProfile:
    async def test_returns_message(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.method == "DELETE"
            return httpx.Response(200, json={"message": "Account deleted successfully"})

        assert await _client(handler).delete_profile() == Ok("Account deleted successfully")
