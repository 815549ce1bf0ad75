"""HTTP client for the profile API."""

from dataclasses import dataclass
from typing import Any

import httpx
import structlog

from client.results import Err, ErrorKind, Ok, Result

logger = structlog.get_logger()

PROFILE_PATH = "/api/v1/profile"


@dataclass(frozen=True, slots=True)
class ProfileData:
    """Profile as returned by the server."""

    id: str
    name: str
    email: str
    image: str | None = None


class ProfileApiClient:
    """Thin wrapper over ``httpx.AsyncClient`` that never raises for failed calls.

    The session credential travels with the underlying client, as a cookie
    or an ``Authorization`` header configured by the caller.
    """

    def __init__(self, http: httpx.AsyncClient) -> None:
        self._http = http

    async def fetch_profile(self) -> Result[ProfileData]:
        result = await self._request("GET", PROFILE_PATH)
        if isinstance(result, Err):
            return result
        body = result.value
        try:
            return Ok(
                ProfileData(
                    id=str(body["id"]),
                    name=body["name"],
                    email=body["email"],
                    image=body.get("image"),
                )
            )
        except (KeyError, TypeError):
            return Err(ErrorKind.UNEXPECTED, "Malformed profile response")

    async def update_profile(
        self, name: str, password: str | None = None, image: str | None = None
    ) -> Result[str]:
        payload: dict[str, Any] = {"name": name, "image": image}
        # Absent means "keep the current password"
        if password:
            payload["password"] = password
        result = await self._request("PUT", PROFILE_PATH, json=payload)
        if isinstance(result, Err):
            return result
        return Ok(str(result.value.get("message", "")))

    async def delete_profile(self) -> Result[str]:
        result = await self._request("DELETE", PROFILE_PATH)
        if isinstance(result, Err):
            return result
        return Ok(str(result.value.get("message", "")))

    async def _request(self, method: str, url: str, **kwargs: Any) -> Result[dict[str, Any]]:
        try:
            response = await self._http.request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            logger.warning("profile_api_unreachable", method=method, error=str(exc))
            return Err(ErrorKind.UNEXPECTED, "Could not reach the server")

        body = _json_or_empty(response)
        if response.is_success:
            return Ok(body)

        kind = ErrorKind.from_status(response.status_code)
        message = body.get("message") or f"Request failed with status {response.status_code}"
        logger.info(
            "profile_api_error",
            method=method,
            status_code=response.status_code,
            error_code=body.get("error_code"),
        )
        return Err(kind, str(message), response.status_code)


def _json_or_empty(response: httpx.Response) -> dict[str, Any]:
    try:
        body = response.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}
