from __future__ import annotations

from dataclasses import dataclass
import logging
from urllib.parse import quote

import httpx

from app_credentials.application.dto.credentials import AppLoginRequest, AppLoginResult
from app_credentials.application.ports.app_login_port import AppLoginPort


logger = logging.getLogger(__name__)


class AppLoginRequestError(RuntimeError):
    def __init__(self, message: str, *, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


@dataclass(frozen=True)
class AppLoginClientSettings:
    base_url: str
    app_id: str
    timeout_seconds: float


class AppLoginClient(AppLoginPort):
    def __init__(
        self,
        settings: AppLoginClientSettings,
        *,
        transport: httpx.BaseTransport | None = None,
    ):
        self._settings = settings
        self._transport = transport

    def login(self, *, request: AppLoginRequest) -> AppLoginResult:
        url = self._build_login_url(request.provider)
        try:
            with httpx.Client(timeout=self._settings.timeout_seconds, transport=self._transport) as client:
                response = client.post(
                    url,
                    content=request.body.encode("utf-8"),
                    headers={"Content-Type": "application/json", "Accept": "application/json"},
                )
        except httpx.HTTPError as exc:
            logger.warning(
                "app_login_client: request_failed provider=%s error=%s",
                request.provider,
                exc,
            )
            raise AppLoginRequestError(f"Login request failed: {exc}") from exc

        if response.status_code >= 400:
            logger.warning(
                "app_login_client: login_rejected provider=%s status=%s",
                request.provider,
                response.status_code,
            )
            raise AppLoginRequestError(
                f"Login endpoint answered with status {response.status_code}: {_error_message(response)}",
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise AppLoginRequestError("Login endpoint returned a non-JSON body.") from exc

        return _parse_login_result(payload)

    def _build_login_url(self, provider: str) -> str:
        base_url = self._settings.base_url.rstrip("/")
        app_id = quote(self._settings.app_id, safe="")
        return (
            f"{base_url}/api/client/v2.0/app/{app_id}"
            f"/auth/providers/{quote(provider, safe='')}/login"
        )


def _error_message(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        return response.text or "empty body"
    if isinstance(payload, dict) and payload.get("error"):
        return str(payload["error"])
    return str(payload)


def _parse_login_result(payload: object) -> AppLoginResult:
    if not isinstance(payload, dict):
        raise AppLoginRequestError("Login response must be a JSON object.")

    user_id = payload.get("user_id")
    access_token = payload.get("access_token")
    if not user_id or not access_token:
        raise AppLoginRequestError("Login response missing user_id or access_token.")

    refresh_token = payload.get("refresh_token")
    device_id = payload.get("device_id")
    return AppLoginResult(
        user_id=str(user_id),
        access_token=str(access_token),
        refresh_token=str(refresh_token) if refresh_token else None,
        device_id=str(device_id) if device_id else None,
    )
