from __future__ import annotations

from typing import Protocol

from app_credentials.application.dto.credentials import AppLoginRequest, AppLoginResult


class AppLoginPort(Protocol):
    def login(self, *, request: AppLoginRequest) -> AppLoginResult:
        ...
