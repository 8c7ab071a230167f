from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from app_credentials.api.deps import (
    get_build_credential_use_case,
    get_login_with_credential_use_case,
)
from app_credentials.api.schemas.credentials import (
    CredentialPreviewResponse,
    CredentialRequest,
    LoginResponse,
    ProviderResponse,
    ProvidersResponse,
)
from app_credentials.application.dto.credentials import (
    CredentialInput,
    LoginWithCredentialInput,
)
from app_credentials.application.use_cases.build_credential import BuildCredentialUseCase
from app_credentials.application.use_cases.login_with_credential import LoginWithCredentialUseCase
from app_credentials.domain.entities.auth_provider import all_providers, identifier_of
from app_credentials.domain.entities.credential import Credential
from app_credentials.domain.exceptions import (
    InvalidCredentialInputError,
    SerializationFailureError,
)
from app_credentials.infrastructure.clients.app_login_client import AppLoginRequestError


router = APIRouter()


def _build_credential(req: CredentialRequest, use_case: BuildCredentialUseCase) -> Credential:
    try:
        return use_case.execute(
            CredentialInput(
                kind=req.kind,
                token=req.token,
                username=req.username,
                password=req.password,
                api_key=req.api_key,
                payload=req.payload,
            )
        )
    except InvalidCredentialInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@router.get("/v1/auth/providers", response_model=ProvidersResponse)
def list_providers():
    return ProvidersResponse(
        providers=[
            ProviderResponse(name=provider.name, identifier=identifier_of(provider))
            for provider in all_providers()
        ]
    )


@router.post("/v1/auth/credentials/preview", response_model=CredentialPreviewResponse)
def preview_credential(
    req: CredentialRequest,
    use_case: BuildCredentialUseCase = Depends(get_build_credential_use_case),
):
    credential = _build_credential(req, use_case)
    return CredentialPreviewResponse(
        provider=credential.provider.name,
        identifier=credential.provider_as_string(),
    )


@router.post("/v1/auth/login", response_model=LoginResponse)
def login_with_credential(
    req: CredentialRequest,
    build_use_case: BuildCredentialUseCase = Depends(get_build_credential_use_case),
    login_use_case: LoginWithCredentialUseCase = Depends(get_login_with_credential_use_case),
):
    credential = _build_credential(req, build_use_case)
    try:
        output = login_use_case.execute(LoginWithCredentialInput(credential=credential))
    except SerializationFailureError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except AppLoginRequestError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc

    return LoginResponse(
        provider=output.provider,
        user_id=output.user_id,
        access_token=output.access_token,
        refresh_token=output.refresh_token,
        device_id=output.device_id,
    )
