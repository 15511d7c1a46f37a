"""Authentication routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, status
from pydantic import BaseModel, Field

from chute.application.usecase.auth import (
    AddCredentialRequest,
    AddCredentialUseCase,
    ListCredentialsRequest,
    ListCredentialsResponse,
    ListCredentialsUseCase,
    LoginRequest,
    LoginResponse,
    LoginUseCase,
    LogoutRequest,
    LogoutUseCase,
    RegisterRequest,
    RegisterResponse,
    RegisterUseCase,
)
from chute.application.usecase.views import CredentialInfo
from chute.config import AuthSettings
from chute.domain.model import Actor

router = APIRouter(tags=["auth"], route_class=DishkaRoute)


class CredentialAPIRequest(BaseModel):
    """Secret with optional username; no username means an anonymous device."""

    secret: str = Field(min_length=1)
    username: str | None = None
    display_name: str = ""


class AddCredentialAPIRequest(CredentialAPIRequest):
    authorized: bool = True


@router.post(
    "/profiles/self",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    request: CredentialAPIRequest,
    register_use_case: FromDishka[RegisterUseCase],
) -> RegisterResponse:
    """Create a profile with its first credential and return a session token.

    Example:
        POST /profiles/self

        Request:
        {"username": "ana", "secret": "correct horse", "display_name": "laptop"}

        Response:
        {"token": "…40 characters…", "profile": {"id": 7, ...}}
    """
    return await register_use_case.execute(
        RegisterRequest(
            secret=request.secret,
            username=request.username,
            display_name=request.display_name,
        )
    )


@router.post("/actions/login", response_model=LoginResponse)
async def login(
    request: CredentialAPIRequest,
    login_use_case: FromDishka[LoginUseCase],
) -> LoginResponse:
    """Exchange a secret for a fresh session token.

    The previous token of the credential stops working.
    """
    return await login_use_case.execute(
        LoginRequest(secret=request.secret, username=request.username)
    )


@router.post("/actions/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(
    request: Request,
    logout_use_case: FromDishka[LogoutUseCase],
    auth_settings: FromDishka[AuthSettings],
) -> None:
    """Clear the session token sent in the token header."""
    await logout_use_case.execute(
        LogoutRequest(token=request.headers.get(auth_settings.token_header))
    )


@router.get("/profiles/self/auths", response_model=ListCredentialsResponse)
async def list_credentials(
    actor: FromDishka[Actor],
    list_credentials_use_case: FromDishka[ListCredentialsUseCase],
) -> ListCredentialsResponse:
    """List the login methods of the current profile."""
    return await list_credentials_use_case.execute(
        ListCredentialsRequest(actor_id=actor.profile.id)
    )


@router.post("/profiles/self/auths", response_model=CredentialInfo)
async def add_credential(
    request: AddCredentialAPIRequest,
    actor: FromDishka[Actor],
    add_credential_use_case: FromDishka[AddCredentialUseCase],
) -> CredentialInfo:
    """Add a login method to the current profile, or update one it owns."""
    return await add_credential_use_case.execute(
        AddCredentialRequest(
            actor_id=actor.profile.id,
            secret=request.secret,
            username=request.username,
            display_name=request.display_name,
            authorized=request.authorized,
        )
    )
