"""Authentication use cases."""

from .authenticate import AuthenticateRequest, AuthenticateUseCase
from .credentials import (
    AddCredentialRequest,
    AddCredentialUseCase,
    ListCredentialsRequest,
    ListCredentialsResponse,
    ListCredentialsUseCase,
)
from .login import (
    LoginRequest,
    LoginResponse,
    LoginUseCase,
    LogoutRequest,
    LogoutUseCase,
)
from .register import RegisterRequest, RegisterResponse, RegisterUseCase

__all__ = [
    "AddCredentialRequest",
    "AddCredentialUseCase",
    "AuthenticateRequest",
    "AuthenticateUseCase",
    "ListCredentialsRequest",
    "ListCredentialsResponse",
    "ListCredentialsUseCase",
    "LoginRequest",
    "LoginResponse",
    "LoginUseCase",
    "LogoutRequest",
    "LogoutUseCase",
    "RegisterRequest",
    "RegisterResponse",
    "RegisterUseCase",
]
