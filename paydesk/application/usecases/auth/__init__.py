from .auth_results import AuthError, AuthErrorCode, LoginResult, RegisterResult
from .login_user import LoginUserInput, LoginUserUseCase
from .register_user import RegisterUserInput, RegisterUserUseCase

__all__ = [
    "AuthError",
    "AuthErrorCode",
    "LoginResult",
    "LoginUserInput",
    "LoginUserUseCase",
    "RegisterResult",
    "RegisterUserInput",
    "RegisterUserUseCase",
]
