"""
Name: Auth Router

Responsibilities:
  - POST /register, POST /login (public)
  - GET /me (protected): echo the AccessContext

Collaborators:
  - application.usecases.auth (RegisterUserUseCase, LoginUserUseCase)
  - dependencies.require_access
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from .....application.usecases.auth import (
    LoginUserInput,
    LoginUserUseCase,
    RegisterUserInput,
    RegisterUserUseCase,
)
from .....container import get_login_user_use_case, get_register_user_use_case
from .....identity.access_gate import AccessContext
from ..dependencies import require_access
from ..error_mapping import raise_auth_error
from ..schemas.auth import (
    LoginReq,
    LoginRes,
    MeRes,
    RegisterReq,
    RegisterRes,
    UserRes,
)

router = APIRouter(tags=["auth"])


@router.post(
    "/register",
    response_model=RegisterRes,
    status_code=status.HTTP_201_CREATED,
)
def register(
    req: RegisterReq,
    use_case: RegisterUserUseCase = Depends(get_register_user_use_case),
) -> RegisterRes:
    result = use_case.execute(
        RegisterUserInput(
            name=req.name,
            email=req.email,
            password=req.password,
            role=req.role,
        )
    )
    if result.error is not None:
        raise_auth_error(result.error)
    return RegisterRes(message="User registered")


@router.post("/login", response_model=LoginRes)
def login(
    req: LoginReq,
    use_case: LoginUserUseCase = Depends(get_login_user_use_case),
) -> LoginRes:
    result = use_case.execute(LoginUserInput(email=req.email, password=req.password))
    if result.error is not None:
        raise_auth_error(result.error)

    user = result.user
    return LoginRes(
        token=result.token.token,
        expires_in=result.token.expires_in,
        user=UserRes(
            id=user.id,
            name=user.name,
            email=user.email,
            role=user.role,
            created_at=user.created_at,
        ),
    )


@router.get("/me", response_model=MeRes)
def me(access: AccessContext = Depends(require_access)) -> MeRes:
    return MeRes(
        id=access.user_id,
        name=access.name,
        role=access.role,
        issued_at=access.issued_at,
        expires_at=access.expires_at,
    )
