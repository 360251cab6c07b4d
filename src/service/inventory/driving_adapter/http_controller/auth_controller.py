from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, status

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.inventory.app.command.register_user_use_case import RegisterUserUseCase
from src.service.inventory.app.query.authenticate_user_use_case import AuthenticateUserUseCase
from src.service.inventory.domain.entity.user_entity import UserEntity
from src.service.inventory.driving_adapter.http_controller.auth.auth_guard import (
    get_current_user,
)
from src.service.inventory.driving_adapter.http_controller.auth.jwt_auth import JwtAuth
from src.service.inventory.driving_adapter.http_controller.schema.envelope_schema import (
    DataResponse,
)
from src.service.inventory.driving_adapter.http_controller.schema.user_schema import (
    AuthResponse,
    LoginRequest,
    RegisterRequest,
    UserResponse,
)


# === API Router ===

router = APIRouter()


@router.post('/register', status_code=status.HTTP_201_CREATED)
@Logger.io
@inject
async def register(
    request: RegisterRequest,
    use_case: RegisterUserUseCase = Depends(RegisterUserUseCase.depends),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
) -> DataResponse[AuthResponse]:
    user_entity = await use_case.register(email=request.email, password=request.password)

    return DataResponse[AuthResponse](
        data=AuthResponse(
            user=UserResponse.from_entity(user_entity),
            token=jwt_auth.create_jwt_token(user_entity),
        )
    )


@router.post('/login', status_code=status.HTTP_200_OK)
@Logger.io
@inject
async def login(
    request: LoginRequest,
    use_case: AuthenticateUserUseCase = Depends(AuthenticateUserUseCase.depends),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
) -> DataResponse[AuthResponse]:
    user_entity = await use_case.authenticate(email=request.email, password=request.password)

    return DataResponse[AuthResponse](
        data=AuthResponse(
            user=UserResponse.from_entity(user_entity),
            token=jwt_auth.create_jwt_token(user_entity),
        )
    )


@router.get('/me', status_code=status.HTTP_200_OK)
@Logger.io
async def get_me(
    current_user: UserEntity = Depends(get_current_user),
) -> DataResponse[UserResponse]:
    return DataResponse[UserResponse](data=UserResponse.from_entity(current_user))
