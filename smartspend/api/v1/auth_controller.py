# External package imports
from fastapi import APIRouter, Depends, status

# Local application imports
from ...application.dto.auth_dto import UserRegistrationRequest, UserLoginRequest, AuthResponse
from ...application.dto.user_dto import CurrentUserResponse
from ...application.use_cases.auth.register_user import RegisterUserUseCase
from ...application.use_cases.auth.login_user import LoginUserUseCase
from ...application.use_cases.auth.get_current_user import GetCurrentUserUseCase
from ...di.container import get_container
from .dependencies import CurrentIdentity, get_current_identity


router = APIRouter(tags=["authentication"])


@router.post("/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def signup(request: UserRegistrationRequest) -> AuthResponse:
    """
    Register a new user

    Args:
        request: User signup request

    Returns:
        AuthResponse with the created user and an access token
    """
    container = get_container()
    register_use_case = container.get(RegisterUserUseCase)
    return await register_use_case.execute(request)


@router.post("/login", response_model=AuthResponse)
async def login(request: UserLoginRequest) -> AuthResponse:
    """
    Authenticate user and get access token

    Args:
        request: User login request

    Returns:
        AuthResponse with the user and an access token
    """
    container = get_container()
    login_use_case = container.get(LoginUserUseCase)
    return await login_use_case.execute(request)


@router.get("/me", response_model=CurrentUserResponse)
async def get_me(identity: CurrentIdentity = Depends(get_current_identity)) -> CurrentUserResponse:
    """
    Get current authenticated user information

    Args:
        identity: Current authenticated identity (from dependency)

    Returns:
        CurrentUserResponse wrapping the user information
    """
    container = get_container()
    get_current_user_use_case = container.get(GetCurrentUserUseCase)

    user = await get_current_user_use_case.execute(identity.user_id)
    return CurrentUserResponse(user=user)
