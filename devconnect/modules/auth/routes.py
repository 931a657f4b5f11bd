from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool
from devconnect.config.settings import Settings, get_settings
from devconnect.database.supabase_client import get_supabase
from devconnect.modules.auth.schemas import LoginRequest
from devconnect.modules.auth.service import AuthService
from devconnect.modules.users.schemas import TokenResponse, UserResponse
from devconnect.core.dependencies import get_current_user
from devconnect.core.security import CurrentUser
from supabase import Client

router = APIRouter(prefix="/auth", tags=["auth"])


def get_auth_service(
    supabase: Client = Depends(get_supabase),
    settings: Settings = Depends(get_settings)
) -> AuthService:
    return AuthService(supabase, settings)


@router.get("", response_model=UserResponse)
async def get_me(
    current_user: CurrentUser = Depends(get_current_user),
    service: AuthService = Depends(get_auth_service)
):
    """Get the authenticated user"""
    return service.get_current_user(current_user.id)


@router.post("", response_model=TokenResponse)
async def login(
    login_data: LoginRequest,
    service: AuthService = Depends(get_auth_service)
):
    """Login and get a token"""
    return await run_in_threadpool(service.login, login_data)
