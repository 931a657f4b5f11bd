from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool
from devconnect.config.settings import Settings, get_settings
from devconnect.database.supabase_client import get_supabase
from devconnect.modules.users.schemas import RegisterRequest, TokenResponse
from devconnect.modules.users.service import UserService
from supabase import Client

router = APIRouter(prefix="/users", tags=["users"])


def get_user_service(
    supabase: Client = Depends(get_supabase),
    settings: Settings = Depends(get_settings)
) -> UserService:
    return UserService(supabase, settings)


@router.post("", response_model=TokenResponse)
async def register(
    register_data: RegisterRequest,
    service: UserService = Depends(get_user_service)
):
    """Register a user and return a token"""
    # bcrypt is CPU bound, keep it off the event loop
    return await run_in_threadpool(service.register, register_data)
