from fastapi import APIRouter, Depends
from devconnect.config.settings import Settings, get_settings
from devconnect.database.supabase_client import get_supabase
from devconnect.modules.profiles.schemas import (
    ProfileUpsert, ProfileResponse, ExperienceCreate, EducationCreate, MessageResponse
)
from devconnect.modules.profiles.service import ProfileService
from devconnect.modules.profiles.github import GithubService
from devconnect.core.dependencies import get_current_user
from devconnect.core.security import CurrentUser
from supabase import Client
from typing import Any, Dict, List

router = APIRouter(prefix="/profile", tags=["profile"])


def get_profile_service(supabase: Client = Depends(get_supabase)) -> ProfileService:
    return ProfileService(supabase)


def get_github_service(settings: Settings = Depends(get_settings)) -> GithubService:
    return GithubService(settings)


@router.get("/me", response_model=ProfileResponse)
async def get_my_profile(
    current_user: CurrentUser = Depends(get_current_user),
    service: ProfileService = Depends(get_profile_service)
):
    """Get the current user's profile"""
    return service.get_my_profile(current_user.id)


@router.post("", response_model=ProfileResponse)
async def create_or_update_profile(
    profile_data: ProfileUpsert,
    current_user: CurrentUser = Depends(get_current_user),
    service: ProfileService = Depends(get_profile_service)
):
    """Create or update the current user's profile"""
    return service.upsert_profile(current_user.id, profile_data)


@router.get("", response_model=List[ProfileResponse])
async def list_profiles(service: ProfileService = Depends(get_profile_service)):
    return service.list_profiles()


@router.get("/user/{user_id}", response_model=ProfileResponse)
async def get_profile_by_user(
    user_id: str,
    service: ProfileService = Depends(get_profile_service)
):
    return service.get_profile_for_public(user_id)


@router.delete("", response_model=MessageResponse)
async def delete_profile(
    current_user: CurrentUser = Depends(get_current_user),
    service: ProfileService = Depends(get_profile_service)
):
    """Delete the current user's profile and account"""
    service.delete_profile_and_user(current_user.id)
    return MessageResponse(msg="User deleted")


@router.put("/experience", response_model=ProfileResponse)
async def add_experience(
    experience: ExperienceCreate,
    current_user: CurrentUser = Depends(get_current_user),
    service: ProfileService = Depends(get_profile_service)
):
    return service.add_experience(current_user.id, experience)


@router.delete("/experience/{exp_id}", response_model=ProfileResponse)
async def delete_experience(
    exp_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    service: ProfileService = Depends(get_profile_service)
):
    return service.remove_experience(current_user.id, exp_id)


@router.put("/education", response_model=ProfileResponse)
async def add_education(
    education: EducationCreate,
    current_user: CurrentUser = Depends(get_current_user),
    service: ProfileService = Depends(get_profile_service)
):
    return service.add_education(current_user.id, education)


@router.delete("/education/{edu_id}", response_model=ProfileResponse)
async def delete_education(
    edu_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    service: ProfileService = Depends(get_profile_service)
):
    return service.remove_education(current_user.id, edu_id)


@router.get("/github/{username}", response_model=List[Dict[str, Any]])
async def get_github_repos(
    username: str,
    github: GithubService = Depends(get_github_service)
):
    """Latest repositories of a GitHub user"""
    return await github.list_repos(username)
