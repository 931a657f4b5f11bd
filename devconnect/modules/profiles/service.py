import logging
import uuid
from supabase import Client
from devconnect.modules.profiles.schemas import (
    ProfileUpsert, ProfileResponse, ProfileOwner,
    ExperienceCreate, EducationCreate, SOCIAL_NETWORKS, split_skills
)
from typing import Any, Dict, List, Optional
from fastapi import HTTPException

logger = logging.getLogger(__name__)

NO_PROFILE = "There is no profile for this user"
PROFILE_NOT_FOUND = "Profile not found"

PROFILE_TEXT_FIELDS = ("company", "website", "location", "bio", "status", "githubusername")


def build_profile_fields(profile_data: ProfileUpsert) -> Dict[str, Any]:
    """Only the fields the caller actually supplied, so an update never nulls the rest"""
    fields: Dict[str, Any] = {}
    for name in PROFILE_TEXT_FIELDS:
        value = getattr(profile_data, name)
        if value:
            fields[name] = value
    if profile_data.skills:
        fields["skills"] = split_skills(profile_data.skills)

    social = {}
    for network in SOCIAL_NETWORKS:
        link = getattr(profile_data, network)
        if link:
            social[network] = link
    if social:
        fields["social"] = social
    return fields


def is_valid_id(value: str) -> bool:
    try:
        uuid.UUID(str(value))
        return True
    except ValueError:
        return False


class ProfileService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def _get_profile_row(self, user_id: str) -> Optional[Dict[str, Any]]:
        result = self.supabase.table("profiles")\
            .select("*")\
            .eq("user_id", user_id)\
            .limit(1)\
            .execute()
        return result.data[0] if result.data else None

    def _get_owners(self, user_ids: List[str]) -> Dict[str, ProfileOwner]:
        if not user_ids:
            return {}
        result = self.supabase.table("users")\
            .select("id, name, avatar")\
            .in_("id", user_ids)\
            .execute()
        return {str(u["id"]): ProfileOwner(**u) for u in result.data or []}

    def _to_responses(self, rows: List[Dict[str, Any]]) -> List[ProfileResponse]:
        """Join each profile row with its owner's name and avatar"""
        owners = self._get_owners(list({str(row["user_id"]) for row in rows}))
        profiles = []
        for row in rows:
            data = {k: v for k, v in row.items() if k != "user_id" and v is not None}
            data["user"] = owners.get(str(row["user_id"]))
            profiles.append(ProfileResponse(**data))
        return profiles

    def _to_response(self, row: Dict[str, Any]) -> ProfileResponse:
        return self._to_responses([row])[0]

    def get_profile_by_user(self, user_id: str) -> Optional[ProfileResponse]:
        row = self._get_profile_row(user_id)
        return self._to_response(row) if row else None

    def get_my_profile(self, user_id: str) -> ProfileResponse:
        profile = self.get_profile_by_user(user_id)
        if not profile:
            raise HTTPException(status_code=400, detail=NO_PROFILE)
        return profile

    def get_profile_for_public(self, user_id: str) -> ProfileResponse:
        """Unknown owner and malformed id both answer 'not found'"""
        if not is_valid_id(user_id):
            raise HTTPException(status_code=400, detail=PROFILE_NOT_FOUND)
        profile = self.get_profile_by_user(user_id)
        if not profile:
            raise HTTPException(status_code=400, detail=PROFILE_NOT_FOUND)
        return profile

    def list_profiles(self) -> List[ProfileResponse]:
        result = self.supabase.table("profiles")\
            .select("*")\
            .order("date", desc=True)\
            .execute()
        return self._to_responses(result.data or [])

    def upsert_profile(self, user_id: str, profile_data: ProfileUpsert) -> ProfileResponse:
        """Create the caller's profile, or update only the supplied columns if one exists"""
        fields = build_profile_fields(profile_data)
        fields["user_id"] = user_id
        result = self.supabase.table("profiles")\
            .upsert(fields, on_conflict="user_id")\
            .execute()
        if not result.data:
            raise HTTPException(status_code=500, detail="Failed to save profile")
        return self._to_response(result.data[0])

    def delete_profile_and_user(self, user_id: str) -> None:
        # Posts are not cascaded, there is no posts module yet
        self.supabase.table("profiles")\
            .delete()\
            .eq("user_id", user_id)\
            .execute()
        self.supabase.table("users")\
            .delete()\
            .eq("id", user_id)\
            .execute()
        logger.info(f"Deleted profile and account of user {user_id}")

    def _save_entries(self, user_id: str, field: str, entries: List[Dict[str, Any]]) -> ProfileResponse:
        result = self.supabase.table("profiles")\
            .update({field: entries})\
            .eq("user_id", user_id)\
            .execute()
        if not result.data:
            raise HTTPException(status_code=400, detail=NO_PROFILE)
        return self._to_response(result.data[0])

    def _add_entry(self, user_id: str, field: str, entry: Dict[str, Any]) -> ProfileResponse:
        row = self._get_profile_row(user_id)
        if not row:
            raise HTTPException(status_code=400, detail=NO_PROFILE)
        entry = {"id": str(uuid.uuid4()), **entry}
        return self._save_entries(user_id, field, [entry] + list(row.get(field) or []))

    def _remove_entry(self, user_id: str, field: str, entry_id: str) -> ProfileResponse:
        row = self._get_profile_row(user_id)
        if not row:
            raise HTTPException(status_code=400, detail=NO_PROFILE)
        entries = list(row.get(field) or [])
        ids = [str(entry.get("id")) for entry in entries]
        remove_index = ids.index(entry_id) if entry_id in ids else -1
        if remove_index == -1:
            return self._to_response(row)
        del entries[remove_index]
        return self._save_entries(user_id, field, entries)

    def add_experience(self, user_id: str, experience: ExperienceCreate) -> ProfileResponse:
        return self._add_entry(user_id, "experience", experience.model_dump(mode="json", by_alias=True))

    def remove_experience(self, user_id: str, exp_id: str) -> ProfileResponse:
        return self._remove_entry(user_id, "experience", exp_id)

    def add_education(self, user_id: str, education: EducationCreate) -> ProfileResponse:
        return self._add_entry(user_id, "education", education.model_dump(mode="json", by_alias=True))

    def remove_education(self, user_id: str, edu_id: str) -> ProfileResponse:
        return self._remove_entry(user_id, "education", edu_id)
