import logging
from supabase import Client
from postgrest.exceptions import APIError
from devconnect.config.settings import Settings
from devconnect.core.security import create_access_token, gravatar_url, hash_password
from devconnect.modules.users.schemas import RegisterRequest, TokenResponse, UserResponse
from typing import Any, Dict, Optional
from fastapi import HTTPException

logger = logging.getLogger(__name__)

UNIQUE_VIOLATION = "23505"


class UserService:
    def __init__(self, supabase: Client, settings: Settings):
        self.supabase = supabase
        self.settings = settings

    def get_user_record_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        """Raw users row including the password hash"""
        result = self.supabase.table("users")\
            .select("*")\
            .eq("email", email)\
            .limit(1)\
            .execute()
        return result.data[0] if result.data else None

    def get_user_by_id(self, user_id: str) -> Optional[UserResponse]:
        result = self.supabase.table("users")\
            .select("id, name, email, avatar, date")\
            .eq("id", user_id)\
            .limit(1)\
            .execute()
        if not result.data:
            return None
        return UserResponse(**result.data[0])

    def register(self, register_data: RegisterRequest) -> TokenResponse:
        """Create the user and return a signed token for it"""
        if self.get_user_record_by_email(register_data.email):
            raise HTTPException(status_code=400, detail=[{"msg": "User already exists"}])

        try:
            result = self.supabase.table("users").insert({
                "name": register_data.name,
                "email": register_data.email,
                "avatar": gravatar_url(register_data.email),
                "password": hash_password(register_data.password, self.settings.bcrypt_rounds),
            }).execute()
        except APIError as e:
            # Lost a race with a concurrent registration for the same email
            if e.code == UNIQUE_VIOLATION:
                raise HTTPException(status_code=400, detail=[{"msg": "User already exists"}])
            raise

        if not result.data:
            raise HTTPException(status_code=500, detail="Failed to register user")

        user_id = str(result.data[0]["id"])
        logger.info(f"Registered user {user_id}")
        return TokenResponse(token=create_access_token(user_id, self.settings))

    def delete_user(self, user_id: str) -> bool:
        result = self.supabase.table("users")\
            .delete()\
            .eq("id", user_id)\
            .execute()
        return len(result.data) > 0
