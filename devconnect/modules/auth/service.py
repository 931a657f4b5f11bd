import logging
from supabase import Client
from devconnect.config.settings import Settings
from devconnect.core.security import create_access_token, verify_password
from devconnect.modules.auth.schemas import LoginRequest
from devconnect.modules.users.schemas import TokenResponse, UserResponse
from devconnect.modules.users.service import UserService
from fastapi import HTTPException

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = [{"msg": "Invalid credentials"}]


class AuthService:
    def __init__(self, supabase: Client, settings: Settings):
        self.settings = settings
        self.users = UserService(supabase, settings)

    def login(self, login_data: LoginRequest) -> TokenResponse:
        """Check email and password, issue a token"""
        user = self.users.get_user_record_by_email(login_data.email)
        if not user:
            raise HTTPException(status_code=400, detail=INVALID_CREDENTIALS)

        if not verify_password(login_data.password, user["password"]):
            logger.info(f"Failed login for user {user['id']}")
            raise HTTPException(status_code=400, detail=INVALID_CREDENTIALS)

        return TokenResponse(token=create_access_token(str(user["id"]), self.settings))

    def get_current_user(self, user_id: str) -> UserResponse:
        user = self.users.get_user_by_id(user_id)
        if not user:
            raise HTTPException(status_code=400, detail="User not found")
        return user
