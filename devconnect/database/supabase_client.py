from fastapi import Depends
from supabase import create_client, Client
from devconnect.config.settings import Settings, get_settings


class SupabaseClient:
    _client: Client = None

    @classmethod
    def get_client(cls, settings: Settings) -> Client:
        if cls._client is None:
            cls._client = create_client(settings.supabase_url, settings.supabase_key)
        return cls._client

    @classmethod
    def reset_client(cls):
        cls._client = None


def get_supabase(settings: Settings = Depends(get_settings)) -> Client:
    return SupabaseClient.get_client(settings)
