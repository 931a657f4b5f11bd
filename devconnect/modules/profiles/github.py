import logging
from urllib.parse import quote

import httpx
from fastapi import HTTPException
from typing import Any, Dict, List, Optional

from devconnect.config.settings import Settings

logger = logging.getLogger(__name__)

REPOS_PER_PAGE = 5
REPOS_SORT = "created:asc"


class GithubService:
    """Lists a GitHub user's repositories"""

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings
        self.transport = transport

    def _headers(self) -> Dict[str, str]:
        headers = {"User-Agent": self.settings.app_name}
        if self.settings.github_token:
            headers["Authorization"] = f"token {self.settings.github_token}"
        return headers

    async def list_repos(self, username: str) -> List[Dict[str, Any]]:
        url = f"{self.settings.github_api_url}/users/{quote(username, safe='')}/repos"
        params = {"per_page": REPOS_PER_PAGE, "sort": REPOS_SORT}
        try:
            async with httpx.AsyncClient(
                transport=self.transport,
                timeout=self.settings.github_timeout,
            ) as client:
                response = await client.get(url, params=params, headers=self._headers())
                response.raise_for_status()
                return response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"GitHub repos lookup failed for {username}: {e}")
            raise HTTPException(status_code=404, detail="No Github profile found")
