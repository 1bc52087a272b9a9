import logging
from typing import Optional

import httpx

import chatrelay.config.config as configs
from chatrelay.exceptions import NetworkError

logger = logging.getLogger(__name__)


class RelayClient:
    """Async transport from the chat client to the relay's POST /api/chat."""

    def __init__(self, base_url: Optional[str] = None, http_client: Optional[httpx.AsyncClient] = None):
        self.base_url = (base_url or configs.CHAT_API_URL).rstrip("/")
        self._http = http_client or httpx.AsyncClient()

    @property
    def chat_endpoint(self) -> str:
        return f"{self.base_url}/api/chat"

    async def send(self, message: str, history: list[dict]) -> Optional[str]:
        try:
            response = await self._http.post(
                self.chat_endpoint,
                json={"message": message, "history": history},
            )
        except httpx.RequestError as exc:
            logger.warning("relay request failed: %s", exc.__class__.__name__)
            raise NetworkError("Network error") from exc

        if not response.is_success:
            logger.warning("relay answered with status=%s", response.status_code)
            raise NetworkError("Network error")

        try:
            data = response.json()
        except ValueError as exc:
            raise NetworkError("Network error") from exc

        reply = data.get("reply") if isinstance(data, dict) else None
        return reply if isinstance(reply, str) else None

    async def aclose(self) -> None:
        await self._http.aclose()
