# src/realloc/resolver/agent_client.py
"""
HTTP client for the node agent's resize endpoint.
"""

import logging
from typing import Optional

import httpx

from ..core.config import Config
from ..core.exceptions import TransportError
from ..models.resources import ResizeRequest
from ..utils.http_client import get_async_http_client

logger = logging.getLogger(__name__)


class AgentClient:
    """Sends resize requests to the agent listening on a node."""

    def __init__(self, config: Config, client: Optional[httpx.AsyncClient] = None):
        self.scheme = config.AGENT_SCHEME
        self.port = config.AGENT_PORT
        self._client = client or get_async_http_client(config)

    def agent_url(self, host: str) -> str:
        return f"{self.scheme}://{host}:{self.port}/"

    async def send(self, host: str, request: ResizeRequest) -> str:
        """
        POSTs one resize request and returns the response body verbatim.

        The body is returned whatever the status code; the agent's error
        messages are meant for the operator.

        Raises:
            TransportError: If the request could not be sent or the response not read.
        """
        url = self.agent_url(host)
        logger.debug("POST %s %s", url, request.to_query())
        try:
            response = await self._client.post(url, params=request.to_query())
        except httpx.HTTPError as e:
            raise TransportError(f"failed to reach agent at {url}: {e}") from e

        if response.is_error:
            logger.warning("Agent at %s answered %s for %s", url, response.status_code, request.kind.value)

        return response.text

    async def close(self):
        await self._client.aclose()
