import logging

import httpx

from ..core.config import Config

logger = logging.getLogger(__name__)


def get_async_http_client(
    config: Config,
    connect_timeout: float = None,
    read_timeout: float = None,
) -> httpx.AsyncClient:
    """
    Returns a configured httpx.AsyncClient with:
    - Default timeouts (connect and read) from the config.
    - Standard User-Agent header.
    """
    c_timeout = connect_timeout if connect_timeout is not None else config.DEFAULT_TIMEOUT_CONNECT
    r_timeout = read_timeout if read_timeout is not None else config.DEFAULT_TIMEOUT_READ

    timeout = httpx.Timeout(r_timeout, connect=c_timeout)

    headers = {"User-Agent": config.USER_AGENT}

    # No retries: a failed resize request is reported, never resent.
    return httpx.AsyncClient(
        timeout=timeout,
        headers=headers,
        verify=config.AGENT_VERIFY_CERTS,
    )
