import asyncio

import aiohttp

from navigator.core.exceptions import ProviderUnavailable
from navigator.core.logger import logger
from navigator.core.models import settings


async def _get(
    session: aiohttp.ClientSession,
    url: str,
    headers: dict,
    params: dict,
    response_type: str,
):
    async with session.get(url, headers=headers, params=params) as response:
        response.raise_for_status()
        if response_type == "json":
            return await response.json(content_type=None)
        return await response.text()


async def fetch_with_failover(
    session: aiohttp.ClientSession,
    urls: list,
    name: str,
    timeout: float = None,
    headers: dict = None,
    params: dict = None,
    response_type: str = "json",
):
    """
    Try each equivalent endpoint in order and return the first successful body.

    Every attempt is bounded by its own timeout. When all of them fail a single
    ProviderUnavailable is raised; retrying on a later round is up to the caller.
    """
    if timeout is None:
        timeout = settings.MIRROR_TIMEOUT

    request_headers = {"User-Agent": settings.HTTP_USER_AGENT}
    if headers:
        request_headers.update(headers)

    for url in urls:
        try:
            logger.debug(f"[{name}] Trying {url}")
            return await asyncio.wait_for(
                _get(session, url, request_headers, params, response_type), timeout
            )
        except (aiohttp.ClientError, asyncio.TimeoutError, OSError, ValueError) as e:
            logger.log("SCRAPER", f"[{name}] Mirror {url} failed: {e!r}")

    raise ProviderUnavailable(name, len(urls))
