import aiohttp

from navigator.core.exceptions import ProviderUnavailable
from navigator.core.logger import logger
from navigator.core.models import settings
from navigator.utils.network import fetch_with_failover


async def resolve_title(session: aiohttp.ClientSession, media_type: str, media_id: str):
    try:
        data = await fetch_with_failover(
            session,
            [f"{settings.CINEMETA_URL}/meta/{media_type}/{media_id}.json"],
            "Cinemeta",
        )
    except ProviderUnavailable as e:
        logger.warning(f"Exception while getting Cinemeta metadata for {media_id}: {e}")
        return None

    meta = data.get("meta") if isinstance(data, dict) else None
    if not isinstance(meta, dict) or not meta.get("name"):
        return None

    year = meta.get("year") or meta.get("releaseInfo")
    if isinstance(year, str):
        year = year[:4] if year[:4].isdigit() else None

    return meta["name"], year
