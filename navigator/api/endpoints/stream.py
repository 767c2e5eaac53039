from fastapi import APIRouter

from navigator.core.config_validation import config_check
from navigator.core.logger import logger
from navigator.core.models import settings
from navigator.services.orchestration import select_best
from navigator.utils.cache import CachedJSONResponse, CachePolicies
from navigator.utils.formatting import format_selection

streams = APIRouter()


@streams.get(
    "/stream/{media_type}/{media_id}.json",
    tags=["Stremio"],
    summary="Stream Provider",
    description="Returns the autoplay stream followed by fallback streams.",
)
@streams.get(
    "/{b64config}/stream/{media_type}/{media_id}.json",
    tags=["Stremio"],
    summary="Stream Provider",
    description="Returns the autoplay stream followed by fallback streams, using the given configuration.",
)
async def stream(media_type: str, media_id: str, b64config: str = None):
    if media_type not in ("movie", "series"):
        return CachedJSONResponse(
            {"streams": []}, cache_control=CachePolicies.empty_results()
        )

    config = config_check(b64config)
    logger.log(
        "API", f"Stream request: {media_type} {media_id} (Pref: {config.preferredResolution})"
    )

    selection = await select_best(media_type, media_id, config)
    if selection.chosen is None:
        return CachedJSONResponse(
            {"streams": []}, cache_control=CachePolicies.empty_results()
        )

    return CachedJSONResponse(
        {"streams": format_selection(selection)},
        cache_control=CachePolicies.streams(settings.RESULT_CACHE_TTL),
    )
