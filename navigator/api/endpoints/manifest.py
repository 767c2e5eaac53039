from fastapi import APIRouter

from navigator.core.config_validation import config_check
from navigator.core.models import RESOLUTIONS, settings
from navigator.utils.cache import CachedJSONResponse, CachePolicies

router = APIRouter()


@router.get(
    "/manifest.json",
    tags=["Stremio"],
    summary="Add-on Manifest",
    description="Returns the add-on manifest.",
)
@router.get(
    "/{b64config}/manifest.json",
    tags=["Stremio"],
    summary="Add-on Manifest",
    description="Returns the add-on manifest with existing configuration.",
)
async def manifest(b64config: str = None):
    config = config_check(b64config)

    base_manifest = {
        "id": settings.ADDON_ID,
        "name": f"{settings.ADDON_NAME} | {config.preferredResolution}",
        "description": "Aggregates torrent and debrid providers and picks one stream for instant autoplay.",
        "version": "2.3.0",
        "catalogs": [],
        "resources": ["stream"],
        "types": ["movie", "series"],
        "idPrefixes": ["tt"],
        "config": [
            {
                "key": "resolution",
                "type": "select",
                "title": "Preferred Resolution",
                "options": RESOLUTIONS,
                "default": "1080p",
                "required": False,
            }
        ],
        "behaviorHints": {"configurable": True, "configurationRequired": False},
    }

    return CachedJSONResponse(base_manifest, cache_control=CachePolicies.manifest())
