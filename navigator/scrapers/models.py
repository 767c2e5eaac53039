from typing import Optional

from pydantic import BaseModel, ConfigDict


class ScrapeRequest(BaseModel):
    media_type: str  # "movie" or "series"
    media_id: str  # Full ID (e.g., "tt1234567:1:1")
    media_only_id: str  # Base ID (e.g., "tt1234567")
    query: str = ""  # "<title> <year>", empty when metadata is unavailable
    season: Optional[int] = None
    episode: Optional[int] = None


class RawCandidate(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    source: str
    playable_ref: str  # magnet URI, direct URL or info hash
    info_hash: Optional[str] = None
    file_index: Optional[int] = None
    # structured values win over anything parsed from the title
    seeders: Optional[int] = None
    size_mb: Optional[float] = None
    is_cached: Optional[bool] = None
