from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

RESOLUTIONS = ["2160p", "1080p", "720p", "480p"]


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    ADDON_ID: Optional[str] = "stremio.navigator.autoplay"
    ADDON_NAME: Optional[str] = "Navigator"
    FASTAPI_HOST: Optional[str] = "0.0.0.0"
    FASTAPI_PORT: Optional[int] = 7000
    FASTAPI_WORKERS: Optional[int] = 1
    LOG_LEVEL: Optional[str] = "DEBUG"
    HTTP_USER_AGENT: Optional[str] = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36"
    )
    MIRROR_TIMEOUT: Optional[float] = 5
    SELECTION_DEADLINE: Optional[float] = 20
    RESULT_CACHE_TTL: Optional[int] = 900  # 15 minutes
    RESULT_CACHE_EMPTY_TTL: Optional[int] = 60
    RESULT_CACHE_MAX_ENTRIES: Optional[int] = 1024
    CINEMETA_URL: Optional[str] = "https://v3-cinemeta.strem.io"
    SCRAPE_YTS: Optional[bool] = True
    YTS_URL: List[str] = ["https://yts.mx", "https://yts.pm", "https://yts.am"]
    SCRAPE_EZTV: Optional[bool] = True
    EZTV_URL: List[str] = ["https://eztv.re", "https://eztv.wf", "https://eztv1.xyz"]
    SCRAPE_TPB: Optional[bool] = True
    TPB_URL: List[str] = [
        "https://tpb.party",
        "https://thepiratebay10.org",
        "https://piratebayproxy.live",
    ]
    SCRAPE_X1337: Optional[bool] = True
    X1337_URL: List[str] = ["https://1337x.to"]
    SCRAPE_STREMIO_ADDON: Optional[bool] = False
    STREMIO_ADDON_URL: List[str] = []

    @field_validator(
        "YTS_URL", "EZTV_URL", "TPB_URL", "X1337_URL", "STREMIO_ADDON_URL", mode="before"
    )
    def promote_single_url(cls, v):
        if isinstance(v, str):
            return [url.strip() for url in v.split(",") if url.strip()]
        return v

    @field_validator("YTS_URL", "EZTV_URL", "TPB_URL", "X1337_URL", "STREMIO_ADDON_URL")
    def remove_trailing_slashes(cls, v):
        return [url[:-1] if url.endswith("/") else url for url in v]

    @field_validator("CINEMETA_URL")
    def remove_trailing_slash(cls, v):
        if v and v.endswith("/"):
            return v[:-1]
        return v


settings = AppSettings()


class SelectionConfig(BaseModel):
    """
    Per-request user preferences.

    Every field has a default and an invalid value is replaced by that default
    instead of failing validation, so a stale or hand-edited configuration URL
    still yields a usable selection policy.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    preferredResolution: str = Field("1080p", alias="resolution")
    prioritizeCached: bool = True
    excludeLowQuality: bool = True
    minSeeders: int = 5
    maxSizeMB: float = 20480
    fallbackToUnfiltered: bool = False

    @field_validator("preferredResolution", mode="before")
    def check_preferred_resolution(cls, v):
        if isinstance(v, str) and v.lower() in RESOLUTIONS:
            return v.lower()
        if isinstance(v, str) and v.lower() == "4k":
            return "2160p"
        return "1080p"

    @field_validator("prioritizeCached", "excludeLowQuality", mode="before")
    def check_flag_on(cls, v):
        if not isinstance(v, bool):
            return True
        return v

    @field_validator("fallbackToUnfiltered", mode="before")
    def check_flag_off(cls, v):
        if not isinstance(v, bool):
            return False
        return v

    @field_validator("minSeeders", mode="before")
    def check_min_seeders(cls, v):
        if isinstance(v, bool) or not isinstance(v, (int, float)) or v < 0:
            return 5
        return int(v)

    @field_validator("maxSizeMB", mode="before")
    def check_max_size(cls, v):
        if isinstance(v, bool) or not isinstance(v, (int, float)) or v <= 0:
            return 20480
        return float(v)


default_config = SelectionConfig()
