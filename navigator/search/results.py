from typing import NamedTuple, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from navigator.scrapers.models import RawCandidate


class Attributes(NamedTuple):
    resolution: str  # 2160p, 1080p, 720p, 480p or unknown
    seeders: int
    size_mb: Optional[float]  # None when the size is unknown
    is_cached: bool
    is_low_quality: bool
    hdr: Tuple[str, ...] = ()


class EnrichedCandidate(BaseModel):
    model_config = ConfigDict(frozen=True)

    raw: RawCandidate
    resolution: str = "unknown"
    seeders: int = 0
    size_mb: Optional[float] = None
    is_cached: bool = False
    is_low_quality: bool = False
    hdr: Tuple[str, ...] = ()
    score: int = 0

    @property
    def title(self):
        return self.raw.title

    @property
    def source(self):
        return self.raw.source

    @property
    def dedupe_key(self):
        if self.raw.info_hash:
            return self.raw.info_hash.lower()
        return self.raw.playable_ref

    def to_public(self):
        return {
            "title": self.raw.title,
            "playableRef": self.raw.playable_ref,
            "source": self.raw.source,
            "resolution": self.resolution,
            "seeders": self.seeders,
            "sizeMB": self.size_mb,
            "isCached": self.is_cached,
        }


class Selection(BaseModel):
    model_config = ConfigDict(frozen=True)

    chosen: Optional[EnrichedCandidate] = None
    ranked: Tuple[EnrichedCandidate, ...] = ()

    @classmethod
    def from_ranked(cls, ranked):
        ranked = tuple(ranked)
        return cls(chosen=ranked[0] if ranked else None, ranked=ranked)
