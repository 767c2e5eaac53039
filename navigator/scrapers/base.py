from abc import ABC, abstractmethod
from urllib.parse import quote

import aiohttp

from navigator.core.models import settings
from navigator.scrapers.models import ScrapeRequest

TRACKERS = [
    "udp://open.demonii.com:1337/announce",
    "udp://tracker.openbittorrent.com:80",
    "udp://tracker.coppersurfer.tk:6969",
    "udp://tracker.opentrackr.org:1337/announce",
    "udp://exodus.desync.com:6969/announce",
]


class BaseScraper(ABC):
    name = "Base"
    setting_name = None
    media_types = ("movie", "series")

    def __init__(self, session: aiohttp.ClientSession, urls: list = None):
        self.session = session
        self.urls = urls or []

    @property
    def timeout(self):
        # a dead provider never holds the request longer than all its mirrors
        return settings.MIRROR_TIMEOUT * max(len(self.urls), 1)

    def supports(self, request: ScrapeRequest):
        return request.media_type in self.media_types

    @abstractmethod
    async def scrape(self, request: ScrapeRequest):
        pass


def build_magnet(info_hash: str, name: str):
    trackers = "".join(f"&tr={quote(tracker, safe='')}" for tracker in TRACKERS)
    return f"magnet:?xt=urn:btih:{info_hash}&dn={quote(name)}{trackers}"
