import asyncio

import aiohttp

from navigator.scrapers.base import BaseScraper
from navigator.scrapers.models import RawCandidate
from navigator.search.results import EnrichedCandidate


def raw(
    title,
    seeders=None,
    size_mb=None,
    is_cached=None,
    source="Test",
    ref=None,
    info_hash=None,
):
    return RawCandidate(
        title=title,
        source=source,
        playable_ref=ref or f"magnet:?xt=urn:btih:{title}",
        info_hash=info_hash,
        seeders=seeders,
        size_mb=size_mb,
        is_cached=is_cached,
    )


def candidate(
    resolution="1080p",
    seeders=100,
    size_mb=2048.0,
    is_cached=False,
    is_low_quality=False,
    hdr=(),
    title=None,
):
    return EnrichedCandidate(
        raw=raw(title or f"Movie {resolution} {seeders}"),
        resolution=resolution,
        seeders=seeders,
        size_mb=size_mb,
        is_cached=is_cached,
        is_low_quality=is_low_quality,
        hdr=hdr,
    )


class FakeScraper(BaseScraper):
    setting_name = None

    def __init__(self, name, torrents=(), error=None, delay=0, timeout=1.0):
        super().__init__(None, [])
        self.name = name
        self.torrents = list(torrents)
        self.error = error
        self.delay = delay
        self._timeout = timeout
        self.calls = 0

    @property
    def timeout(self):
        return self._timeout

    async def scrape(self, request):
        self.calls += 1
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error:
            raise self.error
        return list(self.torrents)


class FakeResponse:
    def __init__(self, body, status=200, delay=0):
        self.body = body
        self.status = status
        self.delay = delay

    async def __aenter__(self):
        if self.delay:
            await asyncio.sleep(self.delay)
        if isinstance(self.body, Exception):
            raise self.body
        return self

    async def __aexit__(self, *args):
        return False

    def raise_for_status(self):
        if self.status >= 400:
            raise aiohttp.ClientConnectionError(f"HTTP {self.status}")

    async def json(self, content_type=None):
        return self.body

    async def text(self):
        return self.body


class FakeSession:
    """Maps URL prefixes to canned responses and records every requested URL."""

    def __init__(self, routes):
        self.routes = routes
        self.requested = []

    def get(self, url, headers=None, params=None):
        self.requested.append(url)
        for prefix, response in self.routes.items():
            if url.startswith(prefix):
                return response
        return FakeResponse(aiohttp.ClientConnectionError(f"no route for {url}"))
