import html
import re
from urllib.parse import quote

from navigator.scrapers.base import BaseScraper
from navigator.scrapers.models import RawCandidate, ScrapeRequest
from navigator.utils.network import fetch_with_failover
from navigator.utils.parsing import episode_marker

TR_PATTERN = re.compile(r"<tr.*?>(.*?)</tr>", re.DOTALL)
NAME_PATTERN = re.compile(r'class="detLink"[^>]*>([^<]+)</a>')
MAGNET_PATTERN = re.compile(r'href="(magnet:\?[^"]+)"')
INFO_HASH_PATTERN = re.compile(r"btih:([a-fA-F0-9]{40})")
SIZE_PATTERN = re.compile(r"Size ([\d.]+)(?:&nbsp;|\s)*([KMGT]iB)")
SEEDERS_PATTERN = re.compile(r'<td align="right">\s*(\d+)\s*</td>')

SIZE_UNITS_MB = {"kib": 1 / 1024, "mib": 1, "gib": 1024, "tib": 1024**2}


def build_search_query(request: ScrapeRequest):
    if not request.query:
        return None

    if request.media_type == "series":
        if request.season is None or request.episode is None:
            return None
        return f"{request.query} {episode_marker(request.season, request.episode)}"

    return request.query


def parse_search_page(page: str, source: str):
    torrents = []
    for row in TR_PATTERN.findall(page):
        name = NAME_PATTERN.search(row)
        magnet = MAGNET_PATTERN.search(row)
        if not name or not magnet:
            continue

        magnet_uri = html.unescape(magnet.group(1))
        info_hash = INFO_HASH_PATTERN.search(magnet_uri)
        seeders = SEEDERS_PATTERN.search(row)
        size = SIZE_PATTERN.search(row)

        torrents.append(
            RawCandidate(
                title=f"[{source}] {html.unescape(name.group(1)).strip()}",
                source=source,
                playable_ref=magnet_uri,
                info_hash=info_hash.group(1).lower() if info_hash else None,
                seeders=int(seeders.group(1)) if seeders else 0,
                size_mb=(
                    float(size.group(1)) * SIZE_UNITS_MB[size.group(2).lower()]
                    if size
                    else None
                ),
            )
        )

    return torrents


class TPBScraper(BaseScraper):
    name = "TPB"
    setting_name = "TPB"

    async def scrape(self, request: ScrapeRequest):
        query = build_search_query(request)
        if not query:
            return []

        page = await fetch_with_failover(
            self.session,
            [f"{url}/search/{quote(query)}/1/99/200" for url in self.urls],
            self.name,
            response_type="text",
        )

        return parse_search_page(page, self.name)
