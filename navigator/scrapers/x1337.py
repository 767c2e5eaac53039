import asyncio
import html
import re
from urllib.parse import quote

from navigator.core.exceptions import ProviderUnavailable
from navigator.core.logger import logger
from navigator.core.models import settings
from navigator.scrapers.base import BaseScraper
from navigator.scrapers.models import RawCandidate, ScrapeRequest
from navigator.scrapers.tpb import build_search_query
from navigator.utils.network import fetch_with_failover

MAX_RESULTS = 5

TR_PATTERN = re.compile(r"<tr.*?>(.*?)</tr>", re.DOTALL)
NAME_PATTERN = re.compile(r'<a href="(/torrent/[^"]+)">([^<]+)</a>')
SEEDERS_PATTERN = re.compile(r'<td class="coll-2 seeds">\s*(\d+)\s*</td>')
SIZE_PATTERN = re.compile(r'<td class="coll-4 size[^"]*">\s*([\d.,]+\s*[KMGT]B)')
MAGNET_PATTERN = re.compile(r'href="(magnet:\?[^"]+)"')
INFO_HASH_PATTERN = re.compile(r"btih:([a-fA-F0-9]{40})")


def parse_search_page(page: str):
    rows = []
    for row in TR_PATTERN.findall(page):
        name = NAME_PATTERN.search(row)
        if not name:
            continue

        seeders = SEEDERS_PATTERN.search(row)
        size = SIZE_PATTERN.search(row)
        rows.append(
            {
                "path": name.group(1),
                "title": html.unescape(name.group(2)).strip(),
                "seeders": int(seeders.group(1)) if seeders else 0,
                "size": size.group(1).replace(",", "") if size else None,
            }
        )

        if len(rows) >= MAX_RESULTS:
            break

    return rows


class X1337Scraper(BaseScraper):
    name = "1337x"
    setting_name = "X1337"

    @property
    def timeout(self):
        # search page on any mirror, then one round of detail pages
        return settings.MIRROR_TIMEOUT * (max(len(self.urls), 1) + 1)

    async def _resolve_magnet(self, base_url: str, row: dict):
        try:
            page = await fetch_with_failover(
                self.session,
                [f"{base_url}{row['path']}"],
                self.name,
                response_type="text",
            )
        except ProviderUnavailable:
            return None

        magnet = MAGNET_PATTERN.search(page)
        if not magnet:
            logger.log("SCRAPER", f"[{self.name}] No magnet on {row['path']}")
            return None

        magnet_uri = html.unescape(magnet.group(1))
        info_hash = INFO_HASH_PATTERN.search(magnet_uri)

        # size stays in the title so the extractor handles the unit
        title = f"[{self.name}] {row['title']}"
        if row["size"]:
            title += f" 💾 {row['size']}"

        return RawCandidate(
            title=title,
            source=self.name,
            playable_ref=magnet_uri,
            info_hash=info_hash.group(1).lower() if info_hash else None,
            seeders=row["seeders"],
        )

    async def scrape(self, request: ScrapeRequest):
        query = build_search_query(request)
        if not query:
            return []

        for base_url in self.urls:
            try:
                page = await fetch_with_failover(
                    self.session,
                    [f"{base_url}/sort-search/{quote(query)}/seeders/desc/1/"],
                    self.name,
                    response_type="text",
                )
            except ProviderUnavailable:
                continue

            rows = parse_search_page(page)
            results = await asyncio.gather(
                *[self._resolve_magnet(base_url, row) for row in rows]
            )
            return [result for result in results if result is not None]

        raise ProviderUnavailable(self.name, len(self.urls))
