from navigator.scrapers.base import BaseScraper, build_magnet
from navigator.scrapers.models import RawCandidate, ScrapeRequest
from navigator.utils.network import fetch_with_failover


class StremioAddonScraper(BaseScraper):
    """
    Reads the stream list of an upstream Stremio add-on (Torrentio-like).

    Upstream add-ons configured with a debrid key tag cached results in the
    stream name (e.g. "[RD+]"), and put seeders and size in the description
    ("👤 42 💾 1.4 GB"). Everything is kept as text for the extractor.
    """

    name = "StremioAddon"
    setting_name = "STREMIO_ADDON"

    async def scrape(self, request: ScrapeRequest):
        results = await fetch_with_failover(
            self.session,
            [
                f"{url}/stream/{request.media_type}/{request.media_id}.json"
                for url in self.urls
            ],
            self.name,
        )

        if not results or "streams" not in results:
            return []

        torrents = []
        for stream in results["streams"]:
            description = stream.get("title") or stream.get("description") or ""
            title = " ".join(f"{stream.get('name', '')} {description}".split())

            info_hash = stream.get("infoHash")
            if stream.get("url"):
                playable_ref = stream["url"]
            elif info_hash:
                playable_ref = build_magnet(info_hash, description.split("\n")[0])
            else:
                continue

            torrents.append(
                RawCandidate(
                    title=title,
                    source=self.name,
                    playable_ref=playable_ref,
                    info_hash=info_hash.lower() if info_hash else None,
                    file_index=stream.get("fileIdx"),
                )
            )

        return torrents
