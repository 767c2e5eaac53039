from navigator.scrapers.base import BaseScraper, build_magnet
from navigator.scrapers.models import RawCandidate, ScrapeRequest
from navigator.utils.network import fetch_with_failover


class EZTVScraper(BaseScraper):
    name = "EZTV"
    setting_name = "EZTV"
    media_types = ("series",)

    async def scrape(self, request: ScrapeRequest):
        # EZTV wants the numeric part of the IMDb id
        imdb_id = request.media_only_id.replace("tt", "")
        if not imdb_id.isdigit():
            return []

        data = await fetch_with_failover(
            self.session,
            [f"{url}/api/get-torrents" for url in self.urls],
            self.name,
            params={"imdb_id": int(imdb_id), "limit": 100},
        )

        if not data or not data.get("torrents"):
            return []

        torrents = []
        for torrent in data["torrents"]:
            info_hash = (torrent.get("hash") or "").lower() or None
            magnet = torrent.get("magnet_url")
            if not magnet and info_hash:
                magnet = build_magnet(info_hash, torrent["title"])
            if not magnet:
                continue

            size_bytes = int(torrent.get("size_bytes") or 0)
            torrents.append(
                RawCandidate(
                    title=f"[EZTV] {torrent['title']}",
                    source=self.name,
                    playable_ref=magnet,
                    info_hash=info_hash,
                    seeders=torrent.get("seeds"),
                    size_mb=size_bytes / 1024**2 if size_bytes else None,
                )
            )

        return torrents
