from navigator.scrapers.base import BaseScraper, build_magnet
from navigator.scrapers.models import RawCandidate, ScrapeRequest
from navigator.utils.network import fetch_with_failover


class YTSScraper(BaseScraper):
    name = "YTS"
    setting_name = "YTS"
    media_types = ("movie",)

    async def scrape(self, request: ScrapeRequest):
        data = await fetch_with_failover(
            self.session,
            [f"{url}/api/v2/list_movies.json" for url in self.urls],
            self.name,
            params={"query_term": request.media_only_id, "sort_by": "seeds"},
        )

        if not data or not data.get("data") or not data["data"].get("movies"):
            return []

        torrents = []
        for movie in data["data"]["movies"]:
            for torrent in movie.get("torrents") or []:
                title = f"[YTS] {movie['title']} {torrent['quality']} {torrent.get('type', '')}".strip()
                size_bytes = torrent.get("size_bytes")
                torrents.append(
                    RawCandidate(
                        title=title,
                        source=self.name,
                        playable_ref=build_magnet(
                            torrent["hash"], f"{movie['title']} {torrent['quality']}"
                        ),
                        info_hash=torrent["hash"].lower(),
                        seeders=torrent.get("seeds"),
                        size_mb=size_bytes / 1024**2 if size_bytes else None,
                    )
                )

        return torrents
