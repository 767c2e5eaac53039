import re


def _parse_optional_int(value: str):
    if value is None or value == "":
        return None
    try:
        return int(value)
    except ValueError:
        return None


def parse_media_id(media_type: str, media_id: str):
    if media_type == "series":
        info = media_id.split(":")
        series_id = info[0]
        season = _parse_optional_int(info[1]) if len(info) > 1 else None
        episode = _parse_optional_int(info[2]) if len(info) > 2 else None
        return series_id, season, episode

    return media_id.split(":")[0], None, None


def episode_pattern(season: int, episode: int):
    """Match `S01E02` or `1x02` style markers for exactly this episode."""
    return re.compile(
        rf"(?<!\d)s0*{season}\s?e0*{episode}(?!\d)|(?<!\d)0*{season}x0*{episode}(?!\d)",
        re.IGNORECASE,
    )


def episode_marker(season: int, episode: int):
    return f"S{season:02d}E{episode:02d}"


def build_query(name: str, year=None):
    if not name:
        return ""
    return f"{name} {year}" if year else name
