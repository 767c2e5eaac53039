import re

from RTN import parse

from navigator.core.logger import logger
from navigator.scrapers.models import RawCandidate
from navigator.search.results import Attributes, EnrichedCandidate

RESOLUTION_PATTERNS = [
    ("2160p", re.compile(r"2160p|(?<![a-z0-9])4k(?![a-z0-9])|(?<![a-z0-9])uhd(?![a-z0-9])", re.IGNORECASE)),
    ("1080p", re.compile(r"1080[pi]", re.IGNORECASE)),
    ("720p", re.compile(r"720p", re.IGNORECASE)),
    ("480p", re.compile(r"480p", re.IGNORECASE)),
]

SEEDERS_PATTERN = re.compile(r"👤\s*(\d+)|seed(?:er)?s\s*[:=]\s*(\d+)", re.IGNORECASE)
SIZE_PATTERN = re.compile(
    r"(?<![\d.,])(?:(?P<grouped>\d{1,3}(?:,\d{3})+(?:\.\d+)?)|(?P<plain>\d+(?:[.,]\d+)?))"
    r"\s*(?P<unit>GiB|MiB|GB|MB)(?![a-z])",
    re.IGNORECASE,
)

CACHED_MARKERS = ("[rd+]", "[ad+]", "[pm+]", "[tb+]", "[dl+]", "[ed+]", "[oc+]", "⚡")

LOW_QUALITY_PATTERN = re.compile(
    r"(?<![a-z0-9])(?:cam|cam-?rip|hdcam|ts|hdts|telesync|ts-?rip|scr|screener|"
    r"dvdscr|bdscr|tc|hdtc|telecine)(?![a-z0-9])",
    re.IGNORECASE,
)


def extract_resolution(text: str):
    for resolution, pattern in RESOLUTION_PATTERNS:
        if pattern.search(text):
            return resolution
    return "unknown"


def extract_seeders(text: str):
    match = SEEDERS_PATTERN.search(text)
    if not match:
        return 0
    return int(match.group(1) or match.group(2))


def extract_size_mb(text: str):
    match = SIZE_PATTERN.search(text)
    if not match:
        return None

    if match.group("grouped"):
        value = float(match.group("grouped").replace(",", ""))
    else:
        value = float(match.group("plain").replace(",", "."))
    if match.group("unit").lower() in ("gb", "gib"):
        value *= 1024
    return value if value > 0 else None


def extract_hdr(text: str):
    if not text.strip():
        return ()

    try:
        parsed = parse(text)
    except Exception as e:
        logger.debug(f"Could not parse HDR markers from {text!r}: {e}")
        return ()

    return tuple(parsed.hdr or ())


def extract(text: str):
    """
    Derive the structured attributes of a candidate from its free text.

    Never raises: anything that cannot be read falls back to its sentinel
    (unknown resolution, 0 seeders, None size, False flags).
    """
    if not isinstance(text, str):
        text = "" if text is None else str(text)

    lowered = text.lower()
    return Attributes(
        resolution=extract_resolution(text),
        seeders=extract_seeders(text),
        size_mb=extract_size_mb(text),
        is_cached=any(marker in lowered for marker in CACHED_MARKERS),
        is_low_quality=LOW_QUALITY_PATTERN.search(text) is not None,
        hdr=extract_hdr(text),
    )


def enrich(raw: RawCandidate):
    attributes = extract(raw.title)

    seeders = attributes.seeders
    if raw.seeders is not None:
        seeders = max(int(raw.seeders), 0)

    size_mb = attributes.size_mb
    if raw.size_mb is not None and raw.size_mb > 0:
        size_mb = float(raw.size_mb)

    is_cached = attributes.is_cached
    if raw.is_cached is not None:
        is_cached = raw.is_cached

    return EnrichedCandidate(
        raw=raw,
        resolution=attributes.resolution,
        seeders=seeders,
        size_mb=size_mb,
        is_cached=is_cached,
        is_low_quality=attributes.is_low_quality,
        hdr=attributes.hdr,
    )
