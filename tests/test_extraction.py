from navigator.scrapers.models import RawCandidate
from navigator.services.extraction import enrich, extract


def test_extract_is_total_on_odd_input():
    for text in ["", " ", "\n\t", "👤", "💾 GB", "0 MB", "x" * 5000, None, 42]:
        attributes = extract(text)
        assert attributes.resolution in ("2160p", "1080p", "720p", "480p", "unknown")
        assert attributes.seeders >= 0
        assert attributes.size_mb is None or attributes.size_mb > 0
        assert isinstance(attributes.is_cached, bool)
        assert isinstance(attributes.is_low_quality, bool)


def test_extract_is_deterministic():
    text = "Movie.2023.1080p.WEB-DL 👤 120 💾 2.1 GB"
    assert extract(text) == extract(text)


def test_empty_text_yields_sentinels():
    attributes = extract("")
    assert attributes.resolution == "unknown"
    assert attributes.seeders == 0
    assert attributes.size_mb is None
    assert attributes.is_cached is False
    assert attributes.is_low_quality is False


def test_resolution_priority_and_case():
    assert extract("Movie 4K HDR").resolution == "2160p"
    assert extract("movie.2160P.x265").resolution == "2160p"
    assert extract("Movie 1080p 720p").resolution == "1080p"
    assert extract("Movie.720P").resolution == "720p"
    assert extract("Movie 480p").resolution == "480p"
    assert extract("Movie DVDRip").resolution == "unknown"


def test_seeders_from_glyph_or_keyword():
    assert extract("Movie 👤 42 💾 1 GB").seeders == 42
    assert extract("Movie seeders: 17").seeders == 17
    assert extract("Movie Seeds=9").seeders == 9
    assert extract("Bad Seed 2018 1080p").seeders == 0


def test_title_words_are_not_read_as_seeders():
    assert extract("The Bad Seeds 2005 1080p").seeders == 0
    assert extract("[RD download] The Bad Seeds 2005 1080p 👤 3 💾 1.4 GB").seeders == 3


def test_size_units_are_converted_to_megabytes():
    assert extract("Movie 💾 700 MB").size_mb == 700
    assert extract("Movie 1.5GB").size_mb == 1.5 * 1024
    assert extract("Movie Size 2 GiB").size_mb == 2048
    assert extract("Movie 1080p").size_mb is None


def test_size_thousands_separator_is_not_a_decimal_point():
    assert extract("Movie 1080p 💾 1,234 MB").size_mb == 1234
    assert extract("Movie 2160p 💾 25,600 MB").size_mb == 25600
    assert extract("Movie 💾 1,234.5 MB").size_mb == 1234.5
    assert extract("Movie 💾 1,4 GB").size_mb == 1.4 * 1024


def test_cached_markers():
    assert extract("[RD+] Movie 1080p").is_cached is True
    assert extract("Torrentio ⚡ Movie").is_cached is True
    assert extract("[tb+] Movie").is_cached is True
    assert extract("[RD download] Movie").is_cached is False


def test_low_quality_markers_match_whole_words_only():
    assert extract("CAM-RIP 720p").is_low_quality is True
    assert extract("Movie.2023.HDTS.x264").is_low_quality is True
    assert extract("Movie 2023 TeleSync").is_low_quality is True
    assert extract("Movie_SCREENER_480p").is_low_quality is True
    assert extract("Description").is_low_quality is False
    assert extract("Camera Obscura 1080p").is_low_quality is False
    assert extract("Movie.1080p.DTS-HD.MA").is_low_quality is False
    assert extract("Cats 2019 720p").is_low_quality is False


def test_hdr_markers_detected():
    assert extract("Movie.2023.2160p.WEB-DL.DV.HDR10.x265").hdr
    assert extract("Movie.2023.1080p.WEB-DL.x264").hdr == ()


def test_structured_fields_win_over_text():
    raw = RawCandidate(
        title="Movie 1080p 👤 3 💾 9 GB",
        source="Test",
        playable_ref="magnet:?xt=urn:btih:abc",
        seeders=250,
        size_mb=1500,
        is_cached=True,
    )
    candidate = enrich(raw)

    assert candidate.seeders == 250
    assert candidate.size_mb == 1500
    assert candidate.is_cached is True
    assert candidate.resolution == "1080p"


def test_text_values_used_when_structured_fields_missing():
    raw = RawCandidate(
        title="[RD+] Movie 720p 👤 3 💾 900 MB",
        source="Test",
        playable_ref="https://example.com/file.mkv",
    )
    candidate = enrich(raw)

    assert candidate.seeders == 3
    assert candidate.size_mb == 900
    assert candidate.is_cached is True
