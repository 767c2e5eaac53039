from helpers import candidate

from navigator.core.models import SelectionConfig
from navigator.services.ranking import (
    UNACCEPTABLE_SCORE,
    rank_candidates,
    score_candidate,
)


def test_prioritized_cached_outranks_any_peer_to_peer():
    config = SelectionConfig(prioritizeCached=True)
    cached = candidate(resolution="480p", seeders=50, is_cached=True)
    popular = candidate(resolution="1080p", seeders=100000, size_mb=500, hdr=("HDR",))

    assert score_candidate(cached, config) > score_candidate(popular, config)


def test_cached_without_priority_competes_on_resolution():
    config = SelectionConfig(prioritizeCached=False)
    cached = candidate(resolution="720p", seeders=0, size_mb=None, is_cached=True)
    peer = candidate(resolution="1080p", seeders=200, size_mb=2048)

    assert score_candidate(peer, config) > score_candidate(cached, config)
    assert score_candidate(cached, config) > UNACCEPTABLE_SCORE


def test_resolution_tier_is_monotonic_around_preference():
    config = SelectionConfig(preferredResolution="1080p")
    scores = {
        resolution: score_candidate(candidate(resolution=resolution), config)
        for resolution in ("2160p", "1080p", "720p", "480p")
    }

    assert scores["1080p"] > scores["2160p"] > scores["720p"] > scores["480p"]


def test_resolution_two_steps_away_gets_nothing():
    config = SelectionConfig(preferredResolution="2160p")
    assert score_candidate(candidate(resolution="720p"), config) == score_candidate(
        candidate(resolution="unknown"), config
    )


def test_seeders_contribution_is_capped():
    config = SelectionConfig()
    big = candidate(seeders=5000, size_mb=4096)
    huge = candidate(seeders=500000, size_mb=4096)

    assert score_candidate(big, config) == score_candidate(huge, config)


def test_density_rewards_smaller_files():
    config = SelectionConfig()
    small = candidate(seeders=100, size_mb=1024)
    large = candidate(seeders=100, size_mb=8192)

    assert score_candidate(small, config) > score_candidate(large, config)


def test_unknown_size_is_penalised():
    config = SelectionConfig()
    known = candidate(seeders=100, size_mb=16384)
    unknown = candidate(seeders=100, size_mb=None)

    assert score_candidate(known, config) > score_candidate(unknown, config)


def test_hdr_bonus_and_low_quality_penalty():
    config = SelectionConfig()
    plain = candidate()

    assert score_candidate(candidate(hdr=("DV",)), config) > score_candidate(plain, config)
    assert score_candidate(candidate(is_low_quality=True), config) < score_candidate(
        plain, config
    )


def test_no_seeders_falls_below_floor():
    config = SelectionConfig()
    dead = candidate(resolution="1080p", seeders=0, size_mb=1024)

    assert score_candidate(dead, config) < UNACCEPTABLE_SCORE


def test_rank_is_descending_and_stable():
    config = SelectionConfig()
    first = candidate(seeders=100, size_mb=2048, title="first")
    second = candidate(seeders=100, size_mb=2048, title="second")
    best = candidate(resolution="1080p", seeders=400, size_mb=2048, title="best")
    worst = candidate(resolution="480p", seeders=10, size_mb=2048, title="worst")

    ranked = rank_candidates([first, worst, second, best], config)

    assert [c.title for c in ranked] == ["best", "first", "second", "worst"]
    assert all(a.score >= b.score for a, b in zip(ranked, ranked[1:]))


def test_rank_does_not_mutate_input():
    config = SelectionConfig()
    original = candidate()
    ranked = rank_candidates([original], config)

    assert original.score == 0
    assert ranked[0].score == score_candidate(original, config)
