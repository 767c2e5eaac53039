from navigator.core.models import RESOLUTIONS, SelectionConfig

CACHED_PRIORITY_BONUS = 100_000
CACHED_BASE_BONUS = 500
SEEDERS_CAP = 500
DENSITY_WEIGHT = 0.2
DENSITY_CAP = 100
UNKNOWN_SIZE_PENALTY = 50
NO_SEEDERS_PENALTY = 10_000

EXACT_RESOLUTION_BONUS = 2000
HIGHER_RESOLUTION_BONUS = 1500
LOWER_RESOLUTION_BONUS = 1000

HDR_BONUS = 100
LOW_QUALITY_PENALTY = 5000

# anything under this is never promoted to autoplay
UNACCEPTABLE_SCORE = -4000

# lowest to highest
RESOLUTION_LADDER = list(reversed(RESOLUTIONS))


def reliability_score(candidate, config: SelectionConfig):
    if candidate.is_cached:
        if config.prioritizeCached:
            return CACHED_PRIORITY_BONUS
        return CACHED_BASE_BONUS

    score = min(candidate.seeders, SEEDERS_CAP)

    if candidate.size_mb is None or candidate.size_mb <= 0:
        score -= UNKNOWN_SIZE_PENALTY
    else:
        seeders_per_gb = candidate.seeders / (candidate.size_mb / 1024)
        score += min(int(seeders_per_gb * DENSITY_WEIGHT), DENSITY_CAP)

    if candidate.seeders < 1:
        score -= NO_SEEDERS_PENALTY

    return score


def resolution_score(candidate, config: SelectionConfig):
    if candidate.resolution not in RESOLUTION_LADDER:
        return 0

    preferred = RESOLUTION_LADDER.index(config.preferredResolution)
    actual = RESOLUTION_LADDER.index(candidate.resolution)

    if actual == preferred:
        return EXACT_RESOLUTION_BONUS
    if actual == preferred + 1:
        return HIGHER_RESOLUTION_BONUS
    if actual == preferred - 1:
        return LOWER_RESOLUTION_BONUS
    return 0


def quality_score(candidate):
    score = 0
    if candidate.hdr:
        score += HDR_BONUS
    if candidate.is_low_quality:
        score -= LOW_QUALITY_PENALTY
    return score


def score_candidate(candidate, config: SelectionConfig):
    return (
        reliability_score(candidate, config)
        + resolution_score(candidate, config)
        + quality_score(candidate)
    )


def rank_candidates(candidates, config: SelectionConfig):
    scored = [
        candidate.model_copy(update={"score": score_candidate(candidate, config)})
        for candidate in candidates
    ]
    # sorted() is stable, so equal scores keep first-seen order
    return sorted(scored, key=lambda candidate: candidate.score, reverse=True)
