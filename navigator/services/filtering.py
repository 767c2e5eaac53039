from navigator.core.models import SelectionConfig


def is_eligible(candidate, config: SelectionConfig):
    if config.excludeLowQuality and candidate.is_low_quality:
        return False

    # cached candidates are immediately playable whatever their swarm looks like
    if candidate.is_cached:
        return True

    if candidate.seeders < config.minSeeders:
        return False

    # unknown size is missing data, not a policy violation
    if candidate.size_mb is not None and candidate.size_mb > config.maxSizeMB:
        return False

    return True


def filter_candidates(candidates, config: SelectionConfig):
    return [candidate for candidate in candidates if is_eligible(candidate, config)]


def filter_episode(candidates, pattern):
    return [candidate for candidate in candidates if pattern.search(candidate.title)]
