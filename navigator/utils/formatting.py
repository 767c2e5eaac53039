from navigator.search.results import EnrichedCandidate

BINGE_GROUP = "navigator-autoplay"


def format_size(size_mb):
    if size_mb is None:
        return "?"
    if size_mb >= 1024:
        return f"{size_mb / 1024:.2f} GB"
    return f"{size_mb:.0f} MB"


def format_stream(candidate: EnrichedCandidate, autoplay: bool = False):
    icon = "⚡" if candidate.is_cached else "🧲"
    name = f"{icon} {candidate.source} {candidate.resolution}"
    if autoplay:
        name = f"▶️ {name}"

    details = []
    if not candidate.is_cached:
        details.append(f"👤 {candidate.seeders}")
    details.append(f"💾 {format_size(candidate.size_mb)}")
    if candidate.hdr:
        details.append(f"🌈 {'/'.join(candidate.hdr)}")

    stream = {
        "name": name,
        "description": f"{candidate.title}\n{' '.join(details)}",
        "behaviorHints": {"bingeGroup": BINGE_GROUP},
    }

    playable_ref = candidate.raw.playable_ref
    if playable_ref.startswith("http"):
        stream["url"] = playable_ref
    elif candidate.raw.info_hash:
        stream["infoHash"] = candidate.raw.info_hash
        if candidate.raw.file_index is not None:
            stream["fileIdx"] = candidate.raw.file_index
    elif playable_ref.startswith("magnet:"):
        stream["url"] = playable_ref
    else:
        stream["infoHash"] = playable_ref.lower()

    if autoplay:
        stream["behaviorHints"]["immediatePlay"] = True

    return stream


def format_selection(selection):
    """Chosen stream first with autoplay hints, every other candidate kept as fallback."""
    return [
        format_stream(candidate, autoplay=candidate is selection.chosen)
        for candidate in selection.ranked
    ]
