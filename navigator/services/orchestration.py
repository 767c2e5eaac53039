import asyncio
import time

import aiohttp

from navigator.core.logger import log_scraper_error, logger
from navigator.core.models import SelectionConfig, settings
from navigator.metadata.cinemeta import resolve_title
from navigator.scrapers.base import BaseScraper
from navigator.scrapers.manager import scraper_manager
from navigator.scrapers.models import ScrapeRequest
from navigator.search.results import Selection
from navigator.services.extraction import enrich
from navigator.services.filtering import filter_candidates, filter_episode
from navigator.services.ranking import UNACCEPTABLE_SCORE, rank_candidates
from navigator.services.result_cache import fingerprint, result_cache
from navigator.utils.http_client import http_client_manager
from navigator.utils.parsing import build_query, episode_pattern, parse_media_id


async def _scrape_wrapper(scraper: BaseScraper, request: ScrapeRequest):
    try:
        return await asyncio.wait_for(scraper.scrape(request), scraper.timeout)
    except asyncio.TimeoutError:
        logger.log(
            "SCRAPER",
            f"Scraper {scraper.name} timed out after {scraper.timeout}s for {request.media_id}",
        )
    except Exception as e:
        log_scraper_error(scraper.name, ", ".join(scraper.urls), request.media_id, e)
    return []


async def scrape_all(scrapers: list, request: ScrapeRequest, deadline: float = None):
    """
    Run every scraper concurrently and return their results in scraper order.

    A scraper that fails, times out or is still running at the deadline
    contributes an empty list; it never affects the others.
    """
    if deadline is None:
        deadline = settings.SELECTION_DEADLINE

    tasks = [
        asyncio.create_task(_scrape_wrapper(scraper, request)) for scraper in scrapers
    ]
    if not tasks:
        return []

    done, pending = await asyncio.wait(tasks, timeout=deadline)
    for task in pending:
        task.cancel()
    if pending:
        await asyncio.gather(*pending, return_exceptions=True)

    results = []
    for scraper, task in zip(scrapers, tasks):
        if task in pending:
            logger.log(
                "SCRAPER",
                f"Scraper {scraper.name} still pending at the {deadline}s deadline, ignoring it",
            )
            results.append([])
            continue

        torrents = task.result()
        logger.log("SCRAPER", f"Scraper {scraper.name} found {len(torrents)} torrents.")
        results.append(torrents)

    return results


def deduplicate(candidates):
    seen = set()
    unique = []
    for candidate in candidates:
        if candidate.dedupe_key in seen:
            continue
        seen.add(candidate.dedupe_key)
        unique.append(candidate)
    return unique


def _playable(ranked):
    # the list is sorted, so only the top entry decides whether anything is playable
    return bool(ranked) and ranked[0].score >= UNACCEPTABLE_SCORE


async def select(
    media_type: str,
    media_id: str,
    query: str,
    scrapers: list,
    config: SelectionConfig,
    deadline: float = None,
):
    media_only_id, season, episode = parse_media_id(media_type, media_id)
    request = ScrapeRequest(
        media_type=media_type,
        media_id=media_id,
        media_only_id=media_only_id,
        query=query or "",
        season=season,
        episode=episode,
    )

    results = await scrape_all(scrapers, request, deadline)
    candidates = deduplicate(
        enrich(raw) for torrents in results for raw in torrents
    )

    if media_type == "series" and season is not None and episode is not None:
        candidates = filter_episode(candidates, episode_pattern(season, episode))

    filtered = filter_candidates(candidates, config)
    ranked = rank_candidates(filtered, config)

    if not _playable(ranked) and config.fallbackToUnfiltered:
        logger.log(
            "SELECTION",
            f"Nothing acceptable after filtering for {media_id}, falling back to unfiltered candidates",
        )
        ranked = rank_candidates(candidates, config)

    logger.log(
        "SELECTION",
        f"{media_id}: {len(candidates)} candidates, {len(filtered)} after filtering",
    )

    if not _playable(ranked):
        return Selection()

    return Selection.from_ranked(ranked)


async def select_best(media_type: str, media_id: str, config: SelectionConfig):
    key = fingerprint(media_type, media_id, config)
    cached = result_cache.get(key)
    if cached is not None:
        logger.log("CACHE", f"Result cache hit for {media_type} {media_id}")
        return cached

    start_time = time.time()
    session: aiohttp.ClientSession = await http_client_manager.get_session()

    media_only_id, season, episode = parse_media_id(media_type, media_id)
    metadata = await resolve_title(session, media_type, media_only_id)
    query = build_query(*metadata) if metadata else ""

    request = ScrapeRequest(
        media_type=media_type,
        media_id=media_id,
        media_only_id=media_only_id,
        query=query,
        season=season,
        episode=episode,
    )
    scrapers = scraper_manager.get_scrapers(session, request)

    selection = await select(media_type, media_id, query, scrapers, config)
    result_cache.put(key, selection, empty=selection.chosen is None)

    logger.log(
        "SELECTION",
        f"Selected {selection.chosen.title if selection.chosen else 'nothing'} for {media_type} {media_id} in {time.time() - start_time:.2f}s",
    )
    return selection
