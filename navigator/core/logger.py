import sys

from loguru import logger

from navigator.core.log_levels import CUSTOM_LOG_LEVELS, STANDARD_LOG_LEVELS


def setupLogger(level: str):
    # Configure custom log levels
    for level_name, level_config in CUSTOM_LOG_LEVELS.items():
        try:
            logger.level(
                level_name,
                no=level_config["no"],
                icon=level_config["icon"],
                color=level_config["loguru_color"],
            )
        except (TypeError, ValueError):
            # already registered by a previous setupLogger call
            logger.level(
                level_name,
                icon=level_config["icon"],
                color=level_config["loguru_color"],
            )

    # Configure standard log levels (override defaults)
    for level_name, level_config in STANDARD_LOG_LEVELS.items():
        logger.level(
            level_name, icon=level_config["icon"], color=level_config["loguru_color"]
        )

    log_format = (
        "<white>{time:YYYY-MM-DD}</white> <magenta>{time:HH:mm:ss}</magenta> | "
        "<level>{level.icon}</level> <level>{level}</level> | "
        "<cyan>{module}</cyan>.<cyan>{function}</cyan> - <level>{message}</level>"
    )

    logger.configure(
        handlers=[
            {
                "sink": sys.stderr,
                "level": level,
                "format": log_format,
                "backtrace": False,
                "diagnose": False,
            }
        ]
    )


setupLogger("DEBUG")


def log_scraper_error(
    scraper_name: str, scraper_url: str, media_id: str, error: Exception
):
    logger.log(
        "SCRAPER",
        f"Exception while getting torrents for {media_id} with {scraper_name} ({scraper_url}), the site is most likely down or blocking us: {error}",
    )


def log_startup_info(settings):
    def enabled(toggle: bool, urls):
        if not toggle:
            return "False"
        if not urls:
            return "True"
        return f"True - {', '.join(urls)}"

    logger.log(
        "NAVIGATOR",
        "Server started on http://"
        + f"{settings.FASTAPI_HOST}:{settings.FASTAPI_PORT} - {settings.FASTAPI_WORKERS} workers",
    )
    logger.log(
        "NAVIGATOR",
        f"Mirror Timeout: {settings.MIRROR_TIMEOUT}s - Selection Deadline: {settings.SELECTION_DEADLINE}s",
    )
    logger.log(
        "NAVIGATOR",
        f"Result Cache: {settings.RESULT_CACHE_MAX_ENTRIES} entries - TTL: {settings.RESULT_CACHE_TTL}s (empty: {settings.RESULT_CACHE_EMPTY_TTL}s)",
    )
    logger.log("NAVIGATOR", f"YTS Scraper: {enabled(settings.SCRAPE_YTS, settings.YTS_URL)}")
    logger.log(
        "NAVIGATOR", f"EZTV Scraper: {enabled(settings.SCRAPE_EZTV, settings.EZTV_URL)}"
    )
    logger.log("NAVIGATOR", f"TPB Scraper: {enabled(settings.SCRAPE_TPB, settings.TPB_URL)}")
    logger.log(
        "NAVIGATOR",
        f"1337x Scraper: {enabled(settings.SCRAPE_X1337, settings.X1337_URL)}",
    )
    logger.log(
        "NAVIGATOR",
        f"Stremio Add-on Scraper: {enabled(settings.SCRAPE_STREMIO_ADDON, settings.STREMIO_ADDON_URL)}",
    )
