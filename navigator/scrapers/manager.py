import importlib
import inspect
import os
import pkgutil
from typing import Dict

import aiohttp

from navigator.core.logger import logger
from navigator.core.models import settings
from navigator.scrapers.base import BaseScraper
from navigator.scrapers.models import ScrapeRequest


class ScraperManager:
    def __init__(self):
        self.scrapers: Dict[str, type] = {}
        self.discover_scrapers()

    def discover_scrapers(self):
        """
        Dynamically discover and load scraper classes from the scrapers directory.
        """
        package = "navigator.scrapers"
        path = os.path.dirname(__file__)

        for _, name, _ in pkgutil.iter_modules([path]):
            if name in ["base", "manager", "models"]:
                continue

            module = importlib.import_module(f"{package}.{name}")

            for _, obj in inspect.getmembers(module):
                if (
                    inspect.isclass(obj)
                    and issubclass(obj, BaseScraper)
                    and obj is not BaseScraper
                    and obj.setting_name
                ):
                    self.scrapers[obj.__name__] = obj

    def get_scrapers(self, session: aiohttp.ClientSession, request: ScrapeRequest):
        """Instantiate every enabled scraper able to serve this request, in a fixed order."""
        scrapers = []
        for scraper_name in sorted(self.scrapers):
            scraper_class = self.scrapers[scraper_name]

            if not getattr(settings, f"SCRAPE_{scraper_class.setting_name}", False):
                continue

            urls = getattr(settings, f"{scraper_class.setting_name}_URL", None)
            if not urls:
                logger.debug(
                    f"No {scraper_class.setting_name}_URL found for {scraper_class.name}, disabling"
                )
                continue

            scraper = scraper_class(session, urls)
            if scraper.supports(request):
                scrapers.append(scraper)

        return scrapers


scraper_manager = ScraperManager()
