"""Scraper package — crawl, fetch & HTML cleanup."""

from sitecompiler.scraper.crawler import preprocess_pages, scrape_site
from sitecompiler.scraper.fetcher import fetch_url
from sitecompiler.scraper.links import extract_links
from sitecompiler.scraper.models import CrawlState, RawPage
from sitecompiler.scraper.normalizer import normalize
from sitecompiler.scraper.preprocessor import preprocess

__all__ = [
    "scrape_site",
    "preprocess_pages",
    "fetch_url",
    "extract_links",
    "normalize",
    "preprocess",
    "CrawlState",
    "RawPage",
]
