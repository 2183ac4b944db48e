"""
Scraper package for Contest Sample Downloader
Contains the base scraper class and the AtCoder scraper
"""

from .base_scraper import BaseScraper
from .atcoder_scraper import AtCoderScraper

__all__ = [
    'BaseScraper',
    'AtCoderScraper'
]
