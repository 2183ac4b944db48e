"""
Base scraper class for Contest Sample Downloader

This module provides the base class for platform scrapers. It owns the HTTP
session and turns a URL into either the response text or a parsed
BeautifulSoup document.

Fetching is deliberately plain: one blocking GET per call, no retries, no
rate limiting and no caching. Any transport error or non-success status is
raised as NetworkError and ends the run.

Example:
    >>> from scraper.atcoder_scraper import AtCoderScraper
    >>> with AtCoderScraper() as scraper:
    ...     soup = scraper.get_page_content("https://atcoder.jp/contests/abc390/tasks/abc390_a")
"""

from abc import ABC, abstractmethod
from typing import Optional
import logging

import requests
from requests.adapters import HTTPAdapter
from requests.exceptions import RequestException, HTTPError
from bs4 import BeautifulSoup

from utils.error_handler import NetworkError, URLValidationError, handle_exception

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = (
    'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 '
    '(KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36'
)


class BaseScraper(ABC):
    """
    Base class for platform-specific scrapers.

    Attributes:
        timeout (Optional[float]): Request timeout in seconds; None waits forever
        session (requests.Session): HTTP session shared by all fetches
        parser (str): BeautifulSoup tree builder
    """

    def __init__(self, timeout: Optional[float] = None,
                 user_agent: str = DEFAULT_USER_AGENT, parser: str = 'lxml'):
        self.timeout = timeout
        self.parser = parser
        self.session = requests.Session()

        self.session.headers.update({
            'User-Agent': user_agent,
            'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8',
            'Accept-Language': 'en-US,en;q=0.5,ja;q=0.3',
            'Connection': 'keep-alive',
        })

        # A failed page fails the run, so the adapters never retry
        adapter = HTTPAdapter(max_retries=0)
        self.session.mount("http://", adapter)
        self.session.mount("https://", adapter)

    @abstractmethod
    def is_valid_url(self, url: str) -> bool:
        """Whether this scraper understands the given URL"""

    @handle_exception
    def fetch_page(self, url: str) -> str:
        """
        GET a URL and return the response body as text

        Args:
            url (str): URL to fetch

        Returns:
            str: Response body

        Raises:
            URLValidationError: If the URL is empty
            NetworkError: On transport errors or a non-success status code
        """
        if not url or not url.strip():
            raise URLValidationError("Empty URL provided", url)

        logger.info(f"Fetching content from: {url}")
        try:
            response = self.session.get(url, timeout=self.timeout, allow_redirects=True)
            response.raise_for_status()
        except HTTPError as e:
            status_code = e.response.status_code if e.response is not None else None
            raise NetworkError(f"HTTP error {status_code} fetching {url}",
                               original_exception=e, url=url, status_code=status_code) from e
        except RequestException as e:
            raise NetworkError(f"Network error fetching {url}: {str(e)}",
                               original_exception=e, url=url) from e

        logger.debug(f"Received {len(response.text)} characters from: {url}")
        return response.text

    def parse_html(self, html_content: str) -> BeautifulSoup:
        return BeautifulSoup(html_content, self.parser)

    def get_page_content(self, url: str) -> BeautifulSoup:
        """
        Fetch a page and parse it

        Args:
            url (str): URL to fetch

        Returns:
            BeautifulSoup: Parsed HTML content
        """
        soup = self.parse_html(self.fetch_page(url))
        logger.debug(f"Successfully parsed content from: {url}")
        return soup

    def close(self) -> None:
        """Close the HTTP session"""
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, exc_tb):
        self.close()
        return False
