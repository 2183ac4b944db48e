"""
AtCoder scraper for Contest Sample Downloader
Extracts the numbered sample input/output blocks of AtCoder task pages and
collects them for every task of a contest
"""

import logging
import re
from typing import Dict, List, Optional, Tuple

from bs4 import BeautifulSoup

from .base_scraper import BaseScraper
from utils.error_handler import URLValidationError
from utils.models import ContestIdentifier, ContestResult, ProblemResult, SamplePair
from utils.url_parser import URLParser, DEFAULT_BASE_URL

logger = logging.getLogger(__name__)

# Heading markers, English and Japanese ("入力例 1" / "Sample Input 1")
INPUT_MARKERS = ("Input", "入力例")
OUTPUT_MARKERS = ("Output", "出力例")

SAMPLE_INPUT = "input"
SAMPLE_OUTPUT = "output"


class AtCoderScraper(BaseScraper):
    """
    Scraper for AtCoder task pages

    Task statements are split into ``div.part`` blocks. A sample block holds a
    ``section`` with an ``h3`` heading such as "Sample Input 2" and a ``pre``
    with the literal sample text. Inputs and outputs are sibling parts that are
    not always adjacent, so they are collected by sample number first and
    paired afterwards.
    """

    PART_SELECTOR = "div.part"

    def __init__(self, base_url: str = DEFAULT_BASE_URL, **kwargs):
        """
        Initialize AtCoder scraper

        Args:
            base_url (str): Archive root used to build task URLs
            **kwargs: Passed through to BaseScraper
        """
        super().__init__(**kwargs)
        self.platform = "AtCoder"
        self.url_parser = URLParser(base_url)

    def is_valid_url(self, url: str) -> bool:
        """
        Check if URL is an AtCoder task URL

        Args:
            url (str): URL to validate

        Returns:
            bool: True if valid AtCoder task URL
        """
        return self.url_parser.parse_task_url(url) is not None

    def get_contest_samples(self, contest: ContestIdentifier) -> ContestResult:
        """
        Download the samples of every task of a contest

        Pages are fetched one at a time in label order. The first failed fetch
        aborts the whole contest.

        Args:
            contest (ContestIdentifier): Contest to download

        Returns:
            ContestResult: One ProblemResult per problem label

        Raises:
            NetworkError: If any task page cannot be fetched
        """
        specs = self.url_parser.enumerate_task_urls(contest)
        logger.info(f"Downloading {len(specs)} tasks of {contest}")

        result = ContestResult(contest)
        for spec in specs:
            soup = self.get_page_content(spec.url)
            samples = self.extract_samples(soup)
            logger.info(f"{spec.label}: {len(samples)} samples")
            result.problems.append(ProblemResult(spec.label, samples))

        return result

    def get_problem_samples(self, url: str) -> List[SamplePair]:
        """
        Download the samples of a single task page

        Args:
            url (str): AtCoder task URL

        Returns:
            List[SamplePair]: Samples in ascending sample order

        Raises:
            URLValidationError: If URL is not an AtCoder task URL
            NetworkError: If the page cannot be fetched
        """
        if not self.is_valid_url(url):
            raise URLValidationError(f"Invalid AtCoder task URL format: {url}", url)
        return self.extract_samples(self.get_page_content(url))

    def extract_samples(self, soup: BeautifulSoup) -> List[SamplePair]:
        """
        Pair the numbered sample inputs and outputs found on a task page

        Parts whose heading is not a sample heading (statement, constraints,
        notes, editorial remarks) are skipped. A sample number is kept only
        when both its input and its output were found.

        Args:
            soup (BeautifulSoup): Parsed task page

        Returns:
            List[SamplePair]: Samples in ascending sample number order
        """
        inputs: Dict[int, str] = {}
        outputs: Dict[int, str] = {}

        for part in soup.select(self.PART_SELECTOR):
            block = self._read_sample_block(part)
            if block is None:
                continue
            kind, number, text = block
            if kind == SAMPLE_INPUT:
                inputs[number] = text
            else:
                outputs[number] = text

        matched = sorted(inputs.keys() & outputs.keys())
        orphans = sorted(inputs.keys() ^ outputs.keys())
        if orphans:
            logger.debug(f"Dropping unmatched sample numbers: {orphans}")

        return [SamplePair(inputs[n], outputs[n]) for n in matched]

    def _read_sample_block(self, part) -> Optional[Tuple[str, int, str]]:
        """(kind, number, text) for a sample part, None for anything else"""
        section = part.select_one("section")
        if section is None:
            return None
        heading = section.select_one("h3")
        pre = section.select_one("pre")
        if heading is None or pre is None:
            return None

        heading_text = heading.get_text()
        kind = self._classify_heading(heading_text)
        if kind is None:
            return None

        number = self._sample_number(heading_text)
        if number is None:
            return None

        return kind, number, pre.get_text()

    @staticmethod
    def _classify_heading(heading_text: str) -> Optional[str]:
        if any(marker in heading_text for marker in INPUT_MARKERS):
            return SAMPLE_INPUT
        if any(marker in heading_text for marker in OUTPUT_MARKERS):
            return SAMPLE_OUTPUT
        return None

    @staticmethod
    def _sample_number(heading_text: str) -> Optional[int]:
        """Trailing number of a heading: "Sample Input 3" -> 3"""
        tokens = heading_text.split()
        if not tokens or not re.fullmatch(r"[0-9]+", tokens[-1]):
            return None
        return int(tokens[-1])
