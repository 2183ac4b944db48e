"""
URL Parser for Contest Sample Downloader

This module turns a free-text contest name into a ContestIdentifier and
enumerates the task URLs of that contest on the AtCoder archive.

The problem label policy mirrors the archive's own history:

- ABC: contests up to 125 had four problems (a-d), later ones have six (a-f).
- ARC: up to 57 the tasks are a-d; from 58 to 103 ARC ran alongside ABC and its
  own tasks are c-f; after 103 they are a-d again.
- AGC: labels are synthetic codes ``AGC{i}`` for i in 0 .. number - 1.

Example:
    >>> parser = URLParser()
    >>> contest = parser.parse_contest_name("ABC126 ")
    >>> parser.get_problem_letters(contest)
    ['a', 'b', 'c', 'd', 'e', 'f']
    >>> parser.build_task_url(contest, 'a')
    'https://atcoder.jp/contests/abc126/tasks/abc126_a'
"""

import re
from urllib.parse import urlparse
from typing import Dict, Optional, Any, List
import logging

from utils.models import ContestKind, ContestIdentifier, ProblemSpec
from utils.error_handler import ContestParseError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://atcoder.jp"

# Last contest number of each label era, per family
ABC_FOUR_PROBLEM_LAST = 125
ARC_EARLY_LAST = 57
ARC_SHIFTED_LAST = 103

# Contest numbers are unsigned 64-bit values
MAX_CONTEST_NUMBER = 2 ** 64 - 1
MAX_CONTEST_DIGITS = len(str(MAX_CONTEST_NUMBER))


class URLParser:
    """
    Parses contest names and builds AtCoder task URLs.

    Attributes:
        base_url (str): Archive root, without a trailing slash
    """

    TASK_PATH_PATTERN = r'/contests/([^/?#]+)/tasks/([^/?#]+)/?(?:[?#].*)?$'
    DIGITS_PATTERN = re.compile(r'[0-9]+')

    def __init__(self, base_url: str = DEFAULT_BASE_URL):
        self.base_url = base_url.rstrip('/')
        parsed = urlparse(self.base_url)
        host_and_path = parsed.netloc + parsed.path
        if host_and_path.startswith('www.'):
            host_and_path = host_and_path[len('www.'):]
        self.task_pattern = re.compile(
            r'https?://(?:www\.)?' + re.escape(host_and_path) + self.TASK_PATH_PATTERN
        )

    def parse_contest_name(self, contest_name: str) -> ContestIdentifier:
        """
        Parse a contest name such as ``abc390`` into a ContestIdentifier.

        Case-insensitive; surrounding whitespace is ignored. The family prefix
        must be followed directly by a non-negative decimal number.

        Args:
            contest_name (str): Free-text contest name

        Returns:
            ContestIdentifier: Parsed contest

        Raises:
            ContestParseError: If the text is not a recognized contest name
        """
        text = contest_name.strip().lower()
        if len(text) < 4:
            raise ContestParseError(f"parse error on {contest_name!r}: too short", contest_name)

        prefix, suffix = text[:3], text[3:]
        try:
            kind = ContestKind(prefix)
        except ValueError:
            raise ContestParseError(
                f"parse error on {contest_name!r}: unknown contest family {prefix!r}", contest_name
            ) from None

        if not self.DIGITS_PATTERN.fullmatch(suffix):
            raise ContestParseError(
                f"parse error on {contest_name!r}: {suffix!r} is not a contest number", contest_name
            )

        # length check first so huge inputs never reach int()
        digits = suffix.lstrip('0') or '0'
        if len(digits) > MAX_CONTEST_DIGITS or int(digits) > MAX_CONTEST_NUMBER:
            raise ContestParseError(
                f"parse error on {contest_name!r}: contest number is too large", contest_name
            )
        number = int(digits)

        contest = ContestIdentifier(kind, number)
        logger.debug(f"Parsed contest name {contest_name!r} as {contest}")
        return contest

    def get_problem_letters(self, contest: ContestIdentifier) -> List[str]:
        """
        Problem labels of a contest, in canonical order.

        Depends only on the contest family and number; nothing is checked
        against the archive.
        """
        number = contest.number
        if contest.kind is ContestKind.ABC:
            if number <= ABC_FOUR_PROBLEM_LAST:
                return list("abcd")
            return list("abcdef")
        if contest.kind is ContestKind.ARC:
            if number <= ARC_EARLY_LAST:
                return list("abcd")
            if number <= ARC_SHIFTED_LAST:
                return list("cdef")
            return list("abcd")
        return [f"{contest.kind.tag}{i}" for i in range(number)]

    def build_task_url(self, contest: ContestIdentifier, label: str) -> str:
        """Task page URL for one problem label"""
        return f"{self.base_url}/contests/{contest.slug}/tasks/{contest.slug}_{label}"

    def enumerate_task_urls(self, contest: ContestIdentifier) -> List[ProblemSpec]:
        """
        All task pages of a contest, in label order.

        Args:
            contest (ContestIdentifier): Contest to enumerate

        Returns:
            List[ProblemSpec]: One entry per problem label
        """
        specs = [
            ProblemSpec(contest, label, self.build_task_url(contest, label))
            for label in self.get_problem_letters(contest)
        ]
        logger.debug(f"Enumerated {len(specs)} task URLs for {contest}")
        return specs

    def parse_task_url(self, url: str) -> Optional[Dict[str, Any]]:
        """
        Split a task URL of the configured archive into its contest and task ids.

        Args:
            url (str): URL to parse

        Returns:
            Optional[Dict[str, Any]]: ``contest_id``, ``task_id``, ``url`` and
            ``contest_url``, or None if the URL is not a task page
        """
        if not url:
            return None
        match = self.task_pattern.match(url.strip())
        if not match:
            return None
        contest_id, task_id = match.groups()
        return {
            'contest_id': contest_id,
            'task_id': task_id,
            'url': url.strip(),
            'contest_url': f"{self.base_url}/contests/{contest_id}",
        }
