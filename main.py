#!/usr/bin/env python3
"""
Contest Sample Downloader
Main entry point for the application

Reads a contest name such as ``abc390`` from standard input, downloads the
sample input/output pairs of every task in that contest and writes them to
``contest.json`` in the working directory.

This module provides:
- Configuration loading (INI file)
- Logging configuration
- The interactive prompt and exit status handling
"""

__version__ = "1.0.0"
__author__ = "Contest Sample Downloader Team"
__license__ = "MIT"
__description__ = "Download sample input/output pairs of AtCoder contests as JSON"

import sys
import os
import logging
import traceback
import configparser
from pathlib import Path
from typing import Optional, TextIO

# Add the project root to Python path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from scraper.atcoder_scraper import AtCoderScraper
from scraper.base_scraper import DEFAULT_USER_AGENT
from utils.url_parser import URLParser, DEFAULT_BASE_URL
from utils.file_manager import FileManager
from utils.models import ContestResult
from utils.error_handler import SampleDownloaderError

PROMPT = "Input contest name[ex. abc390, arc195] > "
CONFIG_ENV_VAR = "CONTEST_SAMPLES_CONFIG"


class ApplicationManager:
    """
    Loads configuration, sets up logging and runs one download.
    """

    def __init__(self, config_file: Optional[Path] = None):
        self.config_dir = Path.home() / ".contest_samples"
        if config_file is None and os.environ.get(CONFIG_ENV_VAR):
            config_file = Path(os.environ[CONFIG_ENV_VAR])
        self.config_file = config_file or self.config_dir / "config.ini"
        self.config = self._default_configuration()

    @staticmethod
    def _default_configuration() -> configparser.ConfigParser:
        config = configparser.ConfigParser(interpolation=None)
        config['DEFAULT'] = {
            'log_level': 'INFO',
        }
        config['Paths'] = {
            'output_file': 'contest.json',
            'log_file': '',
        }
        config['Scraping'] = {
            'base_url': DEFAULT_BASE_URL,
            'user_agent': DEFAULT_USER_AGENT,
        }
        return config

    def initialize(self):
        """
        Load configuration and set up logging.
        """
        self._load_configuration()
        self._setup_logging()
        logging.debug(f"Configuration file: {self.config_file}")

    def _load_configuration(self):
        """
        Overlay the INI file, if any, on the built-in defaults.
        """
        if self.config_file.exists():
            self.config.read(self.config_file, encoding='utf-8')

    def _setup_logging(self):
        """
        Configure logging with a console handler and an optional file handler.
        """
        level_name = self.config['DEFAULT'].get('log_level', 'INFO').upper()
        log_level = getattr(logging, level_name, logging.INFO)

        detailed_formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s'
        )
        simple_formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(message)s'
        )

        root_logger = logging.getLogger()
        root_logger.setLevel(log_level)
        root_logger.handlers.clear()

        log_file = self.config['Paths'].get('log_file', '').strip()
        if log_file:
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(detailed_formatter)
            root_logger.addHandler(file_handler)

        # stdout carries the prompt
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(log_level)
        console_handler.setFormatter(simple_formatter)
        root_logger.addHandler(console_handler)

    @property
    def output_file(self) -> str:
        return self.config['Paths'].get('output_file', 'contest.json')

    def run(self, contest_name: str) -> Path:
        """
        Download one contest and write it to the output file.

        Args:
            contest_name (str): Contest name such as ``abc390``

        Returns:
            Path: Path of the written JSON file
        """
        scraping = self.config['Scraping']
        url_parser = URLParser(scraping.get('base_url', DEFAULT_BASE_URL))
        contest = url_parser.parse_contest_name(contest_name)

        with AtCoderScraper(base_url=url_parser.base_url,
                            user_agent=scraping.get('user_agent', DEFAULT_USER_AGENT)) as scraper:
            result: ContestResult = scraper.get_contest_samples(contest)

        return FileManager().save_json(result.to_dict(), self.output_file)


def read_contest_name(stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> str:
    """
    Prompt for and read one contest name.

    Raises:
        EOFError: If standard input is closed before a line is read
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stdout.write(PROMPT)
    stdout.flush()
    line = stdin.readline()
    if not line:
        raise EOFError("No contest name given")
    return line.strip()


def main():
    """
    Main function to start the Contest Sample Downloader.
    """
    try:
        app_manager = ApplicationManager()
        app_manager.initialize()

        contest_name = read_contest_name()
        output_path = app_manager.run(contest_name)
        logging.info(f"Samples written to {output_path}")

    except KeyboardInterrupt:
        print("\nInterrupted, nothing was written", file=sys.stderr)
        sys.exit(1)

    except EOFError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    except SampleDownloaderError as e:
        print(f"Error: {e.user_message}", file=sys.stderr)
        sys.exit(1)

    except Exception as e:
        print(f"Fatal application error: {e}", file=sys.stderr)
        logging.debug(traceback.format_exc())
        sys.exit(1)


if __name__ == "__main__":
    main()
