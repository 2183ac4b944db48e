"""
Error Handling Module for Contest Sample Downloader

This module provides the custom exceptions raised by the downloader together with
the structured error information they carry and a small reporter that logs them.

Structural and transport failures (bad contest name, failed fetch, unwritable
output file) are fatal and propagate. Page content that does not look like a
sample block is never an error; the extractor simply skips it.
"""

import logging
import traceback
import functools
from typing import Dict, Any, Optional, Callable, List
from enum import Enum
from dataclasses import dataclass, field
from datetime import datetime

logger = logging.getLogger(__name__)


class ErrorSeverity(Enum):
    """Error severity levels"""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorCategory(Enum):
    """Error categories for classification"""
    CONTEST_PARSE = "contest_parse"
    URL_VALIDATION = "url_validation"
    NETWORK = "network"
    FILE_SYSTEM = "file_system"
    UNKNOWN = "unknown"


@dataclass
class ErrorInfo:
    """Structured error information"""
    message: str
    category: ErrorCategory
    severity: ErrorSeverity
    original_exception: Optional[Exception] = None
    context: Dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)
    traceback_str: Optional[str] = None
    recovery_suggestions: List[str] = field(default_factory=list)
    user_message: Optional[str] = None


# =============================================================================
# Custom Exception Classes
# =============================================================================

class SampleDownloaderError(Exception):
    """Base exception for all Contest Sample Downloader specific errors"""

    def __init__(self, message: str, error_info: Optional[ErrorInfo] = None):
        super().__init__(message)
        self.error_info = error_info or ErrorInfo(
            message=message,
            category=ErrorCategory.UNKNOWN,
            severity=ErrorSeverity.MEDIUM
        )

    @property
    def user_message(self) -> str:
        """Message suitable for showing on the terminal"""
        if self.error_info.user_message:
            return f"{self} ({self.error_info.user_message})"
        return str(self)


class ContestParseError(SampleDownloaderError):
    """Unrecognized or malformed contest name"""

    def __init__(self, message: str, contest_name: Optional[str] = None):
        error_info = ErrorInfo(
            message=message,
            category=ErrorCategory.CONTEST_PARSE,
            severity=ErrorSeverity.MEDIUM,
            context={"contest_name": contest_name} if contest_name is not None else {},
            recovery_suggestions=[
                "Use a contest family prefix: abc, arc or agc",
                "Append the contest number without a separator, e.g. abc390"
            ],
            user_message="Expected a contest name such as abc390 or arc195."
        )
        super().__init__(message, error_info)
        self.contest_name = contest_name


class URLValidationError(SampleDownloaderError):
    """URL that is not an AtCoder task page"""

    def __init__(self, message: str, url: Optional[str] = None):
        error_info = ErrorInfo(
            message=message,
            category=ErrorCategory.URL_VALIDATION,
            severity=ErrorSeverity.MEDIUM,
            context={"url": url} if url else {},
            recovery_suggestions=[
                "Check URL format",
                "Use a task URL such as https://atcoder.jp/contests/abc390/tasks/abc390_a"
            ]
        )
        super().__init__(message, error_info)
        self.url = url


class NetworkError(SampleDownloaderError):
    """Network-related errors (connection failures, non-success status codes, etc.)"""

    def __init__(self, message: str, original_exception: Optional[Exception] = None,
                 url: Optional[str] = None, status_code: Optional[int] = None):
        error_info = ErrorInfo(
            message=message,
            category=ErrorCategory.NETWORK,
            severity=ErrorSeverity.HIGH,
            original_exception=original_exception,
            context={"url": url, "status_code": status_code},
            recovery_suggestions=[
                "Check internet connection",
                "Verify the contest exists on the archive",
                "Try again after a few minutes"
            ],
            user_message="Failed to download a problem page."
        )
        super().__init__(message, error_info)
        self.url = url
        self.status_code = status_code


class FileSystemError(SampleDownloaderError):
    """File system related errors (permissions, disk space, etc.)"""

    def __init__(self, message: str, path: Optional[str] = None,
                 original_exception: Optional[Exception] = None):
        error_info = ErrorInfo(
            message=message,
            category=ErrorCategory.FILE_SYSTEM,
            severity=ErrorSeverity.HIGH,
            original_exception=original_exception,
            context={"path": path} if path else {},
            recovery_suggestions=[
                "Check file/directory permissions",
                "Ensure sufficient disk space",
                "Try a different output location"
            ],
            user_message="Could not write the output file."
        )
        super().__init__(message, error_info)
        self.path = path


# =============================================================================
# Error Reporting
# =============================================================================

class ErrorReporter:
    """Logs reported errors and keeps per-category counts"""

    def __init__(self):
        self.error_counts: Dict[str, int] = {}
        self.recent_errors: List[ErrorInfo] = []
        self.max_recent = 20

    def report_error(self, error_info: ErrorInfo, context: Optional[Dict[str, Any]] = None):
        """Record an error and log it with its context"""
        if context:
            error_info.context.update(context)

        category = error_info.category.value
        self.error_counts[category] = self.error_counts.get(category, 0) + 1

        self.recent_errors.append(error_info)
        if len(self.recent_errors) > self.max_recent:
            self.recent_errors.pop(0)

        # main() prints fatal errors for the user
        logger.debug(f"[{category}] {error_info.message}")
        if error_info.context:
            logger.debug(f"Error context: {error_info.context}")
        if error_info.traceback_str:
            logger.debug(f"Traceback: {error_info.traceback_str}")

    def get_error_summary(self) -> Dict[str, Any]:
        """Summary of errors reported so far"""
        return {
            "total_errors": sum(self.error_counts.values()),
            "by_category": dict(self.error_counts),
            "last_error": self.recent_errors[-1].message if self.recent_errors else None
        }

    def reset(self):
        self.error_counts.clear()
        self.recent_errors.clear()


# =============================================================================
# Global Error Handler Instance
# =============================================================================

# Global error reporter instance
error_reporter = ErrorReporter()


def handle_exception(func: Callable) -> Callable:
    """Decorator to handle exceptions and report them"""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except SampleDownloaderError as e:
            error_reporter.report_error(e.error_info)
            raise
        except Exception as e:
            error_info = ErrorInfo(
                message=f"Unexpected error in {func.__name__}: {str(e)}",
                category=ErrorCategory.UNKNOWN,
                severity=ErrorSeverity.MEDIUM,
                original_exception=e,
                traceback_str=traceback.format_exc()
            )
            error_reporter.report_error(error_info)
            raise SampleDownloaderError(f"Unexpected error: {str(e)}", error_info) from e
    return wrapper
