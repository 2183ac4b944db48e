"""
Utils package for Contest Sample Downloader
Contains the data model, contest name parsing and file management
"""

from .url_parser import URLParser
from .file_manager import FileManager

__all__ = ['URLParser', 'FileManager']
