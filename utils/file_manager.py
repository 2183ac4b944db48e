"""
File Manager for Contest Sample Downloader
Handles writing and reading the contest JSON file with error handling
"""

import json
import shutil
from pathlib import Path
from typing import Dict, Any, Optional, Union
import logging

from utils.error_handler import FileSystemError, handle_exception

logger = logging.getLogger(__name__)


class FileManager:
    """
    Utility class for reading and writing output files
    """

    def __init__(self, base_dir: Optional[Union[str, Path]] = None):
        """
        Initialize File Manager

        Args:
            base_dir (Optional[Union[str, Path]]): Directory relative paths are
                resolved against. Defaults to the current working directory.
        """
        self.base_dir = Path(base_dir) if base_dir else Path.cwd()

    def resolve(self, filepath: Union[str, Path]) -> Path:
        filepath = Path(filepath)
        if filepath.is_absolute():
            return filepath
        return self.base_dir / filepath

    @handle_exception
    def save_json(self, data: Dict[str, Any], filepath: Union[str, Path],
                  indent: Optional[int] = 2) -> Path:
        """
        Save data to JSON file

        The data is written to a temporary file next to the target and then
        moved into place, so a failed write never leaves a truncated file.

        Args:
            data (Dict[str, Any]): Data to save
            filepath (Union[str, Path]): File path
            indent (Optional[int]): JSON indentation, None for compact output

        Returns:
            Path: Path of the written file

        Raises:
            FileSystemError: If serialization or any file operation fails
        """
        if data is None:
            raise FileSystemError("Cannot save None data to JSON file")

        filepath = self.resolve(filepath)
        if not filepath.name:
            raise FileSystemError("Empty filepath provided")

        try:
            json_str = json.dumps(data, indent=indent, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise FileSystemError(f"Data cannot be serialized to JSON: {str(e)}", str(filepath), e)

        temp_file = filepath.with_name(filepath.name + '.tmp')
        try:
            with open(temp_file, 'w', encoding='utf-8') as f:
                f.write(json_str)
            shutil.move(str(temp_file), str(filepath))
        except PermissionError as e:
            raise FileSystemError(f"Permission denied writing JSON file: {filepath}", str(filepath), e)
        except OSError as e:
            raise FileSystemError(f"OS error writing JSON file: {filepath}: {e}", str(filepath), e)
        finally:
            if temp_file.exists():
                temp_file.unlink()

        logger.info(f"JSON data saved to: {filepath}")
        return filepath

    @handle_exception
    def load_json(self, filepath: Union[str, Path]) -> Dict[str, Any]:
        """
        Load data from JSON file

        Args:
            filepath (Union[str, Path]): File path

        Returns:
            Dict[str, Any]: Loaded data

        Raises:
            FileSystemError: If the file is missing or not valid JSON
        """
        filepath = self.resolve(filepath)
        try:
            with open(filepath, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except FileNotFoundError as e:
            raise FileSystemError(f"JSON file not found: {filepath}", str(filepath), e)
        except json.JSONDecodeError as e:
            raise FileSystemError(f"Invalid JSON in {filepath}: {e}", str(filepath), e)
        except OSError as e:
            raise FileSystemError(f"OS error reading JSON file: {filepath}: {e}", str(filepath), e)

        logger.info(f"JSON data loaded from: {filepath}")
        return data
