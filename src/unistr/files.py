"""
File content boundary.

The text value type never holds paths or handles. It only receives the
bytes read here.
"""

import os
from pathlib import Path
from typing import Union

from unistr.exceptions import NotFoundError
from unistr.logging_config import logger


def read_contents(path: Union[str, Path]) -> bytes:
    """
    Read a whole file into memory.

    Args:
        path: Path to a regular file

    Returns:
        The file's bytes

    Raises:
        NotFoundError: If path is not an existing, readable regular file.
    """
    file_path = Path(path)

    if not file_path.is_file() or not os.access(file_path, os.R_OK):
        raise NotFoundError(str(path))

    try:
        data = file_path.read_bytes()
    except OSError as e:
        raise NotFoundError(str(path), f"could not be read: {e}") from e

    logger.debug(f"Read {len(data)} bytes from {file_path}")
    return data
