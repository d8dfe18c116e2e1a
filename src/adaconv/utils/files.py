"""Scoped file reading that reports failures as values."""

import logging
from typing import Union

from adaconv.models.results import ReadFailure

logger = logging.getLogger(__name__)

READ_TEXT_CONTEXT = "adaconv.utils.files.read_text"


def read_text(path: str) -> Union[str, ReadFailure]:
    """
    Read the whole UTF-8 text content of `path`.

    Returns:
        The file content, or a ReadFailure describing the OS error
    """
    try:
        with open(path, "r", encoding="utf-8") as fd:
            return fd.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Failed to read {path}: {e}")
        return ReadFailure(message=f"{READ_TEXT_CONTEXT}: {e}")
