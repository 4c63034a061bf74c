"""
Reading and writing whole save images on disk.

Images are always loaded and written in full; there is no partial write.
"""

import logging
from pathlib import Path
from typing import Union

from ..core.offsets import SAVE_SIZE

logger = logging.getLogger(__name__)


def load_save(file_path: Union[str, Path]) -> bytearray:
    """
    Read a .sav file into a mutable buffer.

    Raises:
        OSError: the file cannot be read
    """
    path = Path(file_path)
    data = bytearray(path.read_bytes())
    if len(data) != SAVE_SIZE:
        logger.warning(f"Save file size is {len(data)} bytes (expected {SAVE_SIZE})")
    logger.info(f"Loaded {path.name} ({len(data)} bytes)")
    return data


def write_save(file_path: Union[str, Path], data: Union[bytes, bytearray]) -> Path:
    """Overwrite ``file_path`` with the full image."""
    path = Path(file_path)
    path.write_bytes(bytes(data))
    logger.info(f"Wrote {len(data)} bytes to {path.name}")
    return path
