"""Environment configuration for the plane database"""

import logging
import os
from typing import Optional

PLANEDB_DATA_DIR = os.getenv("PLANEDB_DATA_DIR", ".")
PLANEDB_TYPES_FILE = os.getenv("PLANEDB_TYPES_FILE", "ACFTREF.txt")
PLANEDB_REGISTRATIONS_FILE = os.getenv("PLANEDB_REGISTRATIONS_FILE", "MASTER.txt")
PLANEDB_LOG_LEVEL = os.getenv("PLANEDB_LOG_LEVEL")

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def _resolve(file_name: str, data_dir: Optional[str]) -> str:
    # An absolute file name ignores the data directory
    return os.path.join(data_dir or PLANEDB_DATA_DIR, file_name)


def types_path(data_dir: Optional[str] = None) -> str:
    """Path of the aircraft type reference file (ACFTREF.txt)"""
    return _resolve(PLANEDB_TYPES_FILE, data_dir)


def registrations_path(data_dir: Optional[str] = None) -> str:
    """Path of the aircraft registration file (MASTER.txt)"""
    return _resolve(PLANEDB_REGISTRATIONS_FILE, data_dir)


def get_log_level(name: Optional[str] = None, default: str = "INFO") -> int:
    """Translate a level name to a logging level

    An explicit name wins over PLANEDB_LOG_LEVEL, which wins over the default.
    """
    level = logging.getLevelName((name or PLANEDB_LOG_LEVEL or default).upper())
    if not isinstance(level, int):
        return logging.INFO
    return level
