"""Aircraft registrations loaded from the FAA MASTER.txt file"""

import logging
from typing import Iterable, Optional

from .errors import SourceUnavailableError
from .field_extractor import SOURCE_ENCODING, extract_optional, extract_trimmed, parse_hex, parse_int, strip_bom
from .records import LoadResult, RegistrationRecord

logger = logging.getLogger(__name__)

MIN_REGISTRATION_LINE_LENGTH = 610


def parse_registration_line(line: str) -> Optional[RegistrationRecord]:
    """Parse one MASTER line

    Args:
        line: Raw line, with or without its line terminator

    Returns:
        RegistrationRecord, or None if the line is too short to be a record
    """
    line = line.rstrip("\r\n")
    if len(line) < MIN_REGISTRATION_LINE_LENGTH:
        return None

    return RegistrationRecord(
        id=parse_hex(line, 601),
        tail_number=extract_trimmed(line, 0, 5),
        type_id=parse_int(line, 37),
        registrant_name=extract_optional(line, 58, 107),
    )


def read_registration_records(lines: Iterable[str]) -> LoadResult[RegistrationRecord]:
    """Read registration records from lines, keeping file order and skipping short lines"""
    result: LoadResult[RegistrationRecord] = LoadResult()
    for line in lines:
        result.lines_read += 1
        if result.lines_read == 1:
            line = strip_bom(line)
        record = parse_registration_line(line)
        if record is None:
            result.skipped += 1
            logger.debug(f"Skipping short registration line {result.lines_read}")
            continue
        result.records.append(record)
    return result


def load_registrations(path: str) -> LoadResult[RegistrationRecord]:
    """Load aircraft registrations from a file

    Raises:
        SourceUnavailableError: the file cannot be opened or read
    """
    try:
        with open(path, 'r', encoding=SOURCE_ENCODING, newline='') as f:
            result = read_registration_records(f)
    except OSError as e:
        raise SourceUnavailableError(path, str(e)) from e

    logger.info(f"Loaded {len(result.records)} registrations from {path} ({result.skipped} lines skipped)")
    return result
