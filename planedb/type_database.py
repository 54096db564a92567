"""Aircraft type catalog loaded from the FAA ACFTREF.txt file"""

import logging
from typing import Iterable, Optional

from .errors import SourceUnavailableError
from .field_extractor import SOURCE_ENCODING, extract_optional, parse_int, strip_bom
from .records import LoadResult, TypeRecord

logger = logging.getLogger(__name__)

MIN_TYPE_LINE_LENGTH = 68


def parse_type_line(line: str) -> Optional[TypeRecord]:
    """Parse one ACFTREF line

    Args:
        line: Raw line, with or without its line terminator

    Returns:
        TypeRecord, or None if the line is too short to be a record
    """
    line = line.rstrip("\r\n")
    if len(line) < MIN_TYPE_LINE_LENGTH:
        return None

    return TypeRecord(
        id=parse_int(line, 0),
        manufacturer=extract_optional(line, 8, 38),
        model=extract_optional(line, 39, 59),
        category=parse_int(line, 60),
        seat_count=parse_int(line, 72),
    )


def read_type_records(lines: Iterable[str]) -> LoadResult[TypeRecord]:
    """Read type records from lines, keeping file order and skipping short lines"""
    result: LoadResult[TypeRecord] = LoadResult()
    for line in lines:
        result.lines_read += 1
        if result.lines_read == 1:
            line = strip_bom(line)
        record = parse_type_line(line)
        if record is None:
            result.skipped += 1
            logger.debug(f"Skipping short type line {result.lines_read}")
            continue
        result.records.append(record)
    return result


def load_type_catalog(path: str) -> LoadResult[TypeRecord]:
    """Load the type catalog from a file

    Raises:
        SourceUnavailableError: the file cannot be opened or read
    """
    try:
        with open(path, 'r', encoding=SOURCE_ENCODING, newline='') as f:
            result = read_type_records(f)
    except OSError as e:
        raise SourceUnavailableError(path, str(e)) from e

    logger.info(f"Loaded {len(result.records)} aircraft types from {path} ({result.skipped} lines skipped)")
    return result
