"""Command-line plane lookup: planedb <icao>"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from . import config
from .plane_database import open_plane_database
from .report import format_registration_report, registration_to_dict

logger = logging.getLogger(__name__)

EXIT_FOUND = 0
EXIT_NOT_FOUND = 1
EXIT_UNAVAILABLE = 3  # 2 is argparse's usage error


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="planedb",
        description="Look up an FAA aircraft registration by ICAO address",
    )
    parser.add_argument("icao", help="ICAO address in hex, e.g. A1B2C3")
    parser.add_argument("--data-dir", metavar="DIR", default=None,
                        help="Directory holding MASTER.txt and ACFTREF.txt "
                             "(default: $PLANEDB_DATA_DIR or the current directory)")
    parser.add_argument("--json", action="store_true",
                        help="Print the result as JSON")
    parser.add_argument("--log-level", default=None,
                        help="Logging level (default: $PLANEDB_LOG_LEVEL or WARNING)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=config.get_log_level(args.log_level, default="WARNING"), format=config.LOG_FORMAT)

    # With --json, stdout carries only the JSON document
    status_out = sys.stderr if args.json else sys.stdout

    print(args.icao, file=status_out)
    db = open_plane_database(args.data_dir)
    if db is None or not db.registrations_available:
        print("Could not initialize plane database", file=status_out)
        if db is not None:
            db.close()
        return EXIT_UNAVAILABLE

    with db:
        record = db.lookup_registration(args.icao)
        if record is None:
            print("Plane not found", file=status_out)
            return EXIT_NOT_FOUND

        if args.json:
            print(json.dumps(registration_to_dict(db, record), indent=2))
        else:
            print(format_registration_report(db, record))
    return EXIT_FOUND


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
