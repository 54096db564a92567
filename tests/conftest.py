"""Pytest configuration and shared fixtures for tests"""

import pytest

from planedb import plane_database
from planedb.plane_database import PlaneDatabase


def _put(buf, offset, text):
    buf[offset:offset + len(text)] = list(text)


def build_type_line(type_id, manufacturer="", model="", category=0, seats=0, width=80):
    """Build an ACFTREF line with fields at their fixed columns"""
    buf = [" "] * width
    _put(buf, 0, str(type_id))
    _put(buf, 8, manufacturer[:30])
    _put(buf, 39, model[:20])
    _put(buf, 60, str(category))
    _put(buf, 72, str(seats))
    return "".join(buf)


def build_registration_line(n_number, type_id, registrant, icao_hex, width=640):
    """Build a MASTER line with fields at their fixed columns"""
    buf = [" "] * width
    _put(buf, 0, n_number[:5])
    _put(buf, 37, str(type_id))
    _put(buf, 58, registrant[:50])
    _put(buf, 601, icao_hex)
    return "".join(buf)


# Sample reference data
SAMPLE_TYPES = [
    (2072738, "CESSNA", "172S", 4, 4),
    (1151220, "BOEING", "737-800", 5, 189),
    (9999901, "ACME AIRCRAFT", "ROADRUNNER", 4, 4),
]

SAMPLE_REGISTRATIONS = [
    ("12345", 2072738, "SMITH JOHN", "A061D9"),
    ("737AB", 1151220, "SOUTHWEST AIRLINES CO", "A9C0D2"),
    ("1DX", 5555555, "", "A00001"),  # type not in the catalog
]


@pytest.fixture
def make_type_line():
    return build_type_line


@pytest.fixture
def make_registration_line():
    return build_registration_line


@pytest.fixture
def type_lines():
    """ACFTREF lines for the sample types plus one truncated line"""
    lines = [build_type_line(*t) for t in SAMPLE_TYPES]
    lines.insert(1, "2072738CESSNA")
    return lines


@pytest.fixture
def registration_lines():
    """MASTER lines for the sample registrations plus one truncated line"""
    lines = [build_registration_line(*r) for r in SAMPLE_REGISTRATIONS]
    lines.append("12345 TRUNCATED")
    return lines


@pytest.fixture
def data_dir(tmp_path, type_lines, registration_lines):
    """Directory holding ACFTREF.txt and MASTER.txt built from the sample data"""
    (tmp_path / "ACFTREF.txt").write_text("\n".join(type_lines) + "\n", encoding="utf-8")
    (tmp_path / "MASTER.txt").write_text("\n".join(registration_lines) + "\n", encoding="utf-8")
    return tmp_path


@pytest.fixture
def plane_db(data_dir):
    """Open database over the sample data directory"""
    db = PlaneDatabase.from_config(str(data_dir)).open()
    yield db
    db.close()


@pytest.fixture
def shared_db_reset():
    """Make sure the shared database is reopened for each test"""
    plane_database.reset_plane_database()
    yield
    plane_database.reset_plane_database()
