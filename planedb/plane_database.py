"""Plane database: registration and type lookups by ICAO address

Loads the FAA MASTER.txt and ACFTREF.txt files once and answers lookups from
memory. A missing file is not an error: the matching collection stays empty
and every lookup against it returns None, so the host application keeps
working without reference data.
"""

import logging
import threading
from typing import Any, Callable, Dict, Generic, List, Optional, Tuple, TypeVar

from . import config
from .errors import DatabaseClosedError, DatabaseLoadError, SourceUnavailableError
from .field_extractor import parse_hex
from .records import LoadResult, RegistrationRecord, TypeRecord
from .registration_database import load_registrations
from .type_database import load_type_catalog

logger = logging.getLogger(__name__)

K = TypeVar("K")
V = TypeVar("V")


class LastLookupCache(Generic[K, V]):
    """Remembers the most recent successful lookup

    The key and value are stored as one tuple, so a reader never sees the key
    of one entry paired with the value of another.
    """

    def __init__(self):
        self._entry: Optional[Tuple[K, V]] = None

    def get(self, key: K) -> Tuple[bool, Optional[V]]:
        entry = self._entry
        if entry is not None and entry[0] == key:
            return True, entry[1]
        return False, None

    def put(self, key: K, value: V) -> None:
        self._entry = (key, value)

    def clear(self) -> None:
        self._entry = None


def _build_index(records: List[Any]) -> Dict[int, Any]:
    # First record wins, same as a front-to-back scan
    index: Dict[int, Any] = {}
    for record in records:
        index.setdefault(record.id, record)
    return index


class PlaneDatabase:
    """Registration and type records with single-entry lookup caches"""

    def __init__(self, types_path: str, registrations_path: str):
        self.types_path = types_path
        self.registrations_path = registrations_path

        self.type_load: Optional[LoadResult[TypeRecord]] = None
        self.registration_load: Optional[LoadResult[RegistrationRecord]] = None

        self._types: List[TypeRecord] = []
        self._registrations: List[RegistrationRecord] = []
        self._type_index: Dict[int, TypeRecord] = {}
        self._registration_index: Dict[int, RegistrationRecord] = {}

        self._type_cache: LastLookupCache[int, TypeRecord] = LastLookupCache()
        self._registration_cache: LastLookupCache[int, RegistrationRecord] = LastLookupCache()

        self._opened = False
        self._closed = False

    @classmethod
    def from_config(cls, data_dir: Optional[str] = None) -> "PlaneDatabase":
        """Create a database for the configured file locations"""
        return cls(config.types_path(data_dir), config.registrations_path(data_dir))

    def __enter__(self) -> "PlaneDatabase":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def is_open(self) -> bool:
        return self._opened and not self._closed

    @property
    def types_available(self) -> bool:
        return self.type_load is not None

    @property
    def registrations_available(self) -> bool:
        return self.registration_load is not None

    @property
    def type_count(self) -> int:
        return len(self._types)

    @property
    def registration_count(self) -> int:
        return len(self._registrations)

    def _check_not_closed(self) -> None:
        if self._closed:
            raise DatabaseClosedError("plane database has been closed")

    def _load_source(self, loader: Callable[[str], LoadResult], path: str, label: str) -> Optional[LoadResult]:
        try:
            return loader(path)
        except SourceUnavailableError as e:
            logger.warning(f"{e} - {label} lookups will return not found")
            return None

    def open(self) -> "PlaneDatabase":
        """Load both source files

        A missing or unreadable file leaves its collection empty. Running out
        of memory releases everything loaded so far.

        Returns:
            self, so construction and loading can be chained

        Raises:
            DatabaseLoadError: loading could not complete
            DatabaseClosedError: the database was already closed
        """
        self._check_not_closed()
        if self._opened:
            return self

        try:
            self.type_load = self._load_source(load_type_catalog, self.types_path, "type")
            self.registration_load = self._load_source(load_registrations, self.registrations_path, "registration")

            if self.type_load is not None:
                self._types = self.type_load.records
                self._type_index = _build_index(self._types)
            if self.registration_load is not None:
                self._registrations = self.registration_load.records
                self._registration_index = _build_index(self._registrations)
        except MemoryError as e:
            logger.error("Out of memory while loading plane database", exc_info=True)
            self._release()
            raise DatabaseLoadError("cannot allocate plane database records") from e

        self._opened = True
        logger.info(
            f"Plane database ready: {self.type_count} types, {self.registration_count} registrations"
        )
        return self

    def lookup_registration(self, icao: Optional[str]) -> Optional[RegistrationRecord]:
        """Find a registration by ICAO address

        Args:
            icao: ICAO address as a hex string (e.g. 'A1B2C3'), any case. Only
                the leading hex digits count, so '' and 'zz' both look up 0.

        Returns:
            The matching RegistrationRecord, or None if not found
        """
        self._check_not_closed()
        if icao is None:
            return None

        key = parse_hex(icao, 0)
        hit, record = self._registration_cache.get(key)
        if hit:
            return record

        record = self._registration_index.get(key)
        if record is not None:
            self._registration_cache.put(key, record)
        return record

    def lookup_type(self, type_id: int) -> Optional[TypeRecord]:
        """Find an aircraft type by its manufacturer/model/series code"""
        self._check_not_closed()

        hit, record = self._type_cache.get(type_id)
        if hit:
            return record

        record = self._type_index.get(type_id)
        if record is not None:
            self._type_cache.put(type_id, record)
        return record

    def _release(self) -> None:
        # Caches go first so they never outlive the records they point to
        self._type_cache.clear()
        self._registration_cache.clear()
        self._type_index = {}
        self._registration_index = {}
        self._types = []
        self._registrations = []
        self.type_load = None
        self.registration_load = None

    def close(self) -> None:
        """Release all records; the database cannot be used afterwards"""
        if self._closed:
            return
        self._release()
        self._closed = True


# Shared instance, opened on first use
_plane_db: Optional[PlaneDatabase] = None
_plane_db_initialized = False
_plane_db_lock = threading.Lock()


def open_plane_database(data_dir: Optional[str] = None) -> Optional[PlaneDatabase]:
    """Open a database from the configured files

    Returns:
        An open PlaneDatabase, or None if it could not be initialized
    """
    try:
        return PlaneDatabase.from_config(data_dir).open()
    except DatabaseLoadError as e:
        logger.error(f"Could not initialize plane database: {e}")
        return None


def get_plane_database() -> Optional[PlaneDatabase]:
    """Get the shared database, opening it on first call"""
    global _plane_db, _plane_db_initialized
    with _plane_db_lock:
        if not _plane_db_initialized:
            _plane_db = open_plane_database()
            _plane_db_initialized = True
        return _plane_db


def reset_plane_database() -> None:
    """Close the shared database so the next call reopens it"""
    global _plane_db, _plane_db_initialized
    with _plane_db_lock:
        if _plane_db is not None:
            _plane_db.close()
        _plane_db = None
        _plane_db_initialized = False


def lookup_registration(icao: Optional[str]) -> Optional[RegistrationRecord]:
    """Find a registration by ICAO address in the shared database"""
    db = get_plane_database()
    if db is None:
        return None
    try:
        return db.lookup_registration(icao)
    except DatabaseClosedError:
        # reset_plane_database() closed it under us
        logger.warning("Shared plane database was closed during lookup")
        return None


def lookup_type(type_id: int) -> Optional[TypeRecord]:
    """Find an aircraft type in the shared database"""
    db = get_plane_database()
    if db is None:
        return None
    try:
        return db.lookup_type(type_id)
    except DatabaseClosedError:
        logger.warning("Shared plane database was closed during lookup")
        return None
