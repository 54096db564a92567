"""HTTP endpoints for plane registration and type lookups"""

import logging
from typing import Any, Callable, Dict, Optional

from fastapi import FastAPI, HTTPException

from .plane_database import PlaneDatabase
from .report import registration_to_dict, type_to_dict

logger = logging.getLogger(__name__)

PlaneDatabaseGetter = Callable[[], Optional[PlaneDatabase]]


def register_lookup_routes(app: FastAPI, *, get_plane_database_fn: PlaneDatabaseGetter) -> None:
    """Attach the lookup endpoints to the FastAPI app

    Handlers are plain functions so FastAPI runs them in its threadpool; the
    first request may load the source files.
    """

    def require_database() -> PlaneDatabase:
        db = get_plane_database_fn()
        if db is None:
            raise HTTPException(status_code=503, detail="Plane database unavailable")
        return db

    @app.get("/registrations/{icao}")
    def registration_endpoint(icao: str) -> Dict[str, Any]:
        db = require_database()
        record = db.lookup_registration(icao)
        if record is None:
            logger.info(f"Registration not found: {icao}")
            raise HTTPException(status_code=404, detail=f"Plane not found: {icao}")
        return registration_to_dict(db, record)

    @app.get("/types/{type_id}")
    def type_endpoint(type_id: int) -> Dict[str, Any]:
        db = require_database()
        type_record = db.lookup_type(type_id)
        if type_record is None:
            raise HTTPException(status_code=404, detail=f"Aircraft type not found: {type_id}")
        return type_to_dict(type_record)

    @app.get("/health")
    def health_endpoint() -> Dict[str, Any]:
        db = get_plane_database_fn()
        if db is None:
            return {"status": "unavailable", "types": 0, "registrations": 0,
                    "skipped_type_lines": 0, "skipped_registration_lines": 0}

        degraded = not (db.types_available and db.registrations_available)
        return {
            "status": "degraded" if degraded else "ok",
            "types": db.type_count,
            "registrations": db.registration_count,
            "skipped_type_lines": db.type_load.skipped if db.type_load else 0,
            "skipped_registration_lines": db.registration_load.skipped if db.registration_load else 0,
        }
