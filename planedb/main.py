from fastapi import FastAPI
import sys
import logging

from . import config

# Configure logging with explicit format and stream
logging.basicConfig(
    level=config.get_log_level(),
    format=config.LOG_FORMAT,
    stream=sys.stdout  # Ensure logs go to stdout not stderr
)
logger = logging.getLogger(__name__)

from .plane_database import get_plane_database
from .lookup_routes import register_lookup_routes

app = FastAPI(title="planedb")

# Register registration/type lookup routes
register_lookup_routes(app, get_plane_database_fn=get_plane_database)


@app.get("/")
async def read_root():
    return {
        "service": "planedb",
        "endpoints": ["/registrations/{icao}", "/types/{type_id}", "/health"],
    }
