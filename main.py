import os
import logging
from contextlib import asynccontextmanager
from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse, Response
import httpx

from coords import parse_coordinate
from geocode import reverse_geocode
from location import Location
from thumbnail import fetch_thumbnail

# --- Configuration from environment ---
LOG_LEVEL        = os.getenv("LOG_LEVEL", "INFO")
UPSTREAM_TIMEOUT = float(os.getenv("UPSTREAM_TIMEOUT", "10"))

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler()]
)
logger = logging.getLogger(__name__)
# httpx logs full request URLs at INFO; the static map URL carries the API key
logging.getLogger("httpx").setLevel(logging.WARNING)

GEOCODE_FAILED   = "Failed to fetch location data"
THUMBNAIL_FAILED = "Failed to fetch map thumbnail"
INVALID_COORDS   = "Invalid coordinates"


@asynccontextmanager
async def lifespan(app: FastAPI):
    async with httpx.AsyncClient(timeout=UPSTREAM_TIMEOUT) as client:
        app.state.http_client = client
        yield


app = FastAPI(lifespan=lifespan)


def get_http_client(request: Request) -> httpx.AsyncClient:
    return request.app.state.http_client


def plain_text(message: str, status_code: int) -> Response:
    return Response(content=message, status_code=status_code, media_type="text/plain")


# --- Endpoints ---

@app.get("/")
def root():
    return {"status": "location API is live"}


@app.get("/api/geocode/{lat}/{lng}")
async def geocode(lat: str, lng: str, client: httpx.AsyncClient = Depends(get_http_client)):
    try:
        lat_value = parse_coordinate(lat)
        lng_value = parse_coordinate(lng)
    except ValueError:
        return plain_text(INVALID_COORDS, 400)

    try:
        address = await reverse_geocode(client, lat_value, lng_value)
    except (httpx.HTTPError, ValueError) as e:
        logger.error("%s for %r,%r: %s", GEOCODE_FAILED, lat_value, lng_value, e)
        return plain_text(GEOCODE_FAILED, 500)

    return JSONResponse(content=Location(lat=lat_value, lng=lng_value, address=address).as_dict())


@app.get("/api/mapThumbnail/{lat}/{lng}")
async def map_thumbnail(lat: str, lng: str, client: httpx.AsyncClient = Depends(get_http_client)):
    try:
        lat_value = parse_coordinate(lat)
        lng_value = parse_coordinate(lng)
    except ValueError:
        return plain_text(INVALID_COORDS, 400)

    try:
        image = await fetch_thumbnail(client, lat_value, lng_value)
    except httpx.HTTPStatusError as e:
        # The error message embeds the upstream URL, which carries the key
        logger.error("%s for %r,%r: upstream status %s", THUMBNAIL_FAILED, lat_value, lng_value, e.response.status_code)
        return plain_text(THUMBNAIL_FAILED, 500)
    except httpx.HTTPError as e:
        logger.error("%s for %r,%r: %s", THUMBNAIL_FAILED, lat_value, lng_value, type(e).__name__)
        return plain_text(THUMBNAIL_FAILED, 500)

    return Response(
        content=image,
        media_type="image/png",
        headers={"Access-Control-Allow-Origin": "*"},
    )
