import os
from typing import Dict
import httpx

from coords import format_coordinate

STATIC_MAP_URL = os.getenv("STATIC_MAP_URL", "https://maps.googleapis.com/maps/api/staticmap")

ZOOM     = 17
SIZE     = "150x150"
MAP_TYPE = "hybrid"


def thumbnail_params(lat: float, lng: float, api_key: str) -> Dict[str, str]:
    point = f"{format_coordinate(lat)},{format_coordinate(lng)}"
    return {
        "center": point,
        "zoom": str(ZOOM),
        "size": SIZE,
        "maptype": MAP_TYPE,
        "markers": f"color:red|{point}",
        "key": api_key,
    }


async def fetch_thumbnail(client: httpx.AsyncClient, lat: float, lng: float) -> bytes:
    # Key is read per request and must never be logged
    params = thumbnail_params(lat, lng, os.getenv("GOOGLE_MAPS_API_KEY", ""))
    response = await client.get(STATIC_MAP_URL, params=params)
    response.raise_for_status()
    return response.content
