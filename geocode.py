import os
import httpx

from coords import format_coordinate

NOMINATIM_REVERSE_URL = os.getenv("NOMINATIM_REVERSE_URL", "https://nominatim.openstreetmap.org/reverse")
GEOCODE_USER_AGENT    = os.getenv("GEOCODE_USER_AGENT", "location-glue/1.0")


async def reverse_geocode(client: httpx.AsyncClient, lat: float, lon: float) -> str:
    params = {"format": "json", "lat": format_coordinate(lat), "lon": format_coordinate(lon)}
    headers = {"User-Agent": GEOCODE_USER_AGENT}
    response = await client.get(NOMINATIM_REVERSE_URL, params=params, headers=headers)
    response.raise_for_status()
    data = response.json()

    address = data.get("display_name") if isinstance(data, dict) else None
    if not address:
        raise ValueError("No display_name in reverse geocoding response")
    return address
