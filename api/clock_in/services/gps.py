# clock_in/services/gps.py
from typing import Optional

import httpx

from ..config import GPS_ENDPOINT, HTTP_TIMEOUT, JSON_HEADERS
from ..errors import GpsFetchFailedError


# Reference location returned when the gps service does not send one back
DEFAULT_COORDINATES = "47.4978789,19.0402383"


def extract_coordinates(r: httpx.Response) -> str:
    try:
        data = r.json()
    except ValueError:
        return DEFAULT_COORDINATES
    if isinstance(data, dict):
        coords = data.get("gpsCoordinates")
        if isinstance(coords, str) and coords.strip():
            return coords.strip()
    return DEFAULT_COORDINATES


async def _get_gps(client: httpx.AsyncClient) -> httpx.Response:
    r = await client.get(GPS_ENDPOINT, headers=JSON_HEADERS)
    r.raise_for_status()
    return r


async def fetch_gps_coordinates(*, client: Optional[httpx.AsyncClient] = None) -> str:
    """
    GET the current coordinates from the gps endpoint.
    Raises GpsFetchFailedError on any transport error, error status
    or other exception raised while talking to the endpoint.
    """
    try:
        if client is not None:
            r = await _get_gps(client)
        else:
            async with httpx.AsyncClient(timeout=HTTP_TIMEOUT) as own_client:
                r = await _get_gps(own_client)
    except Exception as exc:
        raise GpsFetchFailedError() from exc
    return extract_coordinates(r)
