# clock_in/services/clock_in.py
import logging
import time
from typing import Optional

import httpx

from ..config import CLOCK_IN_ENDPOINT, HTTP_TIMEOUT, JSON_HEADERS
from ..errors import ClockInFailedError, GpsFetchFailedError, GpsNotAvailableError
from ..models import ClockInRequest
from .gps import fetch_gps_coordinates

logger = logging.getLogger("clock_in")

CLOCKED_IN = "Clocked in"
GPS_WARNING = "GPS is not available, unable to clock in"


def now_millis() -> str:
    return str(int(time.time() * 1000))


async def _post_clock_in(client: httpx.AsyncClient, payload: dict) -> None:
    r = await client.post(CLOCK_IN_ENDPOINT, json=payload, headers=JSON_HEADERS)
    r.raise_for_status()


async def send_clock_in(coordinates: Optional[str] = None, gps_required: bool = False, *,
                        client: Optional[httpx.AsyncClient] = None) -> str:
    """
    Submit a clock-in for the current time, optionally tagged with coordinates.

    When gps_required is set and there are no coordinates, a warning is logged
    and GpsNotAvailableError is raised without touching the network.
    Any transport error, error status or exception raised by the endpoint raises
    ClockInFailedError. Returns "Clocked in" otherwise.
    """
    if gps_required and not coordinates:
        logger.warning(GPS_WARNING)
        raise GpsNotAvailableError()

    req = ClockInRequest(timestamp=now_millis(), coordinates=coordinates or None)
    payload = req.to_payload()

    try:
        if client is not None:
            await _post_clock_in(client, payload)
        else:
            async with httpx.AsyncClient(timeout=HTTP_TIMEOUT) as own_client:
                await _post_clock_in(own_client, payload)
    except Exception as exc:
        raise ClockInFailedError() from exc

    return CLOCKED_IN


async def clock_in_with_location(gps_required: bool = False, *,
                                 client: Optional[httpx.AsyncClient] = None) -> str:
    # a failed location read just means we clock in without coordinates
    try:
        coordinates = await fetch_gps_coordinates(client=client)
    except GpsFetchFailedError:
        coordinates = None
    return await send_clock_in(coordinates, gps_required, client=client)
