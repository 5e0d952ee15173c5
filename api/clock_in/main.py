# clock_in/main.py
import logging

import httpx
from fastapi import FastAPI, HTTPException, Request

from .config import HTTP_TIMEOUT, LOG_LEVEL
from .errors import ClockInFailedError, GpsFetchFailedError, GpsNotAvailableError
from .models import ClockInResponse, GpsResponse
from .services.clock_in import clock_in_with_location, send_clock_in
from .services.gps import fetch_gps_coordinates

logger = logging.getLogger("uvicorn.error")
logging.getLogger("clock_in").setLevel(LOG_LEVEL)

# ----------------- FastAPI App Initialization -----------------

app = FastAPI(title="Clock-in Service")


@app.on_event("startup")
async def startup_event():
    app.state.http_client = httpx.AsyncClient(timeout=HTTP_TIMEOUT)


@app.on_event("shutdown")
async def shutdown_event():
    client = getattr(app.state, "http_client", None)
    if client is not None:
        await client.aclose()
        app.state.http_client = None


def _client(request: Request):
    return getattr(request.app.state, "http_client", None)

# ----------------- Endpoints -----------------

@app.get("/")
def home():
    return {"Response": "You are at the clock-in service"}


@app.get("/ping")
def ping():
    logger.info("PING endpoint hit")
    return {"status": "ok"}


@app.get("/gps", response_model=GpsResponse)
async def gps(request: Request):
    try:
        coords = await fetch_gps_coordinates(client=_client(request))
    except GpsFetchFailedError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return GpsResponse(ok=True, coordinates=coords)


@app.post("/clock-in", response_model=ClockInResponse)
async def clock_in(request: Request, gps_required: bool = False, use_gps: bool = True):
    client = _client(request)
    try:
        if use_gps:
            message = await clock_in_with_location(gps_required, client=client)
        else:
            message = await send_clock_in(None, gps_required, client=client)
    except GpsNotAvailableError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ClockInFailedError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return ClockInResponse(ok=True, message=message)
