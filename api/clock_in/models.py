# clock_in/models.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class ClockInRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    timestamp: str = Field(..., min_length=1, alias="clockInDateTime",
                           description="Milliseconds since the Unix epoch, as a string")
    coordinates: Optional[str] = Field(None, alias="gpsCoordinates",
                                       description="Latitude/longitude pair, e.g. '47.4978789,19.0402383'")

    def to_payload(self) -> dict:
        # gpsCoordinates is left out entirely when there are none
        return self.model_dump(by_alias=True, exclude_none=True)


class ClockInResponse(BaseModel):
    ok: bool
    message: str


class GpsResponse(BaseModel):
    ok: bool
    coordinates: str
