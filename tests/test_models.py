import pytest
from pydantic import ValidationError

from clock_in.models import ClockInRequest


def test_payload_uses_wire_names():
    req = ClockInRequest(timestamp="1760700000000", coordinates="47.4978789,19.0402383")
    assert req.to_payload() == {
        "clockInDateTime": "1760700000000",
        "gpsCoordinates": "47.4978789,19.0402383",
    }


def test_payload_leaves_out_missing_coordinates():
    req = ClockInRequest(timestamp="1760700000000")
    assert req.to_payload() == {"clockInDateTime": "1760700000000"}


def test_accepts_wire_names():
    req = ClockInRequest(clockInDateTime="1", gpsCoordinates="0,0")
    assert req.timestamp == "1"
    assert req.coordinates == "0,0"


def test_timestamp_must_not_be_empty():
    with pytest.raises(ValidationError):
        ClockInRequest(timestamp="")
