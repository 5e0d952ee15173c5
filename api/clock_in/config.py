# clock_in/config.py
import logging
import os
from dotenv import load_dotenv

# load .env (tries package .env then project root)
env_path = os.path.join(os.path.dirname(__file__), ".env")
if not os.path.exists(env_path):
    env_path = os.path.join(os.getcwd(), ".env")
load_dotenv(env_path)

# Fixed remote endpoints
CLOCK_IN_ENDPOINT = "https://code-dojo/v1/clock-ins"
GPS_ENDPOINT = "https://code-dojo/v1/gps"

JSON_HEADERS = {"Content-Type": "application/json"}

DEFAULT_HTTP_TIMEOUT = 20.0


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def _log_level_env(name: str, default: str) -> str:
    level = (os.getenv(name) or default).strip().upper()
    # getLevelName maps known names to their numeric level
    if not isinstance(logging.getLevelName(level), int):
        return default
    return level


HTTP_TIMEOUT = _float_env("CLOCK_IN_HTTP_TIMEOUT", DEFAULT_HTTP_TIMEOUT)
DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVEL = _log_level_env("CLOCK_IN_LOG_LEVEL", DEFAULT_LOG_LEVEL)
