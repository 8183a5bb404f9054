import logging
import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


def _optional_float(name: str) -> Optional[float]:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return None
    return float(value)


USERS_API_BASE_URL = os.getenv("USERS_API_BASE_URL", "http://localhost:3000")
USERS_PATH = os.getenv("USERS_PATH", "/users")
USERS_URL = USERS_API_BASE_URL.rstrip("/") + USERS_PATH
# None leaves the timeout to requests (no timeout)
REQUEST_TIMEOUT = _optional_float("REQUEST_TIMEOUT")
USERS_DATA_FILE = os.getenv("USERS_DATA_FILE", "data/users.json")
PORT = int(os.getenv("PORT", "3000"))
