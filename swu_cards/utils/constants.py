import os


# docs: https://www.swu-db.com/api
SWU_API_URL = os.getenv("SWU_API_URL", "https://api.swu-db.com")
SEARCH_PATH = "/cards/search"
REQUEST_TIMEOUT_SECONDS = float(os.getenv("SWU_REQUEST_TIMEOUT", "15"))
USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0.0.0 Safari/537.36"
)

LOG_LEVEL = os.getenv("SWU_LOG_LEVEL", "INFO")
DISCARD_STALE_RESPONSES = os.getenv("SWU_DISCARD_STALE", "1") != "0"

DEFAULT_SORT_KEY = "name"
DEFAULT_ERROR_MESSAGE = "Failed to load cards"
