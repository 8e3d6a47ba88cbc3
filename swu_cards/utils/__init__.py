from swu_cards.utils.constants import (
    DEFAULT_ERROR_MESSAGE,
    DEFAULT_SORT_KEY,
    DISCARD_STALE_RESPONSES,
    LOG_LEVEL,
    REQUEST_TIMEOUT_SECONDS,
    SEARCH_PATH,
    SWU_API_URL,
    USER_AGENT,
)
from swu_cards.utils.utils import (
    format_field,
    sort_cards,
    sort_value,
    to_text,
)
