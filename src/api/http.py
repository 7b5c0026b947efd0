# src/api/http.py
import logging
from typing import Any

import requests
from requests.exceptions import RequestException

from src.api.errors import FetchError
from src.config import HTTP_TIMEOUT_S, HTTP_USER_AGENT
from src.utils import report_error

logger = logging.getLogger("weatherdash")


def http_get_json(
    url: str,
    params: dict[str, Any] | None = None,
    timeout: float = HTTP_TIMEOUT_S,
) -> dict[str, Any]:
    """Single GET returning the decoded JSON object. No retries.

    Any transport, HTTP status or decoding failure is reported and re-raised
    as FetchError.
    """
    headers = {"User-Agent": HTTP_USER_AGENT}
    try:
        resp = requests.get(url, params=params, timeout=timeout, headers=headers)
        resp.raise_for_status()
        data = resp.json()
    except (RequestException, ValueError) as e:
        report_error(f"http_get_json: {url}", e)
        raise FetchError() from e

    if not isinstance(data, dict):
        e = TypeError(f"expected JSON object, got {type(data).__name__}")
        report_error(f"http_get_json: {url}", e)
        raise FetchError() from e

    logger.debug("GET %s ok", url)
    return data
