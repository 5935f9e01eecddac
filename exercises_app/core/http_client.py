"""Single blocking HTTP GET used by the network exercise."""

import logging
from typing import Optional

import requests

logger = logging.getLogger(__name__)


def fetch_text(
    url: str, timeout: float = 10.0, session: Optional[requests.Session] = None
) -> str:
    """GET `url` and return the body verbatim.

    Raises requests.RequestException (HTTPError for a non-2xx status) so the
    caller decides how to report it. No retry.
    """
    http = session or requests.Session()
    try:
        response = http.get(url, timeout=timeout)
        response.raise_for_status()
        return response.text
    except requests.RequestException as e:
        logger.warning("GET %s failed: %s", url, e)
        raise
    finally:
        if session is None:
            http.close()
