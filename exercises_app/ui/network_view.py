from typing import Optional

import requests

from exercises_app.config import DEFAULT_TODO_URL
from exercises_app.core.http_client import fetch_text


def exercise_6(
    url: str = DEFAULT_TODO_URL,
    timeout: float = 10.0,
    session: Optional[requests.Session] = None,
):
    """GET a sample todo and echo the JSON body; report failures as text."""
    try:
        body = fetch_text(url, timeout=timeout, session=session)
        print("[6] Response JSON:\n" + body)
    except requests.RequestException as e:
        print(f"[6] HTTP error: {e}")
