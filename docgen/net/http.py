"""HTTP access for remote OpenAPI documents."""

from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

RETRY_STATUSES = (429, 500, 502, 503, 504)
DOCUMENT_ACCEPT = "application/json, application/yaml;q=0.9, text/yaml;q=0.9, */*;q=0.5"


def retry_session(retries: int = 3, backoff: float = 0.5) -> requests.Session:
    """Session whose GET/HEAD calls retry connection errors and 429/5xx answers."""
    policy = Retry(
        total=retries,
        backoff_factor=backoff,
        status_forcelist=RETRY_STATUSES,
        allowed_methods=frozenset({"GET", "HEAD"}),
        respect_retry_after_header=True,
        raise_on_status=False,
    )
    session = requests.Session()
    session.headers["Accept"] = DOCUMENT_ACCEPT
    for prefix in ("http://", "https://"):
        session.mount(prefix, HTTPAdapter(max_retries=policy))
    return session


def get_text(url: str, timeout: float = 30.0) -> str:
    """GET ``url`` and return its body; ``requests.RequestException`` on failure."""
    with retry_session() as session:
        response = session.get(url, timeout=timeout)
        response.raise_for_status()
        return response.text
