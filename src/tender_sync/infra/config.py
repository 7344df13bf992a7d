from __future__ import annotations

import os

DEFAULT_TIMEOUT_SECONDS = 10.0
DEFAULT_PAGE_SIZE = 10


def api_base_url() -> str:
    url = os.getenv("TENDER_API_BASE_URL")

    if not url:
        raise RuntimeError("TENDER_API_BASE_URL environment variable is not set")

    return url.rstrip("/")


def request_timeout() -> float:
    raw = os.getenv("TENDER_API_TIMEOUT")

    if not raw:
        return DEFAULT_TIMEOUT_SECONDS

    try:
        timeout = float(raw)
    except ValueError:
        raise RuntimeError(f"TENDER_API_TIMEOUT must be a number of seconds, got {raw!r}")

    if timeout <= 0:
        raise RuntimeError("TENDER_API_TIMEOUT must be > 0")

    return timeout


def default_page_size() -> int:
    raw = os.getenv("TENDER_PAGE_SIZE")

    if not raw:
        return DEFAULT_PAGE_SIZE

    try:
        size = int(raw)
    except ValueError:
        raise RuntimeError(f"TENDER_PAGE_SIZE must be an integer, got {raw!r}")

    if size <= 0:
        raise RuntimeError("TENDER_PAGE_SIZE must be > 0")

    return size
