# siteinspect/fetcher.py

from __future__ import annotations

import json
import logging
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeout
from dataclasses import dataclass
from typing import List, Tuple
from urllib.parse import urlparse

import requests
import urllib3

from .config import FETCH_TIMEOUT_SECONDS, FETCH_USER_AGENT
from .errors import FetchFailed, InvalidUrl

logger = logging.getLogger("siteinspect")

HEADERS = {"User-Agent": FETCH_USER_AGENT}


@dataclass
class FetchedPage:
    url: str
    html: str
    status: int


# ---------------------------------------------------------
# URL NORMALIZATION
# ---------------------------------------------------------

def normalize_url(url_raw: str) -> str:
    """
    Trim the input and add https:// when no http(s) prefix is present.

    Raises InvalidUrl when the result has no scheme or hostname.
    """
    url = url_raw.strip()
    if not url.startswith("http"):
        url = "https://" + url
        logger.info(json.dumps({"event": "url_normalized", "url": url}))

    try:
        parsed = urlparse(url)
        host = parsed.hostname
    except ValueError as exc:
        raise InvalidUrl(f"Invalid URL: {url}") from exc

    if not parsed.scheme or not host:
        raise InvalidUrl(f"Invalid URL: {url}")
    return url


def domain_of(url: str) -> str:
    return urlparse(url).hostname or ""


# ---------------------------------------------------------
# FETCH
# ---------------------------------------------------------

# requests raises urllib3 / ValueError errors for some malformed hosts
TRANSPORT_ERRORS = (requests.RequestException, urllib3.exceptions.HTTPError, ValueError)


def _download(url: str, timeout: float, opened: List[requests.Response]) -> Tuple[str, int]:
    resp = requests.get(url, headers=HEADERS, timeout=timeout, stream=True)
    opened.append(resp)
    with resp:
        return resp.text, resp.status_code


def fetch_page(url: str, timeout: float = FETCH_TIMEOUT_SECONDS) -> FetchedPage:
    """
    Single GET bounded by `timeout` seconds in total, body included.

    Error statuses are returned, not raised; transport failures and the
    deadline passing become FetchFailed.
    """
    opened: List[requests.Response] = []
    pool = ThreadPoolExecutor(max_workers=1)
    future = pool.submit(_download, url, timeout, opened)
    try:
        html, status = future.result(timeout=timeout)
    except FutureTimeout as exc:
        # unblocks the worker still reading the body
        for resp in opened:
            resp.close()
        raise FetchFailed(url, TimeoutError(f"no complete response within {timeout}s")) from exc
    except TRANSPORT_ERRORS as exc:
        raise FetchFailed(url, exc) from exc
    finally:
        pool.shutdown(wait=False)

    logger.info(json.dumps({"event": "fetch", "url": url, "status": status, "bytes": len(html)}))
    return FetchedPage(url=url, html=html, status=status)
