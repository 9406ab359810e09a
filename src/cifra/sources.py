"""Reading interchange documents from disk or over HTTP.

Locations starting with ``http://`` or ``https://`` are fetched with
:mod:`httpx`; anything else is treated as a local UTF-8 file.
"""

import logging
from pathlib import Path

import httpx

from .exceptions import DocumentReadError, FetchError

logger = logging.getLogger(__name__)

_FETCH_HEADERS = {
    "User-Agent": "cifra (+https://pypi.org/project/cifra/)",
    "Accept": "text/plain,text/*;q=0.9,*/*;q=0.8",
}


def is_url(location: str) -> bool:
    return location.startswith(("http://", "https://"))


def fetch_document(url: str) -> str:
    """GET *url* and return the response body as text.

    Raises FetchError on transport failures (status 0) and non-200 responses.
    """
    logger.debug("Fetching %s", url)
    try:
        resp = httpx.get(url, headers=_FETCH_HEADERS, follow_redirects=True, timeout=15)
    except httpx.RequestError as exc:
        raise FetchError(url, 0) from exc
    if resp.status_code != 200:
        raise FetchError(url, resp.status_code)
    return resp.text


def read_document(location: str) -> str:
    """Return the text of the document at *location* (path or URL).

    Raises FetchError for URLs that can't be fetched and DocumentReadError for
    files that can't be read or aren't valid UTF-8.
    """
    if is_url(location):
        return fetch_document(location)

    logger.debug("Reading %s", location)
    try:
        return Path(location).read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise DocumentReadError(location, "not valid UTF-8") from exc
    except OSError as exc:
        raise DocumentReadError(location, exc.strerror or str(exc)) from exc
