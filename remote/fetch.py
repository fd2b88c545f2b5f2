"""
remote/fetch.py — pobieranie dokumentu licencji z URL.

  - link "podglądu" Google Drive (/file/d/<id>/view) zamieniany jest na link
    bezpośredniego pobrania (uc?export=download&id=<id>)
  - opcjonalny relay: szablon z "{url}", np.
        https://api.allorigins.win/raw?url={url}
    (adres docelowy wstawiany po zakodowaniu)
  - odpowiedź text/html = brak dostępu (Drive zwraca stronę logowania)

Publiczne API:
  to_direct_download_url(url)                 -> str
  relay_url(url, relay)                       -> str
  fetch_document(url, relay, timeout)         -> bytes
"""

from __future__ import annotations

import logging
import re
from urllib.parse import quote

import requests
from bs4 import BeautifulSoup

from vn3_model.errors import AccessDenied, NetworkFailure

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0

_DRIVE_FILE_RE = re.compile(r"/file/d/([a-zA-Z0-9_-]+)")
_DRIVE_DOWNLOAD_URL = "https://drive.google.com/uc?export=download&id={file_id}"

_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/120.0.0.0 Safari/537.36"
    )
}


def to_direct_download_url(url: str) -> str:
    """Link udostępniania Google Drive → link pobrania; inne URL bez zmian."""
    m = _DRIVE_FILE_RE.search(url)
    if not m:
        return url
    return _DRIVE_DOWNLOAD_URL.format(file_id=m.group(1))


def relay_url(url: str, relay: str | None) -> str:
    if not relay:
        return url
    encoded = quote(url, safe="")
    if "{url}" in relay:
        return relay.replace("{url}", encoded)
    return relay + encoded


def fetch_document(
    url: str,
    relay: str | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> bytes:
    """
    Pobiera bajty dokumentu.

    Raises:
        NetworkFailure: błąd połączenia albo status inny niż 2xx.
        AccessDenied:   serwer zwrócił stronę HTML zamiast dokumentu.
    """
    target = relay_url(to_direct_download_url(url), relay)
    logger.debug("GET %s", target)

    try:
        resp = requests.get(target, timeout=timeout, headers=_HEADERS)
    except requests.RequestException as exc:
        logger.debug("Błąd pobierania %s: %s", target, exc)
        raise NetworkFailure() from exc

    if not resp.ok:
        logger.debug("HTTP %d dla %s", resp.status_code, target)
        raise NetworkFailure()

    content_type = resp.headers.get("Content-Type", "")
    if "text/html" in content_type.lower():
        title = _html_title(resp.text)
        logger.debug("Odpowiedź HTML zamiast PDF (tytuł: %r)", title)
        raise AccessDenied(page_title=title)

    return resp.content


def _html_title(html: str) -> str | None:
    soup = BeautifulSoup(html, "html.parser")
    if soup.title is None:
        return None
    title = soup.title.get_text(" ", strip=True)
    return title or None
