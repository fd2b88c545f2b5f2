"""
remote — pobieranie dokumentów licencji z sieci.

Publiczne API:
  fetch_document(url, relay, timeout)   -> bytes
  to_direct_download_url(url)           -> str
  relay_url(url, relay)                 -> str
"""

from .fetch import DEFAULT_TIMEOUT, fetch_document, relay_url, to_direct_download_url

__all__ = [
    "DEFAULT_TIMEOUT",
    "fetch_document",
    "relay_url",
    "to_direct_download_url",
]
