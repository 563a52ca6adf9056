"""
Adaptateurs HTTP.

- JavDBClient : implementation de IMetadataService (recherche + fiche)
- HttpImageDownloader : implementation de IImageDownloader
- RateLimitError, with_retry, request_with_retry : gestion des 429
"""

from javorg.adapters.api.image_downloader import HttpImageDownloader
from javorg.adapters.api.javdb_client import JavDBClient
from javorg.adapters.api.retry import RateLimitError, request_with_retry, with_retry

__all__ = [
    "JavDBClient",
    "HttpImageDownloader",
    "RateLimitError",
    "with_retry",
    "request_with_retry",
]
