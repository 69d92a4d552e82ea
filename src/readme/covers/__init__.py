# ABOUTME: Cover image package: loading covers from files, EPUBs, and URLs.
# ABOUTME: Exports the loaders and the errors they raise.

from readme.covers.http import CoverFetchError, HttpClient, ReadMeHttpClient
from readme.covers.images import CoverError, detect_image_type, extension_for
from readme.covers.loader import fetch_cover, load_cover_file

__all__ = [
    "CoverError",
    "CoverFetchError",
    "HttpClient",
    "ReadMeHttpClient",
    "detect_image_type",
    "extension_for",
    "fetch_cover",
    "load_cover_file",
]
