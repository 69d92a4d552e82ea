# ABOUTME: Loads cover image bytes from image files, EPUBs, or URLs.
# ABOUTME: Every path through here ends in the same image-format check.

import logging
from pathlib import Path

from readme.covers.http import HttpClient, ReadMeHttpClient
from readme.covers.images import CoverError, validate_image
from readme.formats.epub import EpubReadError, read_epub_details

logger = logging.getLogger(__name__)


def load_cover_file(path: Path) -> bytes:
    """Read a cover from disk.

    EPUB files yield their embedded cover; anything else is read as an
    image file.

    Raises:
        CoverError: If the file is missing, unreadable, or not an image.
    """
    if path.suffix.lower() == ".epub":
        try:
            details = read_epub_details(path)
        except EpubReadError as exc:
            raise CoverError(str(exc)) from exc
        if details.cover_image is None:
            raise CoverError(f"No cover image in {path}")
        logger.debug("Using embedded cover from %s", path)
        return validate_image(details.cover_image, str(path))

    try:
        data = path.read_bytes()
    except OSError as exc:
        raise CoverError(f"Cannot read {path}: {exc}") from exc
    return validate_image(data, str(path))


def fetch_cover(url: str, client: HttpClient | None = None) -> bytes:
    """Download a cover image.

    Raises:
        CoverFetchError: If the download fails.
        CoverError: If the response is not an image.
    """
    if not url.startswith(("http://", "https://")):
        raise CoverError(f"Not an HTTP(S) URL: {url}")
    if client is not None:
        data = client.get_bytes(url)
    else:
        own_client = ReadMeHttpClient()
        try:
            data = own_client.get_bytes(url)
        finally:
            own_client.close()
    logger.debug("Downloaded %d bytes from %s", len(data), url)
    return validate_image(data, url)
