# ABOUTME: Recognizes cover image formats from their leading bytes.
# ABOUTME: Only formats a cover can be displayed as are accepted.


class CoverError(Exception):
    """Raised when a cover image cannot be loaded or is not an image."""


_SIGNATURES: list[tuple[bytes, str]] = [
    (b"\xff\xd8\xff", "image/jpeg"),
    (b"\x89PNG\r\n\x1a\n", "image/png"),
    (b"GIF87a", "image/gif"),
    (b"GIF89a", "image/gif"),
]


def detect_image_type(data: bytes) -> str | None:
    """Return the MIME type of ``data`` if it looks like a supported image."""
    for signature, mime in _SIGNATURES:
        if data.startswith(signature):
            return mime
    # WebP: RIFF....WEBP
    if len(data) >= 12 and data[:4] == b"RIFF" and data[8:12] == b"WEBP":
        return "image/webp"
    return None


def validate_image(data: bytes, source: str) -> bytes:
    """Return ``data`` unchanged if it is a supported image.

    Raises:
        CoverError: If the data is empty or not a recognized image format.
    """
    if not data:
        raise CoverError(f"No image data in {source}")
    if detect_image_type(data) is None:
        raise CoverError(f"Not a JPEG, PNG, GIF, or WebP image: {source}")
    return data


def extension_for(data: bytes) -> str:
    """File extension matching the image's format, ``.bin`` if unknown."""
    mime = detect_image_type(data)
    if mime is None:
        return ".bin"
    return "." + mime.split("/", 1)[1].replace("jpeg", "jpg")
