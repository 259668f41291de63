import os
from urllib.parse import urlparse, unquote

from ..exceptions import ValidationError


def extract_domain(url: str) -> str:
    parsed = urlparse(url)
    return parsed.netloc


def derive_public_id(media_url: str, folder: str) -> str:
    """
    Rebuild the object store identifier of an uploaded blob from its public URL.

    The identifier is the folder followed by the last path segment of the URL
    without its extension: ``https://host/bucket/blogs/abc123.jpg`` with folder
    ``blogs`` gives ``blogs/abc123``.
    """
    if not media_url:
        raise ValidationError("Media URL is empty")

    path = urlparse(media_url).path or media_url
    last_segment = unquote(path.rstrip("/").rsplit("/", 1)[-1])
    name, _ = os.path.splitext(last_segment)
    if not name:
        raise ValidationError(f"Cannot derive media identifier from URL: {media_url}")

    folder = folder.strip("/")
    return f"{folder}/{name}" if folder else name


def get_extension(filename: str) -> str:
    return os.path.splitext(filename or "")[1].lower().lstrip(".")
