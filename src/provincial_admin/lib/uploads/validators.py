"""Validation helpers for profile image uploads.

Pure functions checking the declared MIME type, the original filename's
extension, and the upload size.  An upload is accepted only when both the
MIME type and the extension are on the allow-list.
"""

# Allowed MIME types for profile images, mapped to their canonical extension.
ALLOWED_MIME_TYPES: dict[str, str] = {
    "image/jpeg": ".jpg",
    "image/jpg": ".jpg",
    "image/png": ".png",
    "image/gif": ".gif",
}

# Reverse mapping: extension -> MIME type
ALLOWED_EXTENSIONS: dict[str, str] = {
    ".jpeg": "image/jpeg",
    ".jpg": "image/jpeg",
    ".png": "image/png",
    ".gif": "image/gif",
}

DEFAULT_MAX_IMAGE_BYTES = 5120 * 1024


def extract_extension(filename: str) -> str:
    """Extract the lowercase file extension including the dot.

    Args:
        filename: The filename to extract from.

    Returns:
        The lowercase extension (e.g., ".png") or empty string if none.
    """
    name = filename.replace("\\", "/").rsplit("/", 1)[-1]
    dot_idx = name.rfind(".")
    if dot_idx <= 0:
        return ""
    return name[dot_idx:].lower()


def validate_image_content_type(content_type: str) -> bool:
    """Check whether a MIME type is an allowed image type.

    Args:
        content_type: The MIME type string, parameters are ignored.

    Returns:
        True if the content type is allowed, False otherwise.
    """
    return content_type.split(";")[0].strip().lower() in ALLOWED_MIME_TYPES


def validate_image_extension(filename: str) -> bool:
    """Check whether a filename has an allowed image extension.

    Args:
        filename: The original filename to validate.

    Returns:
        True if the file extension is allowed, False otherwise.
    """
    return extract_extension(filename) in ALLOWED_EXTENSIONS


def validate_image_size(size: int, max_bytes: int = DEFAULT_MAX_IMAGE_BYTES) -> bool:
    """Check that an upload does not exceed ``max_bytes``."""
    return 0 <= size <= max_bytes


def get_allowed_extensions_display() -> str:
    """Return a human-readable string of allowed image extensions.

    Returns:
        Comma-separated list of allowed extensions without dots.
    """
    return ", ".join(ext.lstrip(".") for ext in ALLOWED_EXTENSIONS)
