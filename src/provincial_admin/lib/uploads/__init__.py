"""Profile image upload library: validation and flat local storage.

Public API:
    - ``ImageUpload``: An uploaded file (bytes, filename, MIME type)
    - ``ImageStorage``: Protocol for image storage backends
    - ``LocalImageStorage``: Flat local directory storage
    - ``generate_stored_name``: Random 20-character stored filename
    - ``validate_image_content_type``: Check if a MIME type is allowed
    - ``validate_image_extension``: Check if a filename extension is allowed
    - ``validate_image_size``: Check an upload against the size limit
    - ``get_allowed_extensions_display``: Human-readable list of allowed extensions
"""

from provincial_admin.lib.uploads.storage import (
    STORED_NAME_LENGTH,
    ImageStorage,
    ImageUpload,
    LocalImageStorage,
    generate_stored_name,
)
from provincial_admin.lib.uploads.validators import (
    ALLOWED_EXTENSIONS,
    ALLOWED_MIME_TYPES,
    DEFAULT_MAX_IMAGE_BYTES,
    extract_extension,
    get_allowed_extensions_display,
    validate_image_content_type,
    validate_image_extension,
    validate_image_size,
)

__all__ = [
    "ALLOWED_EXTENSIONS",
    "ALLOWED_MIME_TYPES",
    "DEFAULT_MAX_IMAGE_BYTES",
    "STORED_NAME_LENGTH",
    "ImageStorage",
    "ImageUpload",
    "LocalImageStorage",
    "extract_extension",
    "generate_stored_name",
    "get_allowed_extensions_display",
    "validate_image_content_type",
    "validate_image_extension",
    "validate_image_size",
]
