"""Content-Type and Content-Encoding inference for local assets."""

import mimetypes

# Precompressed asset suffixes and the Content-Encoding they are served with.
COMPRESSION_SUFFIXES: dict[str, str] = {
    ".gz": "gzip",
    ".br": "br",
    ".zz": "deflate",
}


def infer_content_encoding(filename: str) -> tuple[str | None, str]:
    """Split a recognized compression suffix off ``filename``.

    Returns:
        (encoding, name without the suffix). Unrecognized names come back
        unchanged with no encoding.
    """
    for suffix, encoding in COMPRESSION_SUFFIXES.items():
        if filename.endswith(suffix) and len(filename) > len(suffix):
            return encoding, filename[: -len(suffix)]
    return None, filename


def infer_content_type(filename: str) -> str | None:
    """Guess the MIME type from the file extension."""
    content_type, _ = mimetypes.guess_type(filename, strict=False)
    return content_type


def infer_headers(filename: str) -> tuple[str | None, str | None]:
    """Return (content_type, content_encoding) for an asset file name.

    For compressed assets the type comes from the name with the compression
    suffix stripped, so ``app.js.gz`` is served as JavaScript with gzip encoding.
    """
    encoding, stripped = infer_content_encoding(filename)
    return infer_content_type(stripped), encoding
