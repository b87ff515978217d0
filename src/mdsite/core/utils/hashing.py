"""SHA-256 hashing of raw content files"""

import hashlib


def sha256(content: str) -> str:
    """Return the hex SHA-256 of a source file's full text, front matter included."""
    return hashlib.sha256(content.encode("utf-8")).hexdigest()
