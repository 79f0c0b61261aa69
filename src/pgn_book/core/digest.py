"""
Content digest for raw game records.
"""

import base64
import hashlib


def content_digest(raw_text: str) -> str:
    """
    Stable identity for a game record.

    SHA-256 of the UTF-8 bytes, standard base64 encoded (44 chars).
    Used as the primary key of stored games, so changing it
    invalidates every existing database.
    """
    digest = hashlib.sha256(raw_text.encode("utf-8")).digest()
    return base64.b64encode(digest).decode("ascii")
