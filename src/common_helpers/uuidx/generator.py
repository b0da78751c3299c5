"""Random (version 4) UUID generation."""

from __future__ import annotations

import uuid
from uuid import UUID


def generate_new_v4() -> UUID:
    """
    Generate a new random RFC 4122 version 4 UUID.

    Values carry no ordering or determinism guarantees and must not be used
    for content addressing.
    """
    return uuid.uuid4()
