"""Record ID generation.

This module centralizes record ID generation. IDs are 15 character strings
of lowercase letters and digits, the shape record stores of this kind use for
their primary keys.
"""

import secrets
import string

ID_ALPHABET = string.ascii_lowercase + string.digits
ID_LENGTH = 15


def generate_id() -> str:
    """Generate a random record ID."""
    return "".join(secrets.choice(ID_ALPHABET) for _ in range(ID_LENGTH))
