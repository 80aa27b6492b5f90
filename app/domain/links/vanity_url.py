"""
Vanity URL policy.

A vanity URL is the public lookup key of a bundle: one or more
slash-separated segments of word characters and hyphens, always stored
lowercase. Callers may choose one; otherwise a short random code is
generated.
"""

import re
import secrets
import string
from typing import Optional

VANITY_URL_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits
GENERATED_VANITY_URL_LENGTH = 7
VANITY_URL_PATTERN = re.compile(r"([\w-])+(/([\w-])+)*", re.IGNORECASE)
# First segment owned by the per-user listing route (/links/user/{user_id}).
RESERVED_PREFIX = "user/"


def generate_vanity_url(length: int = GENERATED_VANITY_URL_LENGTH) -> str:
    """Return a random code drawn uniformly from the 62-character alphabet.

    ``secrets.choice`` uses the OS CSPRNG and rejection sampling, so every
    character is equally likely.
    """
    return "".join(secrets.choice(VANITY_URL_ALPHABET) for _ in range(length))


def assign_vanity_url(requested: Optional[str]) -> str:
    """Return the vanity URL a new bundle will be stored under.

    Blank or missing values are replaced by a generated code. The result
    is always lowercased; it is not validated here.
    """
    if requested is None or not requested.strip():
        requested = generate_vanity_url()
    return requested.lower()


def normalize_vanity_url(vanity_url: str) -> str:
    """Normalize a lookup key to the stored form."""
    return vanity_url.lower()


def is_valid_vanity_url(vanity_url: str) -> bool:
    """Return True if the value matches the vanity URL pattern.

    Values under the reserved ``user/`` prefix are rejected; that path
    belongs to the per-user listing.
    """
    if vanity_url.lower().startswith(RESERVED_PREFIX):
        return False
    return VANITY_URL_PATTERN.fullmatch(vanity_url) is not None
