"""Naming conventions Avni expects for derived identifiers.

An organisation's display name is turned into a "slug" that Avni uses as
its database user, schema name, media directory and username suffix.
Usernames always take the form ``<prefix>@<org slug>``.
"""

from __future__ import annotations

import re

_WHITESPACE_RUN = re.compile(r"\s+")

# Avni usernames use at most this many characters of the first name.
USERNAME_PREFIX_LENGTH = 4


def slugify(name: str) -> str:
    """Lowercase ``name`` and collapse each run of whitespace to ``_``.

    >>> slugify("Care  Foundation")
    'care_foundation'
    """
    return _WHITESPACE_RUN.sub("_", name.lower())


def username_prefix(first_name: str) -> str:
    """First (up to) four characters of ``first_name``, lowercased."""
    return first_name[:USERNAME_PREFIX_LENGTH].lower()


def qualified_username(username: str, org_name: str) -> str:
    """Append the organisation's slug: ``jo`` + ``Care Foundation`` -> ``jo@care_foundation``."""
    return f"{username}@{slugify(org_name)}"
