"""Tests for slug and username derivation."""

import pytest

from avni_mcp.naming import qualified_username, slugify, username_prefix


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("Care Foundation", "care_foundation"),
        ("Care   Foundation", "care_foundation"),
        ("Rural\tHealth \n Trust", "rural_health_trust"),
        ("  Padded  ", "_padded_"),
        ("single", "single"),
        ("", ""),
    ],
)
def test_slugify(name: str, expected: str) -> None:
    assert slugify(name) == expected


@pytest.mark.parametrize(
    ("first_name", "expected"),
    [
        ("Jo", "jo"),
        ("Anna", "anna"),
        ("Priyanka", "priy"),
        ("ALEXANDER", "alex"),
    ],
)
def test_username_prefix(first_name: str, expected: str) -> None:
    assert username_prefix(first_name) == expected


def test_qualified_username() -> None:
    assert qualified_username("jo", "Care Foundation") == "jo@care_foundation"
