"""
Property-based tests for the role/authority mapping.

Feature: graphdb-provider
"""

import string

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from graphdb_provider.exceptions import ValidationError
from graphdb_provider.roles import (
    ROLES,
    authority_to_role,
    role_from_authorities,
    role_to_authority,
)

role_strategy = st.sampled_from(ROLES)
segment_strategy = st.text(
    min_size=1,
    max_size=10,
    alphabet=string.ascii_uppercase + string.digits,
)


@given(role=role_strategy)
@settings(max_examples=20)
def test_role_round_trip(role: str) -> None:
    """Decoding an encoded role gives back the role."""
    assert authority_to_role(role_to_authority(role)) == role


@given(role=role_strategy)
@settings(max_examples=20)
def test_encoded_role_has_prefix_and_no_hyphen(role: str) -> None:
    authority = role_to_authority(role)
    assert authority.startswith("ROLE_")
    assert "-" not in authority
    assert authority == authority.upper()


@pytest.mark.parametrize(
    ("role", "authority"),
    [
        ("user", "ROLE_USER"),
        ("repo-manager", "ROLE_REPO_MANAGER"),
        ("admin", "ROLE_ADMIN"),
    ],
)
def test_known_roles(role: str, authority: str) -> None:
    assert role_to_authority(role) == authority
    assert authority_to_role(authority) == role


def test_authority_without_separator_is_rejected() -> None:
    with pytest.raises(ValidationError) as exc_info:
        authority_to_role("ROLEZ")

    assert "ROLEZ" in str(exc_info.value)
    assert exc_info.value.code == "VALIDATION_ERROR"


def test_only_first_underscores_are_rewritten() -> None:
    assert authority_to_role("ROLE_A_B_C") == "a-b_c"
    assert authority_to_role("READ_REPO_SYSTEM") == "repo-system"


@given(first=segment_strategy, second=segment_strategy, third=segment_strategy)
@settings(max_examples=100)
def test_extra_underscores_pass_through(first: str, second: str, third: str) -> None:
    """Only the first underscore of the remainder becomes a hyphen."""
    role = authority_to_role(f"ROLE_{first}_{second}_{third}")
    assert role == f"{first}-{second}_{third}".lower()


def test_unknown_role_is_rejected() -> None:
    with pytest.raises(ValidationError) as exc_info:
        role_to_authority("invalid")

    assert "invalid" in exc_info.value.message


def test_role_from_authorities_uses_first_element() -> None:
    assert role_from_authorities(["ROLE_ADMIN", "ROLE_USER"]) == "admin"


def test_role_from_empty_authorities_is_an_error() -> None:
    with pytest.raises(ValidationError):
        role_from_authorities([])
