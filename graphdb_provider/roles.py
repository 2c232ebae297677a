"""
Mapping between user roles and GraphDB authority strings.

GraphDB stores a user's role as a granted authority such as
``ROLE_REPO_MANAGER``; resources expose the hyphenated role name
(``repo-manager``). Only the first underscore separates the ``ROLE`` prefix,
and only the first underscore of the remainder becomes a hyphen again.
"""

from collections.abc import Sequence

from graphdb_provider.exceptions import ValidationError

ROLES = ("user", "repo-manager", "admin")

AUTHORITY_PREFIX = "ROLE_"


def role_to_authority(role: str) -> str:
    """
    Encode a role name as a GraphDB authority.

    Example:
        ```python
        role_to_authority("repo-manager")  # "ROLE_REPO_MANAGER"
        ```

    Raises:
        ValidationError: If role is not one of ROLES
    """
    if role not in ROLES:
        raise ValidationError(
            f"Unsupported role {role!r}. Must be one of: {', '.join(ROLES)}"
        )
    return AUTHORITY_PREFIX + role.upper().replace("-", "_", 1)


def authority_to_role(authority: str) -> str:
    """
    Decode a GraphDB authority into a role name.

    Raises:
        ValidationError: If the authority is not a string or has no prefix separator
    """
    if not isinstance(authority, str):
        raise ValidationError(f"Unsupported authority {authority!r}")
    parts = authority.split("_", 1)
    if len(parts) < 2:
        raise ValidationError(f"Unsupported authority {authority}")
    return parts[1].lower().replace("_", "-", 1)


def role_from_authorities(authorities: Sequence[str]) -> str:
    """Decode the role from the first (authoritative) granted authority."""
    if not authorities:
        raise ValidationError("User has no granted authorities")
    return authority_to_role(authorities[0])
