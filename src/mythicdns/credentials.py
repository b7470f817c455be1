"""Parsing of the zone/password credential list."""

from collections.abc import Mapping
from types import MappingProxyType

from mythicdns.exceptions import FormatError

_FORMAT_HINT = "Please ensure you are using the correct format 'example.com mypassword'"


def parse_passwords(passwords: str) -> Mapping[str, str]:
    """Split space separated zone/password pairs into a read-only map.

    Tokens are split on single spaces, so ``"a  b"`` yields an empty
    middle token. Zones and passwords are not validated. When a zone is
    listed twice the last password wins.

    Args:
        passwords: String of the form ``"<zone1> <password1> <zone2> <password2>"``.

    Returns:
        Read-only mapping of zone name to API password.

    Raises:
        FormatError: If the string is empty or has an uneven number of parts.
    """
    if passwords == "":
        raise FormatError(f"Mythic Beasts API passwords are empty. {_FORMAT_HINT}")

    parts = passwords.split(" ")
    if len(parts) % 2 != 0:
        raise FormatError(
            f"Error parsing Mythic Beasts API passwords. Uneven number of parts. {_FORMAT_HINT}"
        )

    results: dict[str, str] = {}
    for i in range(0, len(parts), 2):
        results[parts[i]] = parts[i + 1]

    return MappingProxyType(results)
