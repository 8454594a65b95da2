"""Classification of user identifiers into id or username lookups."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum

_SIGNED_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


class IdentifierKind(StrEnum):
    """How a user identifier is matched against the user table."""

    USER_ID = "user_id"
    USERNAME = "username"


@dataclass(frozen=True)
class UserIdentifier:
    """One user identifier with its resolved lookup column."""

    value: str
    kind: IdentifierKind

    @property
    def column(self) -> str:
        """Return the column the update statement filters on."""

        return self.kind.value


def classify_user_identifier(value: str) -> UserIdentifier:
    """Classify `value` as a numeric user id when it fits a signed 32-bit integer."""

    if _is_int32(value):
        return UserIdentifier(value=value, kind=IdentifierKind.USER_ID)
    return UserIdentifier(value=value, kind=IdentifierKind.USERNAME)


def _is_int32(value: str) -> bool:
    # int() also accepts whitespace, underscores and non-ASCII digits.
    if not _SIGNED_INT_PATTERN.fullmatch(value):
        return False
    return _INT32_MIN <= int(value) <= _INT32_MAX
