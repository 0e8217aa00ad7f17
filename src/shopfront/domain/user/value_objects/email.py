"""Email value object."""

import re
from dataclasses import dataclass

from shopfront.domain.user.exceptions import InvalidEmailError

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
MAX_EMAIL_LENGTH = 254


@dataclass(frozen=True)
class Email:
    """A normalised (trimmed, lowercase) email address."""

    value: str

    def __post_init__(self) -> None:
        normalized = self.value.strip().lower() if self.value else ""
        if not normalized:
            msg = "Email cannot be empty"
            raise InvalidEmailError(msg)
        if len(normalized) > MAX_EMAIL_LENGTH:
            msg = f"Email cannot exceed {MAX_EMAIL_LENGTH} characters"
            raise InvalidEmailError(msg)
        if not _EMAIL_PATTERN.match(normalized):
            msg = f"Invalid email format: {self.value}"
            raise InvalidEmailError(msg)
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value
