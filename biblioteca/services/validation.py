"""Input validation rules for user accounts."""

import re

EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")

PASSWORD_SYMBOLS = "@$!%*#?&"
PASSWORD_MIN_LENGTH = 8
MAX_REPEATED_CHARS = 2

_LOWERCASE = re.compile(r"[a-z]")
_UPPERCASE = re.compile(r"[A-Z]")
_DIGIT = re.compile(r"[0-9]")
_SYMBOL = re.compile(f"[{re.escape(PASSWORD_SYMBOLS)}]")


def is_valid_email(email: str) -> bool:
    """Check that the whole string looks like local-part@domain.tld."""
    return EMAIL_PATTERN.fullmatch(email) is not None


def has_repeated_run(value: str, limit: int = MAX_REPEATED_CHARS) -> bool:
    """Return True if any character appears more than `limit` times in a row."""
    run = 1
    for previous, current in zip(value, value[1:]):
        run = run + 1 if current == previous else 1
        if run > limit:
            return True
    return False


def is_valid_password(password: str) -> bool:
    """Check password strength.

    A strong password has at least one lowercase letter, one uppercase
    letter, one digit and one of ``@$!%*#?&``, is at least 8 characters
    long and never repeats the same character three times in a row.
    Rules are checked in that order and the first failure returns False.
    """
    if not _LOWERCASE.search(password):
        return False
    if not _UPPERCASE.search(password):
        return False
    if not _DIGIT.search(password):
        return False
    if not _SYMBOL.search(password):
        return False
    if len(password) < PASSWORD_MIN_LENGTH:
        return False
    return not has_repeated_run(password)
