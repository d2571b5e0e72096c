"""
Password policy: strength validation, deterministic default passwords and random generation.
All functions are pure; generation draws from the OS CSPRNG.
"""

import re
import secrets
import string
from typing import Optional

from procurex_auth.config.settings import settings
from procurex_auth.core.exceptions import InvalidLengthError, WeakPasswordError

UPPERCASE = string.ascii_uppercase
LOWERCASE = string.ascii_lowercase
DIGITS = string.digits
SPECIAL_CHARACTERS = "@$!%*?&"
CHARSET = UPPERCASE + LOWERCASE + DIGITS + SPECIAL_CHARACTERS

MIN_LENGTH = 8
MIN_GENERATED_LENGTH = 4  # one character per required class
DEFAULT_PASSWORD_SUFFIX = "123!"

STRENGTH_PATTERN = re.compile(
    r"(?=.*[a-z])(?=.*[A-Z])(?=.*[0-9])(?=.*[@$!%*?&])[A-Za-z0-9@$!%*?&]{8,}"
)
NON_LETTERS = re.compile(r"[^a-zA-Z]")

STRENGTH_RULES = (
    f"at least {MIN_LENGTH} characters, one uppercase letter, one lowercase letter, "
    f"one digit and one special character ({SPECIAL_CHARACTERS}), "
    f"using only letters, digits and those special characters"
)

_random = secrets.SystemRandom()


def validate_strength(password: str) -> bool:
    if not isinstance(password, str):
        return False
    return STRENGTH_PATTERN.fullmatch(password) is not None


def ensure_strength(password: str) -> str:
    """Raise WeakPasswordError unless the password satisfies the policy"""
    if not validate_strength(password):
        raise WeakPasswordError(f"Password must contain {STRENGTH_RULES}")
    return password


def _letters(value: str, limit: int) -> str:
    return NON_LETTERS.sub("", value or "")[:limit]


def derive_default_password(company_name: str, email_domain_hint: Optional[str] = None) -> str:
    """
    Default password for a company: its first 8 letters plus "123!".
    email_domain_hint is accepted for call compatibility and does not affect the result.
    """
    return f"{_letters(company_name, 8)}{DEFAULT_PASSWORD_SUFFIX}"


def derive_user_default_password(user, tenant) -> str:
    """
    Predictable initial password for a new account:
    6 letters of the tenant's company name, 3 letters of the user's first name, "123!".
    """
    return (
        f"{_letters(tenant.company_name, 6)}"
        f"{_letters(user.first_name, 3)}"
        f"{DEFAULT_PASSWORD_SUFFIX}"
    )


def generate_secure_password(length: Optional[int] = None) -> str:
    if length is None:
        length = settings.default_password_length
    if length < MIN_GENERATED_LENGTH:
        raise InvalidLengthError(length, MIN_GENERATED_LENGTH)

    characters = [
        _random.choice(UPPERCASE),
        _random.choice(LOWERCASE),
        _random.choice(DIGITS),
        _random.choice(SPECIAL_CHARACTERS),
    ]
    characters.extend(_random.choice(CHARSET) for _ in range(length - MIN_GENERATED_LENGTH))

    # Fisher-Yates, uniform over permutations
    _random.shuffle(characters)
    return "".join(characters)
