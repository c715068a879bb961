"""Password hashing helpers (bcrypt)."""

import bcrypt

# Prefixes emitted by the bcrypt family of implementations
_BCRYPT_PREFIXES = ("$2a$", "$2b$", "$2y$")

# bcrypt refuses longer inputs
MAX_PASSWORD_BYTES = 72


def is_hashed(password: str) -> bool:
    """Check whether a password is already a bcrypt hash."""
    return password.startswith(_BCRYPT_PREFIXES)


def fits_bcrypt(password: str) -> bool:
    """Check that the UTF-8 encoded password is within bcrypt's input limit."""
    return len(password.encode("utf-8")) <= MAX_PASSWORD_BYTES


def hash_password(password: str) -> str:
    """Hash a plain-text password with a fresh salt.

    Args:
        password: Plain-text password

    Returns:
        bcrypt hash as a string
    """
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=10)).decode(
        "utf-8"
    )


def ensure_hashed(password: str) -> str:
    """Hash the password unless it already is a bcrypt hash."""
    if is_hashed(password):
        return password
    return hash_password(password)


def verify_password(password: str, hashed: str) -> bool:
    """Check a plain-text password against a stored hash."""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        # Stored value is not a valid bcrypt hash
        return False
