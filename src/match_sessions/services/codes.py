"""Secret code generation."""

import secrets
import string

CODE_ALPHABET = string.ascii_lowercase + string.digits
DEFAULT_CODE_LENGTH = 8
PRIVATE_CODE_LENGTH = 10


def generate_code(length: int = DEFAULT_CODE_LENGTH) -> str:
    """Return a random base-36 token of the given length."""
    if length <= 0:
        raise ValueError("Code length must be positive")
    return "".join(secrets.choice(CODE_ALPHABET) for _ in range(length))
