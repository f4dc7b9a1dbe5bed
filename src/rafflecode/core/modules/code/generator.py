"""Random code generation."""

import secrets
import string

from rafflecode.core.modules.code.models import CodeType

CHARSETS: dict[CodeType, str] = {
    CodeType.ALPHABETIC: string.ascii_uppercase,
    CodeType.ALPHANUMERIC: string.ascii_uppercase + string.digits,
}


def generate_random_string(charset: str, length: int) -> str:
    """Return a random string of the given length drawn from charset."""
    if not charset:
        raise ValueError("Charset must not be empty")
    return "".join(secrets.choice(charset) for _ in range(length))


def generate_code(code_type: CodeType, length: int = 7) -> str:
    """Generate an uppercase code for the given type."""
    return generate_random_string(CHARSETS[code_type], length).upper()
