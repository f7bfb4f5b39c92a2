# src/option_classification/exceptions.py

# --- Built Ins  ---
from typing import Any


class InvalidClassificationToken(ValueError):
    """
    Raised when an incoming token is not a member of the expected vocabulary.
    Carries the failing field, the raw token and the legal token set.
    """

    def __init__(self, token: Any, allowed: frozenset[str], field: str | None = None):
        self.token = token
        self.allowed = allowed
        self.field = field
        where = f" for field '{field}'" if field else ""
        super().__init__(f"Invalid token {token!r}{where}. Expected one of: {', '.join(sorted(allowed))}")
