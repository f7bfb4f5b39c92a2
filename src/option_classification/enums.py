# src/option_classification/enums.py

# --- Built Ins  ---
from enum import Enum


class TokenEnum(str, Enum):
    """
    Base for string-backed classification vocabularies.
    Members render as their bare wire token in logs and f-strings.
    """

    def __str__(self) -> str:
        return self.value

    def __format__(self, format_spec: str) -> str:
        return self.value.__format__(format_spec)

    @classmethod
    def is_raw_token(cls, value: object) -> bool:
        """Only members of this vocabulary or plain str qualify; str subclasses and bytes do not."""
        return isinstance(value, cls) or type(value) is str


class OptionType(TokenEnum):
    """Right to buy (call) or sell (put) the underlying at the strike."""

    CALL = "call"
    PUT = "put"


class OptionStyle(TokenEnum):
    """
    Exercise timing.
    American options can be exercised any time up to expiry, European only at expiry.
    """

    AMERICAN = "american"
    EUROPEAN = "european"


class OptionExercise(TokenEnum):
    """Holder's position: long holds the right, short wrote the obligation."""

    LONG = "long"
    SHORT = "short"


class OptionMoneyness(TokenEnum):
    """
    Strike relative to the current underlying price.
    Computed upstream from strike, spot and type; carried here only as a value.
    """

    IN_THE_MONEY = "ITM"
    OUT_OF_THE_MONEY = "OTM"
    AT_THE_MONEY = "ATM"
