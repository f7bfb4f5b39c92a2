# src/option_classification/parsing.py

# --- Built Ins  ---
from collections.abc import Mapping
from typing import Any, TypeVar

# --- Installed  ---
from loguru import logger as log
from pydantic import ValidationError

# --- Local Application Imports ---
from option_classification.enums import TokenEnum
from option_classification.exceptions import InvalidClassificationToken
from option_classification.models import OptionClassification

E = TypeVar("E", bound=TokenEnum)


def wire_tokens(enum_cls: type[TokenEnum]) -> frozenset[str]:
    """The exact set of legal tokens for one vocabulary."""
    return frozenset(member.value for member in enum_cls)


def parse_token(enum_cls: type[E], token: Any, field: str | None = None) -> E:
    """
    Decodes a raw wire token into a member of `enum_cls`.
    Matching is exact and case-sensitive; nothing is coerced to a nearby value.
    """
    if enum_cls.is_raw_token(token):
        try:
            return enum_cls(token)
        except ValueError:
            pass

    allowed = wire_tokens(enum_cls)
    log.warning(f"Rejected {enum_cls.__name__} token {token!r} (field={field}). Allowed: {sorted(allowed)}")
    raise InvalidClassificationToken(token, allowed, field=field)


def to_token(member: TokenEnum) -> str:
    """Encodes a member into its wire token."""
    return member.value


def parse_classification(payload: Mapping[str, Any]) -> OptionClassification:
    """
    Validates a wire payload into a frozen OptionClassification.
    Pydantic errors are reported as InvalidClassificationToken for the first failing field.
    """
    if not isinstance(payload, Mapping):
        raise TypeError(f"Classification payload must be a mapping, got {type(payload).__name__}")

    try:
        classification = OptionClassification.model_validate(dict(payload))
    except ValidationError as e:
        first = e.errors()[0]
        field = str(first["loc"][0]) if first["loc"] else None
        raw = payload.get(field) if field else None
        enum_cls = OptionClassification.model_fields[field].annotation if field else None
        allowed = wire_tokens(enum_cls) if enum_cls else frozenset()
        log.warning(f"Rejected classification payload: field={field} token={raw!r} ({first['type']})")
        raise InvalidClassificationToken(raw, allowed, field=field) from e

    log.debug(
        f"Decoded classification {classification.option_type}/{classification.option_style}/"
        f"{classification.option_exercise}/{classification.moneyness}"
    )
    return classification


def to_wire(classification: OptionClassification) -> dict[str, str]:
    """Encodes a classification record into its token dictionary."""
    return classification.model_dump(mode="json")
