# src/option_classification/models.py

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from .enums import OptionExercise, OptionMoneyness, OptionStyle, OptionType

# --- Base Configuration ---


class AppBaseModel(BaseModel):
    """Base model for all classification data contracts."""

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",  # Unknown keys from upstream payloads are dropped, not rejected
    )


# --- Classification Models ---


class OptionClassification(AppBaseModel):
    """
    The four independent classifications of a single option contract.
    Each field is assigned on its own; there is no transition between members.
    """

    option_type: OptionType = Field(..., description="'call' or 'put'.")
    option_style: OptionStyle = Field(..., description="'american' or 'european'.")
    option_exercise: OptionExercise = Field(..., description="'long' or 'short'.")
    moneyness: OptionMoneyness = Field(..., description="'ITM', 'OTM' or 'ATM', computed upstream.")

    model_config = ConfigDict(frozen=True)

    @field_validator("option_type", "option_style", "option_exercise", "moneyness", mode="before")
    @classmethod
    def _require_exact_token(cls, value: Any, info: ValidationInfo) -> Any:
        # Lax enum validation would otherwise coerce bytes and str subclasses.
        enum_cls = cls.model_fields[info.field_name].annotation
        if not enum_cls.is_raw_token(value):
            raise ValueError(f"expected a plain str token, got {type(value).__name__}")
        return value
