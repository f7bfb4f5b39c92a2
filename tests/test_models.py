import pytest
from pydantic import ValidationError

from option_classification.enums import OptionExercise, OptionMoneyness, OptionStyle, OptionType
from option_classification.models import OptionClassification

# --- Fixtures ---


@pytest.fixture
def sample_payload():
    return {"option_type": "call", "option_style": "european", "option_exercise": "short", "moneyness": "ATM"}


# --- Model Tests ---


def test_classification_from_tokens(sample_payload):
    """Tokens are validated into enum members."""
    c = OptionClassification(**sample_payload)
    assert c.option_type is OptionType.CALL
    assert c.option_style is OptionStyle.EUROPEAN
    assert c.option_exercise is OptionExercise.SHORT
    assert c.moneyness is OptionMoneyness.AT_THE_MONEY


def test_classification_rejects_wrong_case(sample_payload):
    sample_payload["option_type"] = "CALL"
    with pytest.raises(ValidationError) as excinfo:
        OptionClassification(**sample_payload)
    assert "option_type" in str(excinfo.value)


def test_classification_missing_field(sample_payload):
    del sample_payload["moneyness"]
    with pytest.raises(ValidationError) as excinfo:
        OptionClassification(**sample_payload)
    assert "moneyness" in str(excinfo.value)


def test_classification_is_frozen(sample_payload):
    c = OptionClassification(**sample_payload)
    with pytest.raises(ValidationError):
        c.option_type = OptionType.PUT


def test_classification_ignores_extra_keys(sample_payload):
    c = OptionClassification(**sample_payload, strike=100.0)
    assert not hasattr(c, "strike")


def test_classification_serializes_tokens(sample_payload):
    """Serialization check: JSON carries the bare tokens."""
    c = OptionClassification(**sample_payload)
    json_str = c.model_dump_json()
    assert '"option_type":"call"' in json_str
    assert '"moneyness":"ATM"' in json_str
    assert OptionClassification.model_validate_json(json_str) == c


def test_classification_rejects_bytes_token(sample_payload):
    sample_payload["moneyness"] = b"ATM"
    with pytest.raises(ValidationError) as excinfo:
        OptionClassification(**sample_payload)
    assert "moneyness" in str(excinfo.value)
