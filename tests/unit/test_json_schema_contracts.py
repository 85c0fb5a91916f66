"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидаторов:
- Валидность самой схемы
- Валидация правильных данных
- Детекция нарушений required полей
- Детекция нарушений типов
- Детекция нарушений constraints (minimum/pattern)
- Интеграция с Pydantic моделью Wallet
"""

import json
from pathlib import Path

import pytest
from jsonschema import ValidationError

from src.core.contracts import SchemaLoader, WalletValidator, validate_wallet
from src.core.domain import Decimal, Wallet


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_wallet():
    """Валидный сериализованный wallet для тестирования."""
    return {
        "id": 42,
        "name": "Main",
        "description": "Everyday spending",
        "currency": "USD",
        "amount": "-0.99",
        "personal": True,
        "created_at": "2024-05-01T12:30:00Z",
        "updated_at": "2024-05-02T08:00:00Z",
        "deleted_at": None,
    }


# =============================================================================
# TESTS - SCHEMA LOADING
# =============================================================================


def test_schema_loader_loads_wallet_schema():
    """Проверка загрузки схемы wallet."""
    loader = SchemaLoader()
    schema = loader.load_schema("wallet")

    assert schema["title"] == "Wallet"
    number_form, text_form = schema["$defs"]["decimal"]["anyOf"]
    assert number_form == {"type": "number"}
    assert text_form["pattern"] == r"^-?[0-9]+\.[0-9]{2}$"


def test_schema_loader_default_dir_is_inside_package():
    """Схемы поставляются вместе с пакетом src.core.contracts."""
    import src.core.contracts as contracts

    loader = SchemaLoader()
    package_dir = Path(contracts.__file__).parent

    assert (package_dir / "schema" / "wallet.json").is_file()
    assert loader.load_schema("wallet")["title"] == "Wallet"


def test_schema_loader_caches_schemas():
    """Проверка кэширования схем."""
    loader = SchemaLoader()

    schema1 = loader.load_schema("wallet")
    schema2 = loader.load_schema("wallet")

    # Должен вернуть тот же объект (кэш)
    assert schema1 is schema2


def test_schema_loader_raises_on_missing_schema():
    """Проверка ошибки при отсутствующей схеме."""
    loader = SchemaLoader()

    with pytest.raises(FileNotFoundError):
        loader.load_schema("non_existent_schema")


def test_schema_loader_rejects_invalid_schema(tmp_path):
    """Невалидная JSON Schema отклоняется при загрузке."""
    (tmp_path / "broken.json").write_text(json.dumps({"type": 42}), encoding="utf-8")
    loader = SchemaLoader(schema_dir=tmp_path)

    with pytest.raises(ValueError, match="Invalid JSON Schema"):
        loader.load_schema("broken")


def test_schema_loader_rejects_missing_dir(tmp_path):
    with pytest.raises(RuntimeError, match="Schema directory not found"):
        SchemaLoader(schema_dir=tmp_path / "missing")


# =============================================================================
# TESTS - WALLET VALIDATION
# =============================================================================


def test_wallet_validator_accepts_valid_data(valid_wallet):
    """Валидация правильного wallet."""
    validator = WalletValidator()
    validator.validate(valid_wallet)  # Не должно выбросить исключение
    assert validator.is_valid(valid_wallet)


def test_wallet_validate_function(valid_wallet):
    """Проверка функции validate_wallet."""
    validate_wallet(valid_wallet)


def test_wallet_rejects_missing_required_field(valid_wallet):
    """Валидация отклоняет данные без обязательных полей."""
    data = valid_wallet.copy()
    del data["amount"]

    with pytest.raises(ValidationError) as exc_info:
        validate_wallet(data)
    assert "'amount' is a required property" in str(exc_info.value)


def test_wallet_rejects_wrong_type(valid_wallet):
    """Валидация отклоняет неправильный тип данных."""
    data = valid_wallet.copy()
    data["id"] = "not_an_integer"

    with pytest.raises(ValidationError) as exc_info:
        validate_wallet(data)
    assert "is not of type 'integer'" in str(exc_info.value)


def test_wallet_rejects_negative_id(valid_wallet):
    data = valid_wallet.copy()
    data["id"] = -1

    with pytest.raises(ValidationError):
        validate_wallet(data)


def test_wallet_rejects_unknown_field(valid_wallet):
    data = valid_wallet.copy()
    data["balance"] = "1.00"

    with pytest.raises(ValidationError):
        validate_wallet(data)


@pytest.mark.parametrize(
    "amount", ["0.00", "-0.99", "99.99", "-92233720368547757.99", -0.99, 99, 99.99]
)
def test_wallet_accepts_canonical_amounts(valid_wallet, amount):
    data = valid_wallet.copy()
    data["amount"] = amount

    validate_wallet(data)


@pytest.mark.parametrize("amount", ["99", "99.9", "99.999", "+1.00", "1,00", None, True])
def test_wallet_rejects_non_canonical_amounts(valid_wallet, amount):
    """Строковый amount в контракте имеет строго две цифры после точки."""
    data = valid_wallet.copy()
    data["amount"] = amount

    with pytest.raises(ValidationError):
        validate_wallet(data)


def test_wallet_iter_errors_reports_all_violations(valid_wallet):
    data = valid_wallet.copy()
    data["amount"] = "1.5"
    data["currency"] = ""

    errors = list(WalletValidator().iter_errors(data))
    assert len(errors) == 2


# =============================================================================
# TESTS - PYDANTIC MODEL INTEGRATION
# =============================================================================


@pytest.mark.parametrize("amount", [0, -99, 9999, -9223372036854775799, 9223372036854775799])
def test_wallet_model_generates_valid_json(amount):
    """Проверка, что Pydantic Wallet модель генерирует валидный JSON."""
    wallet = Wallet(
        id=7,
        name="Savings",
        description=None,
        currency="EUR",
        amount=Decimal(amount),
        personal=False,
        created_at="2024-05-01T12:30:00Z",
        updated_at="2024-05-01T12:30:00Z",
    )

    data = json.loads(wallet.model_dump_json())

    validate_wallet(data)
    assert Decimal.parse(data["amount"]) == amount


def test_contract_payload_loads_into_model(valid_wallet):
    """Данные, прошедшие контракт, принимаются моделью Wallet."""
    validate_wallet(valid_wallet)

    wallet = Wallet.model_validate(valid_wallet)
    assert wallet.amount == -99


@pytest.mark.parametrize("amount", [0, -99, 9900, -9223372036854775799, 9223372036854775799])
def test_wallet_to_json_is_valid_contract(amount):
    """to_json() с голым числовым amount проходит контракт."""
    wallet = Wallet(
        id=7,
        name="Savings",
        currency="EUR",
        amount=Decimal(amount),
        created_at="2024-05-01T12:30:00Z",
        updated_at="2024-05-01T12:30:00Z",
    )
    body = wallet.to_json()

    validate_wallet(json.loads(body))
    data = json.loads(body, parse_float=Decimal.from_json, parse_int=Decimal.from_json)
    assert data["amount"] == amount
