"""
Wallet — Модель кошелька

Immutable Pydantic модель кошелька. Единственное денежное поле amount
типа Decimal; при валидации оно разбирается из текстовой формы или из
голого JSON-числа. to_json() выводит его голым числом (-0.99),
model_dump_json() выводит каноническую строку ("-0.99").
"""

import json
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from src.core.domain.money import Decimal


# =============================================================================
# WALLET MODEL
# =============================================================================


class Wallet(BaseModel):
    """
    Модель кошелька.

    Immutable модель (frozen=True). Изменение кошелька создаёт новый экземпляр.
    """

    # Идентификация
    id: int = Field(..., ge=0, description="Идентификатор кошелька")
    name: str = Field(..., min_length=1, description="Название кошелька")
    description: Optional[str] = Field(None, description="Описание (может отсутствовать)")

    # Баланс
    currency: str = Field(..., min_length=1, description="Код валюты (например, 'USD')")
    amount: Decimal = Field(..., description="Баланс в сотых долях валюты")

    personal: bool = Field(False, description="Личный кошелёк")

    # Время
    created_at: datetime = Field(..., description="Время создания")
    updated_at: datetime = Field(..., description="Время последнего изменения")
    deleted_at: Optional[datetime] = Field(None, description="Время удаления (None, если активен)")

    model_config = {"frozen": True}  # Immutable

    def equals(self, other: "Wallet") -> bool:
        """
        Сравнение содержимого кошельков.

        Служебные поля (id, created_at, updated_at) не учитываются:
        их назначает хранилище. deleted_at сравнивается как момент времени.

        Args:
            other: Кошелёк для сравнения

        Returns:
            True если содержимое совпадает
        """
        return (
            self.name == other.name
            and self.description == other.description
            and self.currency == other.currency
            and self.amount == other.amount
            and self.personal == other.personal
            and self.deleted_at == other.deleted_at
        )

    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def to_json(self) -> str:
        """
        Сериализация кошелька в JSON с amount в виде голого числа.

        model_dump_json() выводит amount строкой ("-0.99"), так как pydantic
        не умеет писать сырые числовые токены. Здесь amount выводится
        токеном Decimal.to_json(), порядок полей сохраняется.

        Returns:
            JSON-объект, например {"id": 1, ..., "amount": -0.99, ...}
        """
        payload = self.model_dump(mode="json")
        members = []
        for name, value in payload.items():
            token = self.amount.to_json() if name == "amount" else json.dumps(value)
            members.append(f"{json.dumps(name)}: {token}")
        return "{" + ", ".join(members) + "}"
