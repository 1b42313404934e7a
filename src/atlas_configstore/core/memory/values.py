# src/atlas_configstore/core/memory/values.py
"""
União de valores da memória e funções de coerção.

A memória de configuração armazena apenas uma união fechada de tipos:

    str | int | float | bool | None | list[Value] | dict[str, Value]

Este módulo concentra, em um único lugar, a validação dessa união e as
coerções best-effort utilizadas por todos os getters tipados.

Política de coerção (v1):
    - string  → `str(value)`; ausência permanece `None`
    - inteiro → números truncados via `int()`; bool não é número
    - float   → números ampliados via `float()`; bool não é número
    - bool    → apenas valores `bool` reais
    - lista   → listas com elementos convertidos via `str()`

Limites explícitos:
    - Não é um framework de validação
    - Não converte strings numéricas ("10" não vira 10)
"""

from __future__ import annotations

import math
from typing import Any, List, Optional

from atlas_configstore.core.errors import UnsupportedValueError

SCALAR_TYPES = (str, bool, int, float, type(None))


def check_value(value: Any, *, where: str = "") -> Any:
    """
    Valida recursivamente que `value` pertence à união suportada.

    Returns:
        O próprio valor (sem cópia), para uso encadeado.

    Raises:
        UnsupportedValueError: se algum nível contiver tipo não suportado.
    """
    if isinstance(value, SCALAR_TYPES):
        return value

    if isinstance(value, list):
        for index, item in enumerate(value):
            check_value(item, where=f"{where}[{index}]")
        return value

    if isinstance(value, dict):
        for key, item in value.items():
            if not isinstance(key, SCALAR_TYPES):
                raise UnsupportedValueError(
                    f"Chave de mapa não suportada em '{where}': {type(key).__name__}"
                )
            check_value(item, where=f"{where}.{key}" if where else str(key))
        return value

    raise UnsupportedValueError(
        f"Tipo de valor não suportado em '{where}': {type(value).__name__}"
    )


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def as_string(value: Any) -> Optional[str]:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


def as_int(value: Any, default: int) -> int:
    if not _is_number(value):
        return default
    if isinstance(value, float) and not math.isfinite(value):
        return default
    return int(value)


def as_float(value: Any, default: float) -> float:
    return float(value) if _is_number(value) else default


def as_bool(value: Any, default: bool) -> bool:
    return value if isinstance(value, bool) else default


def as_string_list(value: Any) -> Optional[List[str]]:
    if not isinstance(value, list):
        return None
    return [item if isinstance(item, str) else str(item) for item in value]
