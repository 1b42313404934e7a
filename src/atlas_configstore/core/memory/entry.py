# src/atlas_configstore/core/memory/entry.py
"""
Descritores tipados de entradas da memória.

Um `MemoryEntry` associa uma chave plana a uma estratégia de leitura
(`MemoryDataType`), evitando repetir lookups não tipados espalhados pelo
código da aplicação.

Exemplo:
    SERVER_IP = MemoryEntry("network.server-ip", MemoryDataType.STRING)
    ip = SERVER_IP.fetch(memory)

Limites explícitos:
    - É apenas uma projeção sobre DataMemory; não possui estado próprio
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, Optional, Tuple, TypeVar

from .store import DataMemory

T = TypeVar("T")


class MemoryDataType(str, Enum):
    """
    Estratégias de leitura suportadas por `MemoryEntry`.

    Defaults de leitura (v1):
        - STRING      → None quando ausente
        - INTEGER     → 0
        - BOOLEAN     → False
        - DOUBLE      → 0.0
        - STRING_LIST → [] quando ausente
        - RAW         → valor armazenado, sem coerção
    """

    STRING = "string"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    DOUBLE = "double"
    STRING_LIST = "string_list"
    RAW = "raw"

    def extract(self, memory: DataMemory, key: Any) -> Any:
        return _EXTRACTORS[self](memory, key)


_EXTRACTORS: "dict[MemoryDataType, Callable[[DataMemory, Any], Any]]" = {
    MemoryDataType.STRING: lambda memory, key: memory.get_string(key),
    MemoryDataType.INTEGER: lambda memory, key: memory.get_int(key, 0),
    MemoryDataType.BOOLEAN: lambda memory, key: memory.get_bool(key, False),
    MemoryDataType.DOUBLE: lambda memory, key: memory.get_float(key, 0.0),
    MemoryDataType.STRING_LIST: lambda memory, key: memory.get_string_list(key),
    MemoryDataType.RAW: lambda memory, key: memory.get_optional(key),
}


@dataclass(frozen=True)
class MemoryEntry(Generic[T]):
    """Descritor estático (chave, tipo) sobre um DataMemory."""

    key: str
    type: MemoryDataType

    def fetch(self, memory: DataMemory) -> Optional[T]:
        return self.type.extract(memory, self.key)

    def fetch_or_default(self, memory: DataMemory, default: T) -> T:
        value = self.fetch(memory)
        return default if value is None else value

    def fetch_detailed(self, memory: DataMemory) -> Tuple[str, Optional[T]]:
        """Retorna o par (chave, valor), útil para relatórios de configuração."""
        return self.key, self.fetch(memory)
