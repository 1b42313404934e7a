# src/atlas_configstore/core/memory/store.py
"""
Memória de configuração tipada (DataMemory).

Este módulo define o `DataMemory`, o armazenamento associativo em memória
utilizado por toda entidade de configuração do Atlas ConfigStore.

O DataMemory é um store genérico parametrizado pelo tipo de chave `K`:
    - chaves `str` para caminhos planos (ex.: `"network.server-ip"`)
    - chaves `Enum` para memórias de estatísticas/estados fixos
    - qualquer outro tipo hashable

Decisões arquiteturais:
    - Um único store genérico, sem hierarquia de subclasses por tipo de chave
    - Getters tipados delegam ao módulo compartilhado `values`
    - Templating delega ao `ReplacementProcessor` da instância
    - `set` valida a união de valores suportada e sobrescreve sem merge

Invariantes:
    - `get` nunca muta estado
    - Cada chave é única; a ordem de inserção é irrelevante
    - Todas as operações são síncronas, em memória e O(1) amortizado por chave

Limites explícitos:
    - Não é thread-safe (um escritor por vez por entidade)
    - Não realiza I/O
    - `get_keys` retorna o conjunto completo de chaves, independente do prefixo
"""

from __future__ import annotations

from typing import Any, Dict, Generic, List, Optional, Set, TypeVar

from atlas_configstore.core.replacement import (
    PlaceholderProcessor,
    Replacement,
    ReplacementProcessor,
)

from . import values

K = TypeVar("K")


class DataMemory(Generic[K]):
    """
    Store chave-valor em memória com getters tipados e templating.

    Args:
        key_type: tipo opcional exigido para as chaves (ex.: um `Enum`).
        processor: processador de placeholders (default: `%key%`).
    """

    def __init__(
        self,
        *,
        key_type: Optional[type] = None,
        processor: Optional[ReplacementProcessor] = None,
    ):
        self._storage: Dict[K, Any] = {}
        self.key_type = key_type
        self.processor: ReplacementProcessor = processor or PlaceholderProcessor.percent()

    # -----------------------------
    # Escrita
    # -----------------------------
    def set(self, key: K, value: Any) -> None:
        self._check_key(key)
        values.check_value(value, where=str(key))
        self._storage[key] = value

    def clear(self) -> None:
        self._storage.clear()

    # -----------------------------
    # Leitura crua
    # -----------------------------
    def get(self, key: K, default: Any = None) -> Any:
        value = self._storage.get(key)
        return default if value is None else value

    def get_optional(self, key: K) -> Optional[Any]:
        return self._storage.get(key)

    def contains(self, key: K) -> bool:
        return key in self._storage

    def get_keys(self, path: Optional[K] = None, deep: bool = True) -> Set[K]:
        # Store plano: prefixo e profundidade não filtram o resultado.
        return set(self._storage)

    def snapshot(self) -> Dict[K, Any]:
        """Cópia rasa do armazenamento plano (não é uma view viva)."""
        return dict(self._storage)

    # -----------------------------
    # Getters tipados
    # -----------------------------
    def get_string(self, key: K, default: Optional[str] = None, *replacements: Replacement) -> Optional[str]:
        """
        Retorna o valor como string, aplicando os replacements.

        O default também passa pelo templating quando a chave está ausente.
        """
        value = values.as_string(self._storage.get(key))
        if value is None:
            value = default
        return self.transform(value, *replacements)

    def get_int(self, key: K, default: int = 0) -> int:
        return values.as_int(self._storage.get(key), default)

    def get_float(self, key: K, default: float = 0.0) -> float:
        return values.as_float(self._storage.get(key), default)

    # Alias mantido para leitura natural em configs numéricas
    get_double = get_float

    def get_bool(self, key: K, default: bool = False) -> bool:
        return values.as_bool(self._storage.get(key), default)

    def get_string_list(
        self,
        key: K,
        *replacements: Replacement,
        default: Optional[List[str]] = None,
    ) -> List[str]:
        """
        Lista de strings com replacements aplicados a cada elemento.

        Valor ausente ou que não seja lista → `default` (keyword-only) ou `[]`.
        """
        lines = values.as_string_list(self._storage.get(key))
        if lines is None:
            lines = list(default) if default is not None else []
        if not replacements:
            return lines
        return self.processor.process_lines(lines, *replacements)

    # -----------------------------
    # Templating
    # -----------------------------
    def transform(self, text: Optional[str], *replacements: Replacement) -> Optional[str]:
        if text is None or not replacements:
            return text
        return self.processor.process(text, *replacements)

    # -----------------------------
    # Protocolos Python
    # -----------------------------
    def __contains__(self, key: object) -> bool:
        return key in self._storage

    def __len__(self) -> int:
        return len(self._storage)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(keys={len(self._storage)})"

    def _check_key(self, key: Any) -> None:
        if self.key_type is not None and not isinstance(key, self.key_type):
            raise TypeError(
                f"Chave deve ser {self.key_type.__name__}, recebido: {type(key).__name__}"
            )
