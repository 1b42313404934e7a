# src/atlas_configstore/core/replacement.py
"""
Motor de substituição de placeholders.

Este módulo implementa o templating textual puro utilizado pela memória
de configuração: substituição literal de tokens em strings e em
sequências de strings.

Política de substituição (v1):
    - O token é `prefix + key + suffix` (ex.: `%player%`)
    - Substituição literal (sem regex), todas as ocorrências
    - Replacements são aplicados na ordem fornecida pelo chamador
    - Uma única passada por replacement (sem re-scan global)

Invariantes:
    - `None` retorna `None`
    - Lista vazia de replacements retorna o texto original
    - Placeholders sem correspondência permanecem intactos

Limites explícitos:
    - Não avalia expressões
    - Não escapa delimitadores
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Protocol, runtime_checkable


@dataclass(frozen=True)
class Replacement:
    """Par imutável (nome do placeholder, texto de substituição)."""

    key: str
    value: str

    @classmethod
    def of(cls, key: str, value: Any) -> "Replacement":
        """
        Cria um Replacement a partir de qualquer valor.

        Coleções (list, tuple, set) são unidas por quebra de linha;
        demais valores são convertidos com `str()`.
        """
        if isinstance(value, (list, tuple, set, frozenset)):
            return cls(key, "\n".join(str(item) for item in value))
        return cls(key, str(value))


@runtime_checkable
class ReplacementProcessor(Protocol):
    """Contrato de processadores de replacement."""

    def process(self, text: Optional[str], *replacements: Replacement) -> Optional[str]:
        ...

    def process_lines(self, lines: Iterable[str], *replacements: Replacement) -> List[str]:
        ...


@dataclass(frozen=True)
class PlaceholderProcessor:
    """
    Estratégia padrão: envolve cada chave com `prefix`/`suffix` e substitui
    literalmente.

    Factories:
        - percent()  → %key%
        - brackets() → {key}
        - chevron()  → <key>
    """

    prefix: str
    suffix: str

    @classmethod
    def percent(cls) -> "PlaceholderProcessor":
        return cls("%", "%")

    @classmethod
    def brackets(cls) -> "PlaceholderProcessor":
        return cls("{", "}")

    @classmethod
    def chevron(cls) -> "PlaceholderProcessor":
        return cls("<", ">")

    def token(self, key: str) -> str:
        return f"{self.prefix}{key}{self.suffix}"

    def process(self, text: Optional[str], *replacements: Replacement) -> Optional[str]:
        if text is None or not replacements:
            return text

        result = text
        for replacement in replacements:
            result = result.replace(self.token(replacement.key), replacement.value)
        return result

    def process_lines(self, lines: Iterable[str], *replacements: Replacement) -> List[str]:
        return [self.process(line, *replacements) for line in lines]

