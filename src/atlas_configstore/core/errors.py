# src/atlas_configstore/core/errors.py
"""
Exceções canônicas do Atlas ConfigStore.

Este módulo define a hierarquia oficial de exceções utilizadas pelo
modelo de dados de configuração: construção de entidades, registro,
transformação flatten/unflatten, memória tipada e operações CRUD.

As exceções aqui definidas representam **violações explícitas** de
contrato, e não erros genéricos de execução.

Taxonomia:
    - ConfigValidationError  → componente obrigatório ausente ou inválido
    - ConfigNotFoundError    → chave inexistente no registry
    - ConfigIOError          → falha real de I/O durante create/read/update/delete
    - FlatKeyError           → chave plana inválida ou ambígua
    - UnsupportedValueError  → valor fora da união de tipos suportada

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Cada exceção também herda do builtin equivalente (ValueError, KeyError,
      OSError, TypeError), preservando compatibilidade com chamadores genéricos
    - Mensagens de erro são curtas e direcionadas ao usuário

Invariantes:
    - Todas as exceções do pacote herdam de `ConfigStoreError`
    - Ausência de codec (CodecMiss) nunca é representada por exceção

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não registra eventos de log
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ErrorPayload:
    """
    Payload serializável de erro.

    Campos:
    - type: código estável do erro (nome da classe)
    - message: mensagem curta e objetiva
    - details: dados estruturados relevantes para diagnóstico
    """

    type: str
    message: str
    details: Dict[str, Any]

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def error_payload(exc: BaseException, **details: Any) -> ErrorPayload:
    """Converte uma exceção em `ErrorPayload` sem expor stack trace."""
    merged: Dict[str, Any] = {"exception_class": exc.__class__.__name__}
    cause = exc.__cause__
    if cause is not None:
        merged["cause"] = f"{cause.__class__.__name__}: {cause}"
    merged.update(details)
    return ErrorPayload(
        type=exc.__class__.__name__,
        message=str(exc) or "Erro inesperado",
        details=merged,
    )


class ConfigStoreError(Exception):
    """
    Exceção base para todos os erros do Atlas ConfigStore.

    Permite captura genérica de falhas do pacote, mantendo a distinção
    entre erros estruturais (validação, chaves) e falhas de I/O.
    """


# ---------------------------------------------------------------------------
# Validação / Registry
# ---------------------------------------------------------------------------

class ConfigValidationError(ConfigStoreError, ValueError):
    """
    Exceção levantada quando uma entidade de configuração é inválida.

    Decisões arquiteturais:
        - A validação ocorre no momento da construção (fail fast)
        - Nenhuma entidade parcialmente válida é produzida
    """


class MissingComponentError(ConfigValidationError):
    """
    Exceção levantada pelo builder quando metadata, memória ou
    localização física não foram fornecidas.

    Invariantes:
        - `missing` lista exatamente os componentes ausentes, em ordem estável
    """

    def __init__(self, missing: "tuple[str, ...]"):
        self.missing = tuple(missing)
        super().__init__(f"Componentes obrigatórios ausentes: {', '.join(self.missing)}")


class ConfigNotFoundError(ConfigStoreError, KeyError):
    """
    Exceção levantada quando uma chave não está registrada no `ConfigRegistry`.

    Decisões arquiteturais:
        - Lookup de chave ausente é erro reportável, não default silencioso
    """

    def __init__(self, key: str):
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f"Nenhuma configuração registrada com a chave: {self.key}"


# ---------------------------------------------------------------------------
# I/O
# ---------------------------------------------------------------------------

class ConfigIOError(ConfigStoreError, OSError):
    """
    Falha real de I/O durante uma operação CRUD.

    Recurso ausente NÃO é representado por esta exceção: ausência é um
    estado legítimo tratado como no-op pelas operações.
    """


class ConfigReadError(ConfigIOError):
    """Falha ao ler ou interpretar o conteúdo do recurso físico."""


class ConfigWriteError(ConfigIOError):
    """Falha ao serializar ou gravar o recurso físico."""


class UnsupportedConfigFormatError(ConfigStoreError, ValueError):
    """
    Exceção levantada quando o formato do arquivo de configuração
    não é suportado pelo loader de documentos.

    Formatos suportados:
        - YAML (.yaml, .yml)
        - JSON (.json)

    Limites explícitos:
        - Não tenta inferir formato por conteúdo
    """


class InvalidConfigRootTypeError(ConfigReadError):
    """
    Exceção levantada quando o conteúdo raiz de um documento
    não é um dicionário (`dict`).

    Conteúdo malformado é tratado como falha de leitura (OSError),
    permitindo que o executor registre e propague a falha.

    Limites explícitos:
        - Não tenta normalizar ou encapsular estruturas inválidas
    """


# ---------------------------------------------------------------------------
# Flatten / Unflatten
# ---------------------------------------------------------------------------

class FlatKeyError(ConfigStoreError, ValueError):
    """Base para chaves planas (dot-path) inválidas ou ambíguas."""

    def __init__(self, message: str, *, key: Optional[str] = None):
        self.key = key
        super().__init__(message)


class InvalidFlatKeyError(FlatKeyError):
    """Chave plana com segmento vazio (ex.: `"a..b"`, `".a"`, `"a."`)."""


class FlatKeyCollisionError(FlatKeyError):
    """
    Exceção levantada quando um conjunto de chaves planas é ambíguo.

    Exemplo de conflito:
        - {"a": 1, "a.b": 2} → `a` seria folha e mapa ao mesmo tempo

    Decisões arquiteturais:
        - Conflitos são rejeitados explicitamente
        - Nenhuma sobrescrita silenciosa de folhas por mapas (ou vice-versa)
    """


# ---------------------------------------------------------------------------
# Memória
# ---------------------------------------------------------------------------

class UnsupportedValueError(ConfigStoreError, TypeError):
    """
    Valor fora da união suportada pela memória
    (str, int, float, bool, None, list, dict).
    """
