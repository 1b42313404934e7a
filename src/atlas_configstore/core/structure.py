# src/atlas_configstore/core/structure.py
"""
Motor de transformação flatten/unflatten.

Este módulo implementa a ponte bidirecional entre estruturas aninhadas
(dicionários de dicionários, como produzidos por YAML/JSON) e a
representação plana indexada por caminhos com ponto (dot-path) utilizada
pela memória de configuração.

Exemplo:
    {"network": {"server-ip": "10.0.0.1", "max-players": 20}}
        ⇄
    {"network.server-ip": "10.0.0.1", "network.max-players": 20}

Política (v1):
    - dict         → recursão com `prefix.key`
    - dict vazio   → armazenado como folha `{}` (preserva o round-trip)
    - list/escalar → armazenado como está (listas não são achatadas)
    - chaves não-string são convertidas com `str()`

Decisões arquiteturais:
    - Conjuntos de chaves ambíguos são rejeitados (`FlatKeyCollisionError`)
      em vez de sobrescrever folhas silenciosamente
    - Segmentos vazios são rejeitados (`InvalidFlatKeyError`)
    - A ordem de inserção é preservada no resultado de `unflatten`

Invariantes:
    - unflatten(flatten_to_map(M)) == M para mapas sem chaves contendo ponto
    - Nenhum input é mutado

Limites explícitos:
    - Não escapa pontos dentro de segmentos
    - Não valida tipos de valores
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from atlas_configstore.core.errors import FlatKeyCollisionError, InvalidFlatKeyError
from atlas_configstore.core.memory.store import DataMemory

SEPARATOR = "."


def join_path(prefix: str, key: Any) -> str:
    key = str(key)
    return key if not prefix else f"{prefix}{SEPARATOR}{key}"


def flatten(prefix: str, source: Optional[Mapping[Any, Any]], sink: DataMemory) -> None:
    """
    Percorre `source` recursivamente gravando cada folha em `sink`.

    Args:
        prefix: caminho base ("" para a raiz).
        source: estrutura aninhada; `None` é ignorado.
        sink: memória que recebe as chaves planas via `set`.
    """
    if source is None:
        return

    for key, value in source.items():
        full_key = join_path(prefix, key)
        if isinstance(value, Mapping) and value:
            flatten(full_key, value, sink)
        elif isinstance(value, Mapping):
            sink.set(full_key, {})
        else:
            sink.set(full_key, value)


def flatten_to_map(source: Optional[Mapping[Any, Any]], prefix: str = "") -> Dict[str, Any]:
    """Variante pura de `flatten` que retorna um novo dicionário plano."""
    result: Dict[str, Any] = {}

    def _walk(current: str, node: Mapping[Any, Any]) -> None:
        for key, value in node.items():
            full_key = join_path(current, key)
            if isinstance(value, Mapping) and value:
                _walk(full_key, value)
            elif isinstance(value, Mapping):
                result[full_key] = {}
            else:
                result[full_key] = value

    if source is not None:
        _walk(prefix, source)
    return result


def split_path(key: str) -> "list[str]":
    segments = str(key).split(SEPARATOR)
    if any(not segment for segment in segments):
        raise InvalidFlatKeyError(f"Chave plana com segmento vazio: '{key}'", key=str(key))
    return segments


def unflatten(flat: Optional[Mapping[Any, Any]]) -> Dict[str, Any]:
    """
    Reconstrói a estrutura aninhada a partir de chaves planas.

    Raises:
        InvalidFlatKeyError: se alguma chave possuir segmento vazio.
        FlatKeyCollisionError: se uma chave for simultaneamente folha e mapa.
    """
    result: Dict[str, Any] = {}
    if not flat:
        return result

    # caminhos materializados como mapa por este unflatten
    branches = set()

    for flat_key, value in flat.items():
        segments = split_path(flat_key)
        current = result
        walked = ""

        for segment in segments[:-1]:
            walked = join_path(walked, segment)
            if segment not in current:
                current[segment] = {}
                branches.add(walked)
            elif walked not in branches:
                raise FlatKeyCollisionError(
                    f"Conflito de chaves: '{walked}' já é uma folha e não pode conter '{flat_key}'",
                    key=str(flat_key),
                )
            current = current[segment]

        leaf = segments[-1]
        leaf_path = join_path(walked, leaf)
        if leaf_path in branches:
            raise FlatKeyCollisionError(
                f"Conflito de chaves: '{leaf_path}' já contém chaves aninhadas",
                key=str(flat_key),
            )
        current[leaf] = value

    return result


def unflatten_under_path(path: str, memory: DataMemory) -> Dict[str, Any]:
    """
    Reconstrói apenas a subárvore localizada sob `path`.

    Política:
        - Coleta chaves que começam com `path + "."` e remove o prefixo
        - Sem filhos, mas com um mapa armazenado diretamente em `path`,
          retorna uma cópia desse mapa (entidade armazenada como blob)
        - Caso contrário retorna `{}`
    """
    prefix = f"{path}{SEPARATOR}"

    children: Dict[str, Any] = {}
    # snapshot preserva a ordem de inserção; get_keys devolve um set
    for key, value in memory.snapshot().items():
        if isinstance(key, str) and key.startswith(prefix):
            children[key[len(prefix):]] = value

    if not children and memory.contains(path):
        value = memory.get_optional(path)
        if isinstance(value, dict):
            return dict(value)

    return unflatten(children)
