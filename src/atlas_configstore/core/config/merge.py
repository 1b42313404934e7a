# src/atlas_configstore/core/config/merge.py
"""
Merge de documentos de configuração.

Utilizado pela operação `update` para combinar o conteúdo atual do
recurso físico (base) com a estrutura reconstruída da memória (override).

Política de merge (v1):
    - shallow (padrão): sobrescrita por chave de topo (override vence)
    - deep:
        - dict + dict → merge recursivo por chave
        - list        → sobrescrita total (sem merge elemento a elemento)
        - escalar     → sobrescrita direta pelo override
        - tipos diferentes → override vence (a memória é a fonte da verdade)

Princípios fundamentais:
    - O merge é puramente funcional; nenhum input é mutado
    - Chaves não presentes no override são preservadas da base

Limites explícitos:
    - Não carrega arquivos
    - Não realiza coerção de tipos
"""

from __future__ import annotations

from copy import deepcopy
from typing import Any, Dict, Mapping


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    result: Dict[str, Any] = deepcopy(dict(base))

    for key, override_value in override.items():
        base_value = result.get(key)

        # dict -> merge recursivo
        if isinstance(base_value, dict) and isinstance(override_value, dict):
            result[key] = deep_merge(base_value, override_value)
            continue

        # lista, escalar ou conflito de tipo -> sobrescrita
        result[key] = deepcopy(override_value)

    return result


def merge_documents(
    base: Mapping[str, Any],
    override: Mapping[str, Any],
    *,
    deep: bool = False,
) -> Dict[str, Any]:
    """
    Combina `base` e `override` com precedência do override.

    Args:
        base: conteúdo atual do recurso físico.
        override: estrutura reconstruída da memória.
        deep: quando True aplica `deep_merge`; caso contrário, merge de topo.

    Returns:
        Dict[str, Any]: novo dicionário resultante.
    """
    if deep:
        return deep_merge(base, override)

    result: Dict[str, Any] = deepcopy(dict(base))
    result.update(deepcopy(dict(override)))
    return result
