# tests/core/config/test_merge.py
"""
Testes do merge de documentos usado pela operação `update`.

Os testes asseguram que:
- o merge de topo (padrão) substitui chaves de topo inteiras
- o deep-merge combina dicionários recursivamente
- listas são sobrescritas integralmente
- conflitos de tipo são resolvidos a favor do override (memória)
- nenhum input é mutado

Decisões arquiteturais:
    - A memória é a fonte da verdade: o override sempre vence
    - Conflitos de tipo não geram erro
"""

import pytest

from atlas_configstore.core.config.merge import deep_merge, merge_documents


def test_top_level_merge_replaces_whole_sections():
    base = {"db": {"host": "a", "port": 1}, "keep": True}
    override = {"db": {"host": "b"}}
    out = merge_documents(base, override)
    assert out == {"db": {"host": "b"}, "keep": True}


def test_deep_merge_combines_nested_dicts():
    base = {"engine": {"fail_fast": True, "log_level": "INFO"}}
    override = {"engine": {"log_level": "DEBUG"}}
    out = merge_documents(base, override, deep=True)
    assert out == {"engine": {"fail_fast": True, "log_level": "DEBUG"}}


def test_deep_merge_list_override_total():
    base = {"steps": {"enabled": ["ingest", "train"]}}
    override = {"steps": {"enabled": ["ingest"]}}
    assert deep_merge(base, override) == {"steps": {"enabled": ["ingest"]}}


@pytest.mark.parametrize(
    "base, override, expected",
    [
        ({"a": {"b": 1}}, {"a": 5}, {"a": 5}),
        ({"a": 5}, {"a": {"b": 1}}, {"a": {"b": 1}}),
        ({"a": [1]}, {"a": {"x": 1}}, {"a": {"x": 1}}),
    ],
)
def test_type_conflicts_resolve_to_override(base, override, expected):
    assert deep_merge(base, override) == expected


@pytest.mark.parametrize("deep", [False, True])
def test_inputs_are_not_mutated(deep):
    base = {"a": {"b": [1, 2]}, "c": 1}
    override = {"a": {"d": 3}}
    out = merge_documents(base, override, deep=deep)
    out["a"]["new"] = 1
    assert base == {"a": {"b": [1, 2]}, "c": 1}
    assert override == {"a": {"d": 3}}
