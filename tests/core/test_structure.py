# tests/core/test_structure.py
"""
Testes do motor flatten/unflatten.

Os testes asseguram que:
- estruturas aninhadas viram chaves planas dot-path e vice-versa
- listas são armazenadas como folhas (sem flatten por elemento)
- mapas vazios são preservados como folhas `{}`
- o round-trip `unflatten(flatten_to_map(M)) == M` vale para chaves sem ponto
- conjuntos de chaves ambíguos (folha e mapa ao mesmo tempo) são rejeitados
- `unflatten_under_path` reconstrói apenas a subárvore pedida

Decisões arquiteturais:
    - Colisões folha/mapa são erro explícito (`FlatKeyCollisionError`)
    - Segmentos vazios são erro explícito (`InvalidFlatKeyError`)
"""

import pytest

from atlas_configstore.core.errors import FlatKeyCollisionError, InvalidFlatKeyError
from atlas_configstore.core.structure import (
    flatten,
    flatten_to_map,
    join_path,
    unflatten,
    unflatten_under_path,
)

NETWORK = {"network": {"server-ip": "10.0.0.1", "max-players": 20}}


def test_network_scenario_end_to_end(memory):
    """
    Cenário ponta a ponta: flatten sob prefixo vazio seguido de
    `unflatten_under_path("network")`.
    """
    flatten("", NETWORK, memory)

    assert memory.snapshot() == {
        "network.server-ip": "10.0.0.1",
        "network.max-players": 20,
    }
    assert unflatten_under_path("network", memory) == {
        "server-ip": "10.0.0.1",
        "max-players": 20,
    }


def test_flatten_with_prefix_and_lists_as_leaves(memory):
    flatten("root", {"a": {"b": [1, 2]}, "c": "x"}, memory)
    assert memory.get("root.a.b") == [1, 2]
    assert memory.get("root.c") == "x"


def test_flatten_none_source_is_noop(memory):
    flatten("", None, memory)
    assert len(memory) == 0


def test_empty_nested_map_is_kept_as_leaf():
    flat = flatten_to_map({"plugins": {}, "a": {"b": {}}})
    assert flat == {"plugins": {}, "a.b": {}}
    assert unflatten(flat) == {"plugins": {}, "a": {"b": {}}}


@pytest.mark.parametrize(
    "nested",
    [
        {},
        {"a": 1},
        {"a": {"b": {"c": True}}, "d": [1, 2, 3]},
        {"server": {"host": "h", "port": 1, "tags": ["x"], "extra": None}},
        {"x": {"y": 1.5}, "z": {"w": "s", "v": {}}},
    ],
)
def test_round_trip_nested_to_flat_to_nested(nested):
    assert unflatten(flatten_to_map(nested)) == nested


def test_flat_key_set_reproduced_by_flatten_of_unflatten(memory):
    flat = {"a.b": 1, "a.c": "two", "d": [3]}
    flatten("", unflatten(flat), memory)
    assert memory.snapshot() == flat


def test_unflatten_preserves_key_order():
    out = unflatten({"z.b": 1, "z.a": 2, "a": 3})
    assert list(out) == ["z", "a"]
    assert list(out["z"]) == ["b", "a"]


@pytest.mark.parametrize(
    "flat",
    [
        {"a": 1, "a.b": 2},
        {"a.b": 2, "a": 1},
        {"a.b.c": 1, "a.b": 2},
    ],
)
def test_leaf_and_branch_collision_is_rejected(flat):
    with pytest.raises(FlatKeyCollisionError):
        unflatten(flat)


@pytest.mark.parametrize("key", ["a..b", ".a", "a.", ""])
def test_empty_segments_are_rejected(key):
    with pytest.raises(InvalidFlatKeyError):
        unflatten({key: 1})


def test_unflatten_under_path_ignores_sibling_prefixes(memory):
    memory.set("network.ip", "x")
    memory.set("networking.ip", "y")
    memory.set("network", None)
    assert unflatten_under_path("network", memory) == {"ip": "x"}


def test_unflatten_under_path_returns_stored_blob(memory):
    memory.set("settings.mysql", {"host": "127.0.0.1", "port": 3306})
    out = unflatten_under_path("settings.mysql", memory)
    assert out == {"host": "127.0.0.1", "port": 3306}
    out["host"] = "changed"
    assert memory.get("settings.mysql")["host"] == "127.0.0.1"


def test_unflatten_under_path_missing_path_is_empty(memory):
    memory.set("other", 1)
    assert unflatten_under_path("network", memory) == {}


def test_join_path():
    assert join_path("", "a") == "a"
    assert join_path("a", "b") == "a.b"
    assert join_path("a", 1) == "a.1"
