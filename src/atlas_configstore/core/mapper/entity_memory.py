# src/atlas_configstore/core/mapper/entity_memory.py
"""Memória com chaves `str` capaz de gravar e ler entidades via `EntityMapper`."""

from __future__ import annotations

from typing import Any, Optional, Type, TypeVar

from atlas_configstore.core.memory.store import DataMemory
from atlas_configstore.core.replacement import ReplacementProcessor

from .mapper import EntityMapper

T = TypeVar("T")


class EntityDataMemory(DataMemory[str]):
    """
    DataMemory de caminhos planos com suporte a entidades.

    `set_entity` e `get_entity` apenas delegam ao mapper injetado; toda a
    lógica de flatten/unflatten e resolução de codecs vive no mapper.
    """

    def __init__(self, mapper: EntityMapper, *, processor: Optional[ReplacementProcessor] = None):
        super().__init__(key_type=str, processor=processor)
        self.mapper = mapper

    def set_entity(self, path: str, entity: Any) -> None:
        self.mapper.save(self, path, entity)

    def get_entity(self, path: str, type_: Type[T]) -> Optional[T]:
        return self.mapper.load(self, path, type_)
