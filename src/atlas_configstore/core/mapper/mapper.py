# src/atlas_configstore/core/mapper/mapper.py
"""
Mapper de entidades sobre a memória plana.

O `EntityMapper` orquestra o round-trip entre entidades de domínio e a
representação plana da memória de configuração:

    save: entidade → codec.serialize → mapa → flatten(path) → DataMemory
    load: DataMemory → unflatten_under_path(path) → mapa → codec.deserialize → entidade

Decisões arquiteturais:
    - Ausência de codec (CodecMiss) é falha suave: `save` vira no-op e
      `load` retorna `None`
    - Dados malformados durante `load` (KeyError, TypeError, ValueError
      levantados pelo deserializer) também resultam em `None`
    - Erros estruturais de chaves planas continuam sendo propagados

Invariantes:
    - `save` seguido de `load` com codec round-trippable devolve uma
      entidade igual à original

Limites explícitos:
    - Não persiste em disco (isso é responsabilidade das operações CRUD)
    - Não versiona nem migra entidades
"""

from __future__ import annotations

from typing import Any, Optional, Type, TypeVar, Union

from atlas_configstore.core.memory.store import DataMemory
from atlas_configstore.core.structure import flatten, unflatten_under_path

from .codec import Codec, CodecRegistry, Deserializer, Serializer

T = TypeVar("T")

# Falhas esperadas de deserializers escritos como funções simples sobre dicts
_DESERIALIZE_FAILURES = (KeyError, TypeError, ValueError)


class EntityMapper:
    """Registro de codecs + operações de save/load de entidades."""

    def __init__(self, *, codecs: Optional[CodecRegistry] = None):
        self.codecs = codecs if codecs is not None else CodecRegistry()

    def register_codec(
        self,
        type_: Type[T],
        serialize: Union[Codec[T], Serializer],
        deserialize: Optional[Deserializer] = None,
    ) -> None:
        """
        Registra um codec para `type_`.

        Aceita um `Codec` pronto ou o par de funções (serialize, deserialize).
        """
        if isinstance(serialize, Codec):
            codec = serialize
        else:
            if deserialize is None:
                raise TypeError("deserialize é obrigatório quando serialize é uma função")
            codec = Codec(serialize=serialize, deserialize=deserialize)
        self.codecs.register(type_, codec)

    def find_codec(self, type_: type) -> Optional[Codec[Any]]:
        return self.codecs.find(type_)

    def save(self, memory: DataMemory, path: str, entity: Any) -> None:
        if entity is None:
            return

        codec = self.find_codec(type(entity))
        if codec is None:
            return

        serialized = codec.serialize(entity)
        if serialized is not None:
            flatten(path, serialized, memory)

    def load(self, memory: DataMemory, path: str, type_: Type[T]) -> Optional[T]:
        codec = self.find_codec(type_)
        if codec is None:
            return None

        data = unflatten_under_path(path, memory)
        if not data:
            return None

        try:
            return codec.deserialize(data)
        except _DESERIALIZE_FAILURES:
            return None
