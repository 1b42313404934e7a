# src/atlas_configstore/core/mapper/codec.py
"""
Codecs de entidades e registro de codecs por tipo.

Um `Codec` é um par de funções puras:
    - serialize:   entidade → mapa (aninhado ou plano)
    - deserialize: mapa → entidade (ou None em caso de dados inválidos)

O `CodecRegistry` associa tipos Python a codecs e resolve o codec adequado
para um tipo solicitado.

Política de lookup (v1):
    - Match exato tem prioridade
    - Sem match exato, percorre `type.__mro__` e retorna o codec do
      supertipo registrado mais específico (mais derivado)

Decisões arquiteturais:
    - A resolução é determinística (MRO), independente da ordem de registro
    - Registro repetido para o mesmo tipo sobrescreve o anterior
    - O registry é seguro para leitura/escrita concorrente (lock interno)

Limites explícitos:
    - Não descobre codecs automaticamente
    - Não valida o conteúdo produzido pelos codecs
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, List, Mapping, Optional, TypeVar

T = TypeVar("T")

Serializer = Callable[[T], Optional[Mapping[str, Any]]]
Deserializer = Callable[[Dict[str, Any]], Optional[T]]


@dataclass(frozen=True)
class Codec(Generic[T]):
    """Par (serialize, deserialize) para um tipo de entidade."""

    serialize: Serializer
    deserialize: Deserializer


class CodecRegistry:
    """Mapa Tipo → Codec, thread-safe, com lookup pelo supertipo mais específico."""

    def __init__(self) -> None:
        self._codecs: Dict[type, Codec[Any]] = {}
        self._lock = threading.RLock()

    def register(self, type_: type, codec: Codec[Any]) -> None:
        if not isinstance(type_, type):
            raise TypeError(f"type_ deve ser uma classe, recebido: {type(type_).__name__}")
        if not isinstance(codec, Codec):
            raise TypeError("codec deve ser um Codec")
        with self._lock:
            self._codecs[type_] = codec

    def unregister(self, type_: type) -> None:
        with self._lock:
            self._codecs.pop(type_, None)

    def find(self, type_: type) -> Optional[Codec[Any]]:
        with self._lock:
            codec = self._codecs.get(type_)
            if codec is not None:
                return codec
            for candidate in getattr(type_, "__mro__", ())[1:]:
                codec = self._codecs.get(candidate)
                if codec is not None:
                    return codec
        return None

    def types(self) -> List[type]:
        with self._lock:
            return list(self._codecs)

    def __contains__(self, type_: object) -> bool:
        with self._lock:
            return type_ in self._codecs

    def __len__(self) -> int:
        with self._lock:
            return len(self._codecs)
