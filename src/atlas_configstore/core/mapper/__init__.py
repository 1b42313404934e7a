# src/atlas_configstore/core/mapper/__init__.py
"""
Mapeamento de entidades (codecs + mapper).

Componentes:
    - codec         → `Codec`, `CodecRegistry`
    - mapper        → `EntityMapper` (save/load sobre DataMemory)
    - entity_memory → `EntityDataMemory` (DataMemory com set_entity/get_entity)

Limites explícitos:
    - Não é um framework geral de serialização
    - Ausência de codec nunca levanta exceção
"""

from .codec import Codec, CodecRegistry
from .entity_memory import EntityDataMemory
from .mapper import EntityMapper

__all__ = ["Codec", "CodecRegistry", "EntityDataMemory", "EntityMapper"]
