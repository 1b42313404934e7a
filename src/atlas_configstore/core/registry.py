# src/atlas_configstore/core/registry.py
"""
Registro de configurações por chave.

Este módulo define o `ConfigRegistry`, o diretório concorrente
chave → `ConfigFile` utilizado pela aplicação para localizar entidades
de configuração pelo nome.

Decisões arquiteturais:
    - Re-registro sobrescreve silenciosamente (upsert)
    - `unregister` de chave ausente é no-op
    - `get` de chave ausente é erro reportável (`ConfigNotFoundError`)
    - `entries` devolve um snapshot, nunca uma view viva
    - Leitura e escrita são protegidas por lock interno

Invariantes:
    - Existe no máximo uma entidade por chave
    - Chaves são strings não vazias

Limites explícitos:
    - Não executa operações CRUD
    - Não cria nem remove arquivos
"""

from __future__ import annotations

import threading
from typing import Dict, List, Tuple

from .config.file import ConfigFile
from .errors import ConfigNotFoundError


class ConfigRegistry:
    """Mapa concorrente nome → ConfigFile."""

    def __init__(self) -> None:
        self._configs: Dict[str, ConfigFile] = {}
        self._lock = threading.RLock()

    def register(self, key: str, config: ConfigFile) -> None:
        if not isinstance(key, str) or not key.strip():
            raise ValueError("key must be a non-empty string")
        if config is None:
            raise ValueError("config must not be None")
        with self._lock:
            self._configs[key] = config

    def unregister(self, key: str) -> None:
        with self._lock:
            self._configs.pop(key, None)

    def has_entry(self, key: str) -> bool:
        with self._lock:
            return key in self._configs

    def get(self, key: str) -> ConfigFile:
        with self._lock:
            config = self._configs.get(key)
        if config is None:
            raise ConfigNotFoundError(key)
        return config

    def entries(self) -> List[Tuple[str, ConfigFile]]:
        with self._lock:
            return list(self._configs.items())

    def __len__(self) -> int:
        with self._lock:
            return len(self._configs)
