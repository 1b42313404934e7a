# src/atlas_configstore/formats/document.py
"""
Operações CRUD baseadas em documentos (YAML / JSON).

`DocumentSource` implementa `read` e `update` sobre um `DocumentCodec`,
reaproveitando `create` / `delete` de `CRUDOperations`.

Read:
    - recurso ausente ou documento vazio → no-op (memória intocada)
    - documento → dict → flatten para a memória
    - `clear_on_read=True` substitui a memória; `False` mescla
    - valores fora da união suportada → `ConfigReadError`,
      sem alterar a memória

Update:
    - memória → unflatten → estrutura aninhada
    - memória vazia → nenhuma escrita
    - documento existente é mesclado com precedência da memória:
        - merge="top"  → sobrescrita por chave de topo
        - merge="deep" → merge recursivo de dicts
    - conteúdo existente malformado → `ConfigReadError`

Notificações:
    - create → ConfigCreateEvent
    - delete → ConfigDeleteEvent
    - read   → ConfigLoadEvent
    - update → ConfigSaveEvent
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from atlas_configstore.core.config.documents import (
    DocumentCodec,
    codec_for_path,
    read_document,
    write_document,
)
from atlas_configstore.core.config.file import ConfigFile
from atlas_configstore.core.config.merge import merge_documents
from atlas_configstore.core.errors import ConfigReadError, ConfigWriteError, UnsupportedValueError
from atlas_configstore.core.events import (
    ConfigCreateEvent,
    ConfigDeleteEvent,
    ConfigLoadEvent,
    ConfigSaveEvent,
    EventSink,
)
from atlas_configstore.core.memory.values import check_value
from atlas_configstore.core.operations.crud import READ, UPDATE, CRUDOperations
from atlas_configstore.core.operations.log import OperationLog
from atlas_configstore.core.resources import ResourceLocator
from atlas_configstore.core.structure import flatten_to_map, unflatten

MERGE_POLICIES = ("top", "deep")


class DocumentSource(CRUDOperations):
    def __init__(
        self,
        codec: Optional[DocumentCodec] = None,
        *,
        merge: str = "top",
        clear_on_read: bool = True,
        events: Optional[EventSink] = None,
        resources: Optional[ResourceLocator] = None,
        log: Optional[OperationLog] = None,
    ):
        super().__init__(events=events, resources=resources, log=log)
        if merge not in MERGE_POLICIES:
            raise ValueError(f"merge deve ser um de {MERGE_POLICIES}, recebido: {merge!r}")
        self.codec = codec
        self.merge = merge
        self.clear_on_read = clear_on_read

    def codec_for(self, config: ConfigFile) -> DocumentCodec:
        if self.codec is not None:
            return self.codec
        return codec_for_path(config.path)

    # -----------------------------
    # Read
    # -----------------------------
    def perform_read(self, config: ConfigFile) -> None:
        if not config.exists():
            self._info(config, READ, "Recurso ausente; memória mantida", path=str(config.path))
            return

        document = read_document(config.path, self.codec_for(config))
        if not document:
            self._info(config, READ, "Documento vazio; memória mantida", path=str(config.path))
            return

        flat = flatten_to_map(document)

        try:
            for key, value in flat.items():
                check_value(value, where=key)
        except UnsupportedValueError as e:
            raise ConfigReadError(f"Valor não suportado em {config.path}: {e}") from e

        memory = config.memory
        if self.clear_on_read:
            memory.clear()
        for key, value in flat.items():
            memory.set(key, value)

        self._info(config, READ, "Documento carregado", keys=len(flat))
        self._notify(self.on_post_read, config, READ)

    # -----------------------------
    # Update
    # -----------------------------
    def perform_update(self, config: ConfigFile) -> None:
        data = unflatten(config.memory.snapshot())
        if not data:
            self._info(config, UPDATE, "Memória vazia; nada a gravar")
            return

        codec = self.codec_for(config)
        merged: Dict[str, Any] = data
        if config.exists():
            current = read_document(config.path, codec)
            merged = merge_documents(current, data, deep=self.merge == "deep")
        else:
            try:
                config.path.parent.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise ConfigWriteError(f"Falha ao preparar diretório de {config.path}: {e}") from e

        write_document(config.path, merged, codec)

        self._info(config, UPDATE, "Documento gravado", keys=len(merged), merge=self.merge)
        self._notify(self.on_post_update, config, UPDATE)

    # -----------------------------
    # Hooks → eventos
    # -----------------------------
    def on_post_create(self, config: ConfigFile) -> None:
        self._publish(ConfigCreateEvent(config))

    def on_post_delete(self, config: ConfigFile) -> None:
        self._publish(ConfigDeleteEvent(config))

    def on_post_read(self, config: ConfigFile) -> None:
        self._publish(ConfigLoadEvent(config))

    def on_post_update(self, config: ConfigFile) -> None:
        self._publish(ConfigSaveEvent(config))
