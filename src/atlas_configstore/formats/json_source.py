# src/atlas_configstore/formats/json_source.py
"""
Configurações em JSON (`json` da biblioteca padrão).

Política de leitura: **merge**. A memória NÃO é limpa antes do carregamento;
valores do arquivo sobrescrevem chaves coincidentes e as demais chaves
em memória são preservadas.
"""

from __future__ import annotations

from typing import Optional

from atlas_configstore.core.config.documents import JsonCodec
from atlas_configstore.core.events import EventSink
from atlas_configstore.core.operations.log import OperationLog
from atlas_configstore.core.resources import ResourceLocator

from .document import DocumentSource


class JsonSource(DocumentSource):
    def __init__(
        self,
        *,
        indent: int = 2,
        merge: str = "top",
        events: Optional[EventSink] = None,
        resources: Optional[ResourceLocator] = None,
        log: Optional[OperationLog] = None,
    ):
        super().__init__(
            JsonCodec(indent=indent),
            merge=merge,
            clear_on_read=False,
            events=events,
            resources=resources,
            log=log,
        )
