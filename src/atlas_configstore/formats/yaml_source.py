# src/atlas_configstore/formats/yaml_source.py
"""
Configurações em YAML (PyYAML).

Política de leitura: **replace**. A memória é limpa antes do carregamento,
de modo que chaves removidas do arquivo também deixam a memória.

Formato de escrita: block style, indentação 2, ordem de chaves preservada.
"""

from __future__ import annotations

from typing import Optional

from atlas_configstore.core.config.documents import YamlCodec
from atlas_configstore.core.config.file import ConfigFile
from atlas_configstore.core.errors import ConfigIOError, error_payload
from atlas_configstore.core.events import EventSink
from atlas_configstore.core.operations.crud import CREATE
from atlas_configstore.core.operations.log import ERROR, OperationLog
from atlas_configstore.core.resources import ResourceLocator

from .document import DocumentSource


class YamlSource(DocumentSource):
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
            YamlCodec(indent=indent),
            merge=merge,
            clear_on_read=True,
            events=events,
            resources=resources,
            log=log,
        )


class AutoReadYamlSource(YamlSource):
    """
    YamlSource que carrega a memória logo após `create`.

    A leitura faz parte da notificação pós-criação: falhas de I/O são
    registradas como ERROR e não invalidam a criação.
    """

    def on_post_create(self, config: ConfigFile) -> None:
        super().on_post_create(config)
        try:
            self.perform_read(config)
        except ConfigIOError as e:
            self.log.log(
                config=config.name,
                operation=CREATE,
                level=ERROR,
                message=f"Leitura pós-criação falhou: {e}",
                error=error_payload(e, path=str(config.path)).to_dict(),
            )
