# src/atlas_configstore/core/resources.py
"""
Localização de recursos padrão (defaults embarcados).

Durante `create`, o conteúdo inicial de um arquivo de configuração pode
ser copiado de um recurso embarcado com o mesmo caminho relativo.

Estratégias disponíveis:
    - DirectoryResources → diretório no sistema de arquivos
    - PackageResources   → dados de um pacote Python (`importlib.resources`)

Decisões arquiteturais:
    - Recurso ausente retorna `None` (não é erro)
    - O chamador é responsável por fechar o stream retornado

Limites explícitos:
    - Não copia arquivos (ver `CRUDOperations.create`)
    - Não interpreta o conteúdo
"""

from __future__ import annotations

from importlib import resources
from pathlib import Path, PurePosixPath
from typing import BinaryIO, Optional, Protocol, Union, runtime_checkable


@runtime_checkable
class ResourceLocator(Protocol):
    def open_resource(self, relative_path: str) -> Optional[BinaryIO]:
        ...


class DirectoryResources:
    def __init__(self, base_dir: Union[str, Path]):
        self.base_dir = Path(base_dir)

    def open_resource(self, relative_path: str) -> Optional[BinaryIO]:
        candidate = self.base_dir / relative_path
        if not candidate.is_file():
            return None
        return candidate.open("rb")

    def __repr__(self) -> str:
        return f"DirectoryResources({str(self.base_dir)!r})"


class PackageResources:
    """Recursos empacotados junto a um pacote Python importável."""

    def __init__(self, package: str):
        self.package = package

    def open_resource(self, relative_path: str) -> Optional[BinaryIO]:
        node = resources.files(self.package)
        for part in PurePosixPath(relative_path).parts:
            node = node.joinpath(part)
        if not node.is_file():
            return None
        return node.open("rb")

    def __repr__(self) -> str:
        return f"PackageResources({self.package!r})"
