# src/atlas_configstore/core/config/documents.py
"""
Codecs de documentos de configuração (YAML / JSON).

Este módulo é responsável por converter o conteúdo físico de um arquivo de
configuração em uma estrutura aninhada (`dict`) e vice-versa.

Formatos suportados (v1):
    - YAML (.yaml, .yml) via PyYAML
    - JSON (.json) via `json`

Decisões arquiteturais:
    - O conteúdo raiz deve ser um dicionário (`dict`)
    - Arquivos vazios são interpretados como dicionários vazios
    - Timestamps YAML são mantidos como strings (a memória não armazena datas)
    - Formatos não suportados geram erro explícito
    - Erros de parse são encapsulados em `ConfigReadError` (um OSError)

Invariantes:
    - `read_document` sempre retorna um `dict`
    - Nenhuma escrita parcial é feita por `write_document` em caso de erro
      de serialização (o documento é serializado antes de abrir o arquivo)

Limites explícitos:
    - Não realiza merge (ver `merge.py`)
    - Não valida semântica de domínio
"""

from __future__ import annotations

import io
import json
from pathlib import Path
from typing import Any, Dict, Protocol, TextIO

import yaml  # PyYAML

from atlas_configstore.core.errors import (
    ConfigReadError,
    ConfigWriteError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)

_YAML_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class _ConfigYamlLoader(yaml.SafeLoader):
    """SafeLoader sem resolução implícita de timestamps."""


_ConfigYamlLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _YAML_TIMESTAMP_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


class DocumentCodec(Protocol):
    name: str

    def load(self, stream: TextIO) -> Any:
        ...

    def dump(self, data: Dict[str, Any], stream: TextIO) -> None:
        ...


class YamlCodec:
    """YAML em block style, indentação configurável, ordem de chaves preservada."""

    name = "yaml"

    def __init__(self, *, indent: int = 2):
        self.indent = indent

    def load(self, stream: TextIO) -> Any:
        return yaml.load(stream, Loader=_ConfigYamlLoader)

    def dump(self, data: Dict[str, Any], stream: TextIO) -> None:
        yaml.safe_dump(
            data,
            stream,
            default_flow_style=False,
            indent=self.indent,
            sort_keys=False,
            allow_unicode=True,
        )


class JsonCodec:
    name = "json"

    def __init__(self, *, indent: int = 2):
        self.indent = indent

    def load(self, stream: TextIO) -> Any:
        content = stream.read()
        if not content.strip():
            return None
        return json.loads(content)

    def dump(self, data: Dict[str, Any], stream: TextIO) -> None:
        json.dump(data, stream, indent=self.indent, ensure_ascii=False)
        stream.write("\n")


def codec_for_path(path: Path) -> DocumentCodec:
    """Seleciona o codec pelo sufixo do arquivo."""
    suffix = Path(path).suffix.lower()
    if suffix in {".yaml", ".yml"}:
        return YamlCodec()
    if suffix == ".json":
        return JsonCodec()
    raise UnsupportedConfigFormatError(f"Formato não suportado: {suffix or '<sem sufixo>'}")


def read_document(path: Path, codec: DocumentCodec) -> Dict[str, Any]:
    """
    Lê e interpreta um documento de configuração.

    Raises:
        ConfigReadError: se o arquivo não puder ser lido ou interpretado.
        InvalidConfigRootTypeError: se o conteúdo raiz não for um dicionário.
    """
    try:
        with Path(path).open("r", encoding="utf-8") as f:
            data = codec.load(f)
    except (OSError, yaml.YAMLError, ValueError) as e:
        raise ConfigReadError(f"Falha ao ler {codec.name} em {path}: {e}") from e

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Config root deve ser dict, recebido: {type(data).__name__}"
        )

    return data


def write_document(path: Path, data: Dict[str, Any], codec: DocumentCodec) -> None:
    """
    Serializa `data` e grava em `path` (UTF-8).

    Raises:
        ConfigWriteError: se a serialização ou a escrita falharem.
    """
    buffer = io.StringIO()
    try:
        codec.dump(data, buffer)
    except (yaml.YAMLError, TypeError, ValueError) as e:
        raise ConfigWriteError(f"Falha ao serializar {codec.name} para {path}: {e}") from e

    try:
        with Path(path).open("w", encoding="utf-8") as f:
            f.write(buffer.getvalue())
    except OSError as e:
        raise ConfigWriteError(f"Falha ao gravar {path}: {e}") from e

