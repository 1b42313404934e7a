# src/atlas_configstore/formats/__init__.py
"""
Implementações CRUD por formato de documento.

    - YamlSource / AutoReadYamlSource → YAML, leitura substitui a memória
    - JsonSource                      → JSON, leitura mescla na memória
    - DocumentSource                  → base parametrizável por codec
"""

from .document import DocumentSource
from .json_source import JsonSource
from .yaml_source import AutoReadYamlSource, YamlSource

__all__ = ["AutoReadYamlSource", "DocumentSource", "JsonSource", "YamlSource"]
