# src/atlas_configstore/core/config/__init__.py
"""
Entidade de configuração e suporte a documentos.

Este pacote reúne tudo o que descreve *uma* configuração:

    - meta      → `ConfigMeta` (nome, caminho relativo, logging, versão)
    - paths     → `PathProvider` e estratégias de diretório base
    - file      → `ConfigFile` (meta + path + memória) e `ConfigFileBuilder`
    - documents → codecs YAML/JSON e leitura/escrita de documentos
    - merge     → política de merge usada pela operação `update`

Princípios fundamentais:
    - Entidades são imutáveis após a construção
    - Componentes obrigatórios são validados de forma antecipada
    - Nenhum estado global é mantido

Limites explícitos:
    - Não executa operações CRUD (ver `core.operations`)
    - Não registra entidades (ver `core.registry`)
"""

from .file import ConfigFile, ConfigFileBuilder
from .meta import ConfigMeta

__all__ = ["ConfigFile", "ConfigFileBuilder", "ConfigMeta"]
