# src/atlas_configstore/core/config/paths.py
"""
Estratégias de resolução do diretório base de configurações.

Um `PathProvider` fornece o diretório raiz contra o qual o caminho relativo
de cada configuração é resolvido. As estratégias aqui definidas são
intencionalmente simples; qualquer objeto com `base_directory()` serve.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Callable, Protocol, Union, runtime_checkable


@runtime_checkable
class PathProvider(Protocol):
    def base_directory(self) -> Path:
        ...

    def resolve(self, relative_path: str) -> Path:
        ...


class DirectoryProvider:
    """PathProvider baseado em uma função que calcula o diretório base."""

    def __init__(self, compute: Callable[[], Path], *, label: str = "custom"):
        self._compute = compute
        self.label = label

    def base_directory(self) -> Path:
        return self._compute()

    def resolve(self, relative_path: str) -> Path:
        return self.base_directory() / relative_path

    def __repr__(self) -> str:
        return f"DirectoryProvider({self.label})"


def current_dir() -> DirectoryProvider:
    return DirectoryProvider(lambda: Path.cwd(), label="cwd")


def user_dir() -> DirectoryProvider:
    return DirectoryProvider(lambda: Path.home(), label="home")


def temp_dir() -> DirectoryProvider:
    return DirectoryProvider(lambda: Path(tempfile.gettempdir()), label="tmp")


def custom(path: Union[str, Path]) -> DirectoryProvider:
    resolved = Path(path).absolute()
    return DirectoryProvider(lambda: resolved, label=str(resolved))


def hybrid(primary: PathProvider, secondary: PathProvider) -> DirectoryProvider:
    """Usa `primary` quando existe e é gravável; caso contrário `secondary`."""

    def _choose() -> Path:
        candidate = primary.base_directory()
        if candidate.exists() and os.access(candidate, os.W_OK):
            return candidate
        return secondary.base_directory()

    return DirectoryProvider(_choose, label="hybrid")
