# src/atlas_configstore/core/operations/log.py
"""
Log estruturado de operações de configuração.

O `OperationLog` acumula registros (dicts) emitidos pelo executor e pelas
operações CRUD. Cada registro é autocontido e serializável:

    {
        "config": "<nome da configuração>",
        "operation": "CREATE" | "READ" | "UPDATE" | "DELETE" | ...,
        "level": "INFO" | "WARNING" | "ERROR",
        "message": "...",
        "timestamp": "<ISO-8601 UTC>",
        ...extra
    }

Decisões arquiteturais:
    - Registros INFO respeitam `ConfigMeta.logging_enabled`
    - WARNING e ERROR são sempre registrados
    - Warnings também são agrupados por configuração (`warnings`)

Limites explícitos:
    - Não escreve em arquivos, stdout ou handlers do `logging`
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

INFO = "INFO"
WARNING = "WARNING"
ERROR = "ERROR"


@dataclass
class OperationLog:
    events: List[Dict[str, Any]] = field(default_factory=list)
    warnings: Dict[str, List[str]] = field(default_factory=dict)

    def log(self, *, config: str, operation: str, level: str, message: str, **extra: Any) -> None:
        event = {
            "config": config,
            "operation": operation,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def add_warning(self, *, config: str, message: str) -> None:
        if config not in self.warnings:
            self.warnings[config] = []
        self.warnings[config].append(message)

    def records(self, *, level: Optional[str] = None, config: Optional[str] = None) -> List[Dict[str, Any]]:
        """Filtra registros por nível e/ou configuração."""
        return [
            e
            for e in self.events
            if (level is None or e["level"] == level) and (config is None or e["config"] == config)
        ]
