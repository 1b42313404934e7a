# src/atlas_configstore/core/operations/__init__.py
"""
Operações CRUD, executor e contexto de execução.
"""

from .context import ExecutionContext
from .crud import CREATE, DELETE, READ, UPDATE, CRUDOperations
from .executor import OperationExecutor
from .log import OperationLog
from .operation import ConfigOperation, Operation

__all__ = [
    "CREATE",
    "DELETE",
    "READ",
    "UPDATE",
    "CRUDOperations",
    "ConfigOperation",
    "ExecutionContext",
    "Operation",
    "OperationExecutor",
    "OperationLog",
]
