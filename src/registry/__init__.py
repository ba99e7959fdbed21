"""Registry module - Operation declarations and lookup."""

from .models import FieldSpec, OperationSpec
from .config import OperationRegistryConfig, load_operation_registry
from .service import OperationRegistry, build_registry, get_registry


__all__ = [
    "FieldSpec",
    "OperationSpec",
    "OperationRegistryConfig",
    "load_operation_registry",
    "OperationRegistry",
    "build_registry",
    "get_registry",
]
