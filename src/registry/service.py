"""Operation registry: name lookup over the static operation table."""

from collections.abc import Iterator
from functools import lru_cache
from pathlib import Path

from src.gateway.exceptions import RegistryConfigError, UnknownOperationError

from .config import load_operation_registry
from .models import OperationSpec


class OperationRegistry:
    """Immutable, name-indexed set of operation declarations."""

    def __init__(self, operations: list[OperationSpec]):
        self._operations: dict[str, OperationSpec] = {}
        for operation in operations:
            if operation.name in self._operations:
                raise RegistryConfigError(f"duplicate operation name in config: {operation.name}")
            field_names = [field.name for field in operation.fields]
            if len(field_names) != len(set(field_names)):
                raise RegistryConfigError(f"duplicate field name in operation: {operation.name}")
            self._operations[operation.name] = operation

    def lookup(self, name: str) -> OperationSpec:
        """Return the declaration for an operation.

        Raises:
            UnknownOperationError: If no operation has that name.
        """
        try:
            return self._operations[name]
        except KeyError:
            raise UnknownOperationError(name) from None

    def names(self) -> list[str]:
        return list(self._operations)

    def __contains__(self, name: object) -> bool:
        return name in self._operations

    def __iter__(self) -> Iterator[OperationSpec]:
        return iter(self._operations.values())

    def __len__(self) -> int:
        return len(self._operations)


def build_registry(config_path: str | Path | None = None) -> OperationRegistry:
    """Load the operations file and index it by name."""
    return OperationRegistry(load_operation_registry(config_path).operations)


@lru_cache()
def get_registry() -> OperationRegistry:
    """Registry built from the bundled operations file, loaded once."""
    return build_registry()
