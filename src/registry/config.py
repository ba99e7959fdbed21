"""Static operation registry config loader."""

from pathlib import Path

import yaml
from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from src.gateway.exceptions import RegistryConfigError

from .models import OperationSpec


DEFAULT_OPERATIONS_PATH = Path(__file__).parent / "operations.yaml"


class OperationRegistryConfig(BaseModel):
    """Container for operation definitions."""

    operations: list[OperationSpec] = Field(default_factory=list)


def load_operation_registry(config_path: str | Path | None = None) -> OperationRegistryConfig:
    """Load operation declarations from YAML.

    Args:
        config_path: Optional custom path for the operations file.

    Returns:
        Parsed OperationRegistryConfig.

    Raises:
        RegistryConfigError: If the file is missing or does not describe
            a valid operation table.
    """
    config_path = Path(config_path) if config_path is not None else DEFAULT_OPERATIONS_PATH

    if not config_path.exists():
        raise RegistryConfigError(f"Operations file not found: {config_path}")

    with config_path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}

    try:
        return OperationRegistryConfig(**data)
    except PydanticValidationError as e:
        raise RegistryConfigError(f"Invalid operations file {config_path}: {e}") from e
