"""Pydantic models for the operation registry."""

from functools import lru_cache
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, create_model


# Argument types an operation may declare, mapped to the Python type they validate to
FIELD_TYPES: dict[str, type] = {
    "string": str,
}


class FieldSpec(BaseModel):
    """One declared argument of an operation.

    Attributes:
        name: Argument name as sent by the client.
        type: Declared primitive type.
        required: Whether the argument must be present.
        identifier: Whether the value is interpolated into a URL path
            and must therefore be a plain alphanumeric id.
        description: Human-readable description shown to clients.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    type: Literal["string"] = "string"
    required: bool = False
    identifier: bool = False
    description: str = ""


class OperationSpec(BaseModel):
    """Declaration of a single operation exposed as an MCP tool.

    Attributes:
        name: Unique operation name (e.g., "fizzy_get_card").
        description: Human-readable description of the operation.
        fields: Declared arguments, in display order.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    fields: tuple[FieldSpec, ...] = Field(default_factory=tuple)

    @property
    def required_fields(self) -> list[str]:
        return [field.name for field in self.fields if field.required]

    @property
    def identifier_fields(self) -> list[str]:
        return [field.name for field in self.fields if field.identifier]

    def input_schema(self) -> dict[str, Any]:
        """Render the argument table as a JSON Schema object for tools/list."""
        return {
            "type": "object",
            "properties": {
                field.name: {"type": field.type, "description": field.description}
                for field in self.fields
            },
            "required": self.required_fields,
            "additionalProperties": False,
        }

    def arguments_model(self) -> type[BaseModel]:
        """Strict pydantic model that validates this operation's arguments.

        Built once per operation and reused for every call.
        """
        return _build_arguments_model(self)


@lru_cache(maxsize=None)
def _build_arguments_model(spec: OperationSpec) -> type[BaseModel]:
    # Required fields have no default; optional ones default to None.
    # Undeclared keys are ignored so they never reach the remote call.
    definitions: dict[str, Any] = {}
    for field in spec.fields:
        python_type = FIELD_TYPES[field.type]
        if field.required:
            definitions[field.name] = (python_type, ...)
        else:
            definitions[field.name] = (python_type | None, None)

    model_name = "".join(part.capitalize() for part in spec.name.split("_")) + "Arguments"
    return create_model(
        model_name,
        __config__=ConfigDict(strict=True, extra="ignore", frozen=True),
        **definitions,
    )
