"""Unit tests for the operation registry module."""

import pytest

from src.gateway.exceptions import RegistryConfigError, UnknownOperationError
from src.registry.config import load_operation_registry
from src.registry.models import FieldSpec, OperationSpec
from src.registry.service import OperationRegistry, build_registry


EXPECTED_OPERATIONS = {
    "fizzy_list_boards",
    "fizzy_get_board",
    "fizzy_create_board",
    "fizzy_list_cards",
    "fizzy_get_card",
    "fizzy_create_card",
    "fizzy_update_card",
    "fizzy_move_card",
    "fizzy_list_columns",
    "fizzy_list_comments",
    "fizzy_add_comment",
    "fizzy_add_tag",
    "fizzy_remove_tag",
}


class TestBundledOperations:
    """Tests for the operations.yaml shipped with the package."""

    def test_all_operations_declared(self, registry):
        """Test the bundled file declares the full operation set."""
        assert set(registry.names()) == EXPECTED_OPERATIONS
        assert len(registry) == len(EXPECTED_OPERATIONS)

    def test_lookup_returns_spec(self, registry):
        """Test lookup of a declared operation."""
        spec = registry.lookup("fizzy_create_card")

        assert spec.required_fields == ["board_id", "title"]
        assert spec.identifier_fields == ["board_id"]
        assert [field.name for field in spec.fields] == ["board_id", "title", "description"]

    def test_lookup_unknown_raises(self, registry):
        """Test unknown names raise UnknownOperationError."""
        with pytest.raises(UnknownOperationError) as exc_info:
            registry.lookup("fizzy_delete_everything")

        assert exc_info.value.operation == "fizzy_delete_everything"
        assert exc_info.value.code == "UNKNOWN_OPERATION"

    def test_list_cards_board_filter_is_optional(self, registry):
        """Test card listing works without a board."""
        assert registry.lookup("fizzy_list_cards").required_fields == []

    def test_all_fields_are_strings(self, registry):
        """Test every declared field is typed string."""
        for spec in registry:
            for field in spec.fields:
                assert field.type == "string", f"{spec.name}.{field.name}"

    def test_arguments_model_built_once(self, registry):
        """Test the arguments model is reused across calls."""
        spec = registry.lookup("fizzy_get_card")

        assert spec.arguments_model() is spec.arguments_model()
        assert spec.arguments_model().__name__ == "FizzyGetCardArguments"


class TestInputSchema:
    """Tests for JSON Schema rendering used by tools/list."""

    def test_input_schema_shape(self, registry):
        """Test rendered schema lists properties and required fields."""
        schema = registry.lookup("fizzy_move_card").input_schema()

        assert schema["type"] == "object"
        assert set(schema["properties"]) == {"card_id", "column"}
        assert schema["properties"]["card_id"]["type"] == "string"
        assert schema["required"] == ["card_id", "column"]
        assert schema["additionalProperties"] is False

    def test_input_schema_without_fields(self, registry):
        """Test operations with no arguments render an empty object schema."""
        schema = registry.lookup("fizzy_list_boards").input_schema()

        assert schema["properties"] == {}
        assert schema["required"] == []


class TestRegistryConstruction:
    """Tests for loading and indexing operation declarations."""

    def test_duplicate_operation_rejected(self):
        """Test two operations with one name are refused."""
        spec = OperationSpec(name="dup", description="x")

        with pytest.raises(RegistryConfigError):
            OperationRegistry([spec, spec])

    def test_duplicate_field_rejected(self):
        """Test an operation declaring a field twice is refused."""
        spec = OperationSpec(
            name="op",
            description="x",
            fields=(FieldSpec(name="a"), FieldSpec(name="a")),
        )

        with pytest.raises(RegistryConfigError):
            OperationRegistry([spec])

    def test_load_from_custom_path(self, tmp_path):
        """Test loading a custom operations file."""
        path = tmp_path / "ops.yaml"
        path.write_text(
            "operations:\n"
            "  - name: ping_board\n"
            "    description: Ping\n"
            "    fields:\n"
            "      - name: board_id\n"
            "        required: true\n"
            "        identifier: true\n",
            encoding="utf-8",
        )

        registry = build_registry(path)

        assert registry.names() == ["ping_board"]
        assert registry.lookup("ping_board").identifier_fields == ["board_id"]

    def test_missing_file_raises(self, tmp_path):
        """Test a missing operations file is a config error."""
        with pytest.raises(RegistryConfigError):
            load_operation_registry(tmp_path / "absent.yaml")

    def test_unsupported_field_type_raises(self, tmp_path):
        """Test field types other than string are refused."""
        path = tmp_path / "ops.yaml"
        path.write_text(
            "operations:\n"
            "  - name: op\n"
            "    description: Op\n"
            "    fields:\n"
            "      - name: count\n"
            "        type: integer\n",
            encoding="utf-8",
        )

        with pytest.raises(RegistryConfigError):
            load_operation_registry(path)
