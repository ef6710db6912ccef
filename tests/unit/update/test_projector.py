"""Tests for source projection."""

from patchable.update import OperationKind, project, resolve_fields
from tests.factories import Plain, Widget

WIDGET_FIELDS = resolve_fields(Widget)


class TestProject:
    """Tests for project()."""

    def test_unknown_keys_dropped(self) -> None:
        """Keys that are not updatable never reach the applier."""
        projection = project(
            {"id": "abc", "name": "n", "hook_calls": []},
            WIDGET_FIELDS,
            OperationKind.MERGE,
        )
        assert projection == {"name": "n"}

    def test_no_updatable_fields_short_circuits(self) -> None:
        for operation in OperationKind:
            assert project({"name": "n"}, resolve_fields(Plain), operation) is None

    def test_merge_with_disjoint_keys_short_circuits(self) -> None:
        assert project({"id": "abc"}, WIDGET_FIELDS, OperationKind.MERGE) is None
        assert project({}, WIDGET_FIELDS, OperationKind.MERGE) is None

    def test_create_with_disjoint_keys_is_empty_not_short_circuit(self) -> None:
        """Create still finalizes even when nothing applies."""
        assert project({"id": "abc"}, WIDGET_FIELDS, OperationKind.CREATE) == {}

    def test_create_does_not_inject_nulls(self) -> None:
        projection = project({"count": 2}, WIDGET_FIELDS, OperationKind.CREATE)
        assert projection == {"count": 2}

    def test_replace_injects_nulls_after_document_keys(self) -> None:
        """Absent fields follow the document's own keys, in declaration order."""
        projection = project({"code": "ABC", "count": 2}, WIDGET_FIELDS, OperationKind.REPLACE)
        assert projection is not None
        assert list(projection) == ["code", "count", "name", "ratio", "tags", "inner"]
        assert projection["code"] == "ABC"
        assert projection["name"] is None
        assert projection["inner"] is None

    def test_explicit_null_preserved(self) -> None:
        projection = project({"ratio": None}, WIDGET_FIELDS, OperationKind.MERGE)
        assert projection == {"ratio": None}

    def test_document_order_preserved(self) -> None:
        projection = project(
            {"tags": [], "name": "n", "count": 3}, WIDGET_FIELDS, OperationKind.MERGE
        )
        assert list(projection or {}) == ["tags", "name", "count"]

    def test_document_not_modified(self) -> None:
        document = {"name": "n"}
        project(document, WIDGET_FIELDS, OperationKind.REPLACE)
        assert document == {"name": "n"}
