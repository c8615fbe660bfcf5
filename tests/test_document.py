import json
import logging
from unittest.mock import MagicMock

from openapi2schema.catalog.base import Catalog
from openapi2schema.schema.document import build_document, generate_schemas
from openapi2schema.writer import SchemaWriter

CATALOG = Catalog.from_raw({
    "pkg/api/v1.Widget": {
        "description": "Widget is a sample resource.",
        "required": ["spec"],
        "properties": {
            "kind": {"type": "string"},
            "apiVersion": {"type": "string"},
            "spec": {"$ref": "pkg/api/v1.WidgetSpec"},
        },
    },
    "pkg/api/v1.WidgetSpec": {
        "properties": {"name": {"type": "string"}},
    },
})


class TestBuildDocument:
    def test_widget_document(self):
        doc = build_document(CATALOG, "pkg/api/v1.Widget")
        assert doc.title == "api_v1_Widget"
        assert doc.type == "object"
        assert doc.description == "Widget is a sample resource."
        assert doc.required == ["spec"]
        assert doc.properties["kind"].const == "Widget"
        assert doc.properties["apiVersion"].const == "api/v1"
        spec = doc.properties["spec"]
        assert spec.type == "object"
        assert spec.properties["name"].type == "string"

    def test_serialized_shape(self):
        data = build_document(CATALOG, "pkg/api/v1.Widget").to_dict()
        assert data == {
            "properties": {
                "apiVersion": {"title": "apiVersion", "type": "string", "const": "api/v1"},
                "kind": {"title": "kind", "type": "string", "const": "Widget"},
                "spec": {
                    "title": "spec",
                    "type": "object",
                    "properties": {"name": {"title": "name", "type": "string"}},
                },
            },
            "title": "api_v1_Widget",
            "type": "object",
            "description": "Widget is a sample resource.",
            "required": ["spec"],
        }

    def test_required_omitted_when_empty(self):
        assert "required" not in build_document(CATALOG, "pkg/api/v1.WidgetSpec").to_dict()


class TestGenerateSchemas:
    def test_writes_every_definition(self, tmp_path):
        report = generate_schemas(CATALOG, SchemaWriter(tmp_path))
        assert sorted(p.name for p in report.written) == ["api_v1_Widget.json", "api_v1_WidgetSpec.json"]
        assert report.failures == []
        data = json.loads((tmp_path / "api_v1_Widget.json").read_text(encoding="utf-8"))
        assert data["properties"]["spec"]["properties"]["name"]["type"] == "string"

    def test_failures_reported_and_batch_continues(self, tmp_path, capsys):
        catalog = Catalog.from_raw({
            "Orphan": {"properties": {"name": {"type": "string"}}},
            "a/v1.Loop": {"properties": {"self": {"$ref": "a/v1.Loop"}}},
            "a/v1.Fine": {"properties": {"name": {"type": "string"}}},
        })
        report = generate_schemas(catalog, SchemaWriter(tmp_path))

        assert [p.name for p in report.written] == ["a_v1_Fine.json"]
        assert [f.ref for f in report.failures] == ["Orphan", "a/v1.Loop"]
        out = capsys.readouterr().out
        assert "Orphan resolve err: malformed type reference" in out
        assert "a/v1.Loop resolve err: reference cycle" in out

    def test_write_failure_does_not_abort(self, tmp_path, capsys):
        writer = SchemaWriter(tmp_path)
        real_write = writer.write

        def flaky_write(identifier, document):
            if identifier == "api_v1_Widget":
                raise PermissionError("read-only")
            return real_write(identifier, document)

        writer.write = MagicMock(side_effect=flaky_write)
        report = generate_schemas(CATALOG, writer)

        assert writer.write.call_count == 2
        assert [f.ref for f in report.failures] == ["pkg/api/v1.Widget"]
        assert (tmp_path / "api_v1_WidgetSpec.json").exists()
        assert "pkg/api/v1.Widget resolve err: read-only" in capsys.readouterr().out

    def test_include_patterns(self, tmp_path):
        report = generate_schemas(CATALOG, SchemaWriter(tmp_path), include=("*.Widget",))
        assert [p.name for p in report.written] == ["api_v1_Widget.json"]

    def test_identifier_collision_warns(self, tmp_path, caplog):
        catalog = Catalog.from_raw({
            "k8s.io/api/core/v1.Pod": {"description": "first"},
            "x.io/core/v1.Pod": {"description": "second"},
        })
        with caplog.at_level(logging.WARNING, logger="openapi2schema.schema.document"):
            report = generate_schemas(catalog, SchemaWriter(tmp_path))

        assert len(report.written) == 2
        assert "x.io/core/v1.Pod overwrote" in caplog.text
        data = json.loads((tmp_path / "core_v1_Pod.json").read_text(encoding="utf-8"))
        assert data["description"] == "second"
