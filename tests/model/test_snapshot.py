"""Tests for YAML index snapshots."""

from pathlib import Path

import pytest

from typemeta.core.errors import ErrorCode, IndexLoadError
from typemeta.model.annotations import AnnotationInstance, TargetKind
from typemeta.model.snapshot import ClassEntry, IndexSnapshot, build_index, load_index
from typemeta.model.types import Primitive, array_of, class_type, primitive

SNAPSHOT = """\
classes:
  - name: app.models.Animal
    superclass: builtins.object
  - name: app.models.Pet
    superclass: app.models.Animal
    interfaces: [collections.abc.Hashable]
    annotations:
      - name: Schema
        values:
          description: A pet
          externalDocs: {name: ExternalDocs, values: {url: "https://example.com"}}
    fields:
      - name: tags
        type: list[str]
        annotations: [{name: Schema, values: {required: true, examples: [a, b]}}]
      - name: age
        type: int32
    methods:
      - name: rename
        return_type: None
        annotations: [{name: Deprecated}]
        parameters:
          - name: new_name
            type: str
            annotations: [{name: Parameter, values: {in: query}}]
          - name: notify
            type: bool
"""


@pytest.fixture
def snapshot_path(tmp_path: Path) -> Path:
    path = tmp_path / "index.yaml"
    path.write_text(SNAPSHOT)
    return path


class TestLoadIndex:
    """Loading a snapshot from disk."""

    def test_loads_classes(self, snapshot_path: Path) -> None:
        # When
        index = load_index(snapshot_path)

        # Then
        assert len(index) == 2
        assert "app.models.Pet" in index
        assert "app.models.Dog" not in index

    def test_hierarchy(self, snapshot_path: Path) -> None:
        pet = load_index(snapshot_path).lookup("app.models.Pet")

        assert pet is not None
        assert pet.superclass == class_type("app.models.Animal")
        assert pet.interface_names == ("collections.abc.Hashable",)

    def test_fields(self, snapshot_path: Path) -> None:
        pet = load_index(snapshot_path).lookup("app.models.Pet")

        assert pet is not None
        tags = pet.get_field("tags")
        age = pet.get_field("age")
        assert tags is not None and age is not None
        assert tags.type == array_of(class_type("builtins.str"))
        assert age.type == primitive(Primitive.INT)
        assert tags.declaring_class is pet

    def test_annotation_values(self, snapshot_path: Path) -> None:
        pet = load_index(snapshot_path).lookup("app.models.Pet")

        assert pet is not None
        tags = pet.get_field("tags")
        assert tags is not None
        schema = tags.annotations[0]
        assert schema.target_kind is TargetKind.FIELD
        assert schema.value("required") is True
        assert schema.value("examples") == ("a", "b")

    def test_nested_annotation(self, snapshot_path: Path) -> None:
        pet = load_index(snapshot_path).lookup("app.models.Pet")

        assert pet is not None
        docs = pet.annotations[0].value("externalDocs")
        assert isinstance(docs, AnnotationInstance)
        assert docs.name == "ExternalDocs"
        assert docs.value("url") == "https://example.com"

    def test_parameter_annotations_stored_on_method(self, snapshot_path: Path) -> None:
        pet = load_index(snapshot_path).lookup("app.models.Pet")

        assert pet is not None
        rename = pet.get_method("rename")
        assert rename is not None
        assert rename.parameter_names == ("new_name", "notify")
        assert [(a.name, a.target_kind, a.position) for a in rename.annotations] == [
            ("Deprecated", TargetKind.METHOD, None),
            ("Parameter", TargetKind.METHOD_PARAMETER, 0),
        ]

    def test_empty_file_is_empty_index(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert len(load_index(path)) == 0


class TestLoadIndexErrors:
    """Failures map to IndexLoadError codes."""

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(IndexLoadError) as exc_info:
            load_index(tmp_path / "missing.yaml")
        assert exc_info.value.code == ErrorCode.INDEX_FILE_NOT_FOUND

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("classes: [unclosed")

        with pytest.raises(IndexLoadError) as exc_info:
            load_index(path)
        assert exc_info.value.code == ErrorCode.INDEX_PARSE_ERROR

    def test_unknown_key(self, tmp_path: Path) -> None:
        path = tmp_path / "extra.yaml"
        path.write_text("classes:\n  - name: app.A\n    bases: [app.B]\n")

        with pytest.raises(IndexLoadError) as exc_info:
            load_index(path)
        assert exc_info.value.code == ErrorCode.INDEX_INVALID
        assert exc_info.value.details["location"].startswith("classes.0")

    def test_malformed_type_string(self, tmp_path: Path) -> None:
        path = tmp_path / "types.yaml"
        path.write_text(
            "classes:\n  - name: app.A\n  - name: app.B\n    fields:\n"
            "      - {name: x, type: 'list[str'}\n"
        )

        with pytest.raises(IndexLoadError) as exc_info:
            load_index(path)
        assert exc_info.value.code == ErrorCode.INDEX_INVALID
        assert exc_info.value.details["location"] == "classes.1"


class TestBuildIndex:
    """In-memory conversion of validated entries."""

    def test_interface_names_are_canonical(self) -> None:
        # Given
        entry = ClassEntry(
            name="app.Pet",
            interfaces=["~T: collections.abc.Hashable", "list[app.Named]"],
        )

        # When
        pet = build_index(IndexSnapshot(classes=[entry])).lookup("app.Pet")

        # Then
        assert pet is not None
        assert pet.interface_names == ("collections.abc.Hashable", "app.Named")

    def test_class_without_superclass(self) -> None:
        index = build_index(IndexSnapshot(classes=[ClassEntry(name="app.Root")]))

        root = index.lookup("app.Root")
        assert root is not None
        assert root.superclass is None
