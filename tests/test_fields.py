"""Key path to field resolution tests"""

import pytest

from cmsindex.errors import SchemaContractError
from cmsindex.fields import get_field_by_key_path, get_field_list, resolve_field
from cmsindex.schema import FieldDefinition


class TestGetFieldByKeyPath:
    """Tests for get_field_by_key_path"""

    def test_top_level_field(self, app):
        """Test: First segment is matched by name"""
        field = get_field_by_key_path(app, "posts", None, "title", {})

        assert field.name == "title"
        assert field.widget == "string"

    def test_unknown_top_level_field(self, app):
        """Test: An unknown first segment fails the whole path"""
        assert get_field_by_key_path(app, "posts", None, "missing.0.name", {}) is None

    def test_homogeneous_list_ignores_index(self, app):
        """Test: Any index of a single-field list resolves to the item field"""
        first = get_field_by_key_path(app, "posts", None, "authors.0.name", {})
        third = get_field_by_key_path(app, "posts", None, "authors.2.name", {})

        assert first.name == "name"
        assert third is first

    def test_list_item(self, app):
        """Test: List item path"""
        field = get_field_by_key_path(app, "posts", None, "authors.1", {})

        assert field.name == "name"

    def test_list_of_objects(self, app):
        """Test: Index segments of a list with fields keep the list field"""
        field = get_field_by_key_path(app, "posts", None, "gallery.3.src", {})

        assert field.name == "src"
        assert field.widget == "image"

    def test_unknown_subfield(self, app):
        """Test: Unknown names below an object resolve to nothing"""
        assert get_field_by_key_path(app, "posts", None, "gallery.0.width", {}) is None

    def test_variant_type(self, app):
        """Test: The variant is picked by the item's type value"""
        value_map = {"blocks.0.type": "image", "blocks.0.src": "a.png"}

        field = get_field_by_key_path(app, "posts", None, "blocks.0.src", value_map)

        assert field.name == "src"
        assert field.widget == "image"

    def test_variant_type_per_item(self, app):
        """Test: Each list item has its own variant"""
        value_map = {"blocks.0.type": "text", "blocks.1.type": "image"}

        text = get_field_by_key_path(app, "posts", None, "blocks.0", value_map)
        image = get_field_by_key_path(app, "posts", None, "blocks.1", value_map)

        assert text.name == "text"
        assert image.name == "image"

    def test_variant_type_missing(self, app):
        """Test: Without a type value no variant is selected"""
        assert get_field_by_key_path(app, "posts", None, "blocks.0.src", {}) is None

    def test_variant_unknown_type(self, app):
        """Test: A type value that names no variant"""
        value_map = {"blocks.0.type": "video"}

        assert get_field_by_key_path(app, "posts", None, "blocks.0.src", value_map) is None

    def test_file_collection(self, app):
        """Test: Fields of a file collection's file"""
        field = get_field_by_key_path(app, "settings", "general", "logo", {})

        assert field.name == "logo"

    def test_unknown_collection(self, app):
        """Test: Unknown collections resolve to nothing"""
        assert get_field_by_key_path(app, "missing", None, "title", {}) is None


class TestFallthrough:
    """Unmatched segments keep the previous field unless strict"""

    FIELDS = [
        FieldDefinition(
            name="authors",
            widget="list",
            field=FieldDefinition(name="name", widget="string"),
        ),
        FieldDefinition(name="cover", widget="image"),
        FieldDefinition(
            name="gallery",
            widget="list",
            fields=[FieldDefinition(name="src", widget="image")],
        ),
        FieldDefinition(
            name="meta",
            widget="object",
            fields=[FieldDefinition(name="description", widget="text")],
        ),
    ]

    def test_leaf_keeps_field(self):
        """Test: A segment below a leaf keeps the leaf"""
        assert resolve_field(self.FIELDS, "cover.alt", {}).name == "cover"
        assert resolve_field(self.FIELDS, "authors.0.name", {}).name == "name"

    def test_strict_leaf_fails(self):
        """Test: Strict resolution rejects segments below a leaf"""
        assert resolve_field(self.FIELDS, "cover.alt", {}, strict=True) is None
        assert resolve_field(self.FIELDS, "authors.0.name", {}, strict=True) is None

    def test_strict_list_of_objects(self):
        """Test: Strict resolution still accepts list indices of object lists"""
        field = resolve_field(self.FIELDS, "gallery.0.src", {}, strict=True)

        assert field.name == "src"

    def test_object_numeric_key(self):
        """Test: A numeric segment below a plain object"""
        assert resolve_field(self.FIELDS, "meta.0", {}).name == "meta"
        assert resolve_field(self.FIELDS, "meta.0", {}, strict=True) is None

    def test_strict_matches_lenient_on_valid_paths(self):
        """Test: Strict mode does not change well formed paths"""
        for path in ["cover", "authors.4", "gallery.1.src", "meta.description"]:
            assert resolve_field(self.FIELDS, path, {}, strict=True) is resolve_field(
                self.FIELDS, path, {}
            )


class TestGetFieldList:
    """Tests for get_field_list preconditions"""

    def test_entry_collection(self, app):
        """Test: Fields of a folder collection"""
        fields = get_field_list(app, "posts", None)

        assert [f.name for f in fields][:2] == ["title", "cover"]

    def test_file_name_for_folder_collection(self, app):
        """Test: Passing a file name to a folder collection is a contract violation"""
        with pytest.raises(SchemaContractError, match="not a file collection"):
            get_field_list(app, "posts", "general")

    def test_missing_file_name(self, app):
        """Test: A file collection requires a file name"""
        with pytest.raises(SchemaContractError, match="file name is required"):
            get_field_list(app, "settings", None)

    def test_unknown_file_name(self, app):
        """Test: A file name the collection does not declare"""
        with pytest.raises(SchemaContractError, match="not defined"):
            get_field_list(app, "settings", "missing")

    def test_unknown_collection(self, app):
        """Test: Unknown collections have no field list"""
        assert get_field_list(app, "missing", None) is None
