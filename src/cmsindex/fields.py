"""Resolve a content key path to the field definition that governs it."""

import logging
from typing import Any, List, Mapping, Optional

from .collection import get_collection
from .consts import KEY_PATH_DELIMITER
from .errors import SchemaContractError
from .schema import FieldDefinition, ListShape, ObjectShape, VariantShape, find_field
from .state import AppContext
from .utils import is_numeric_key

logger = logging.getLogger(__name__)


def get_field_list(
    ctx: AppContext, collection_name: str, file_name: Optional[str]
) -> List[FieldDefinition] | None:
    """Get the top level fields of a collection, or of one of its files.

    Returns:
        The field list, or None when the collection does not exist

    Raises:
        SchemaContractError: If ``file_name`` does not fit the collection type
    """
    collection = get_collection(ctx, collection_name).definition
    if collection is None:
        return None

    if file_name:
        if not collection.is_file_collection:
            raise SchemaContractError(
                f"Collection '{collection_name}' is not a file collection, "
                f"got file name '{file_name}'"
            )
        file = collection.get_file_definition(file_name)
        if file is None:
            raise SchemaContractError(
                f"File '{file_name}' is not defined in collection '{collection_name}'"
            )
        return file.fields

    if collection.is_file_collection:
        raise SchemaContractError(
            f"Collection '{collection_name}' is a file collection, a file name is required"
        )

    return collection.fields or []


def resolve_field(
    fields: List[FieldDefinition],
    key_path: str,
    value_map: Mapping[str, Any],
    strict: bool = False,
) -> FieldDefinition | None:
    """Walk ``key_path`` through a field list.

    The first segment is matched by name. Each following segment descends:

    - into ``field`` of a homogeneous list, whatever the segment is;
    - into the ``fields`` member of that name, for a non-numeric segment;
    - into the variant of ``types`` named by ``value_map[<path to item>.<type_key>]``,
      for a numeric segment.

    A segment that matches none of these leaves the current field in place,
    so ``authors.0.name`` on a list of strings still yields the list item
    field. With ``strict`` such a segment fails the lookup instead, except
    for the index of a list of objects.

    Args:
        fields: Top level fields
        key_path: Dot separated path, e.g. ``blocks.0.src``
        value_map: Flattened content the path belongs to, used for variants
        strict: Fail on segments that do not match

    Returns:
        The governing field definition, or None
    """
    keys = key_path.split(KEY_PATH_DELIMITER)
    field = find_field(fields, keys[0])

    for index in range(1, len(keys)):
        if field is None:
            break

        key = keys[index]
        numeric = is_numeric_key(key)
        shape = field.shape

        if isinstance(shape, ListShape):
            field = shape.field
        elif isinstance(shape, ObjectShape) and not numeric:
            field = find_field(shape.fields, key)
        elif isinstance(shape, VariantShape) and numeric:
            type_path = KEY_PATH_DELIMITER.join(keys[: index + 1] + [shape.type_key])
            field = find_field(shape.types, value_map.get(type_path))
        elif strict and not (isinstance(shape, ObjectShape) and field.widget == "list"):
            return None

    return field


def get_field_by_key_path(
    ctx: AppContext,
    collection_name: str,
    file_name: Optional[str],
    key_path: str,
    value_map: Mapping[str, Any],
    strict: bool = False,
) -> FieldDefinition | None:
    """Get the field that matches a key path of a collection's (or file's) content."""
    fields = get_field_list(ctx, collection_name, file_name)
    if fields is None:
        return None

    field = resolve_field(fields, key_path, value_map, strict=strict)
    if field is None:
        logger.debug(f"No field for key path '{key_path}' in {collection_name}")
    return field
