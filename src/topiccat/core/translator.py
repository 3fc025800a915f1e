"""Translation of registry schemas into table schemas.

Only Avro subjects are translated. The top-level record's fields become
columns in declaration order; each field's Avro type name goes through
`avro_types.AVRO_TYPE_MAPPING`. Avro fields are required unless declared
as a union with "null", so plain fields map to NOT NULL columns.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Mapping

from fastavro import parse_schema
from fastavro.schema import SchemaParseException, UnknownType

from topiccat.core.avro_types import convert_to_data_type
from topiccat.core.errors import CatalogError, UnsupportedSchemaTypeError
from topiccat.core.models import DataType, SchemaDescriptor, SchemaType, TableSchema

logger = logging.getLogger(__name__)

_NULL = "null"


def _parse_avro(definition: str) -> tuple[dict[str, Any], dict[str, Any]]:
    """Return (raw record json, named schemas) after validating with fastavro."""
    try:
        raw = json.loads(definition)
        named: dict[str, Any] = {}
        parse_schema(raw, named_schemas=named)
    except (ValueError, TypeError, SchemaParseException, UnknownType) as exc:
        raise CatalogError(f"Invalid avro schema: {exc}") from exc

    if not isinstance(raw, dict) or raw.get("type") != "record":
        raise CatalogError("Avro schema must be a record at the top level.")
    return raw, named


def _record_namespace(record: Mapping[str, Any]) -> str | None:
    """Return the namespace of a named type; a dotted name overrides `namespace`."""
    name = str(record.get("name") or "")
    if "." in name:
        return name.rpartition(".")[0]
    return record.get("namespace")


def _lookup_named(
    name: str, namespace: str | None, named: Mapping[str, Any]
) -> Any | None:
    """Resolve a named type reference (short or full name)."""
    if name in named:
        return named[name]
    if namespace and f"{namespace}.{name}" in named:
        return named[f"{namespace}.{name}"]
    return None


def avro_type_name(
    avro_type: Any,
    *,
    namespace: str | None = None,
    named: Mapping[str, Any] | None = None,
) -> tuple[str, bool]:
    """
    Return (type name, nullable) for an Avro field type.

    - "int"                       -> ("int", False)
    - {"type": "string", ...}     -> ("string", False)
    - ["null", "long"]            -> ("long", True)
    - references to named types   -> the named type's kind ("enum", "fixed", ...)
    - any other union             -> ("union", False)
    """
    named = named or {}
    if isinstance(avro_type, list):
        branches = [b for b in avro_type if b != _NULL]
        if len(avro_type) == 2 and len(branches) == 1:
            name, _ = avro_type_name(branches[0], namespace=namespace, named=named)
            return name, True
        return "union", False
    if isinstance(avro_type, dict):
        return avro_type_name(avro_type.get("type"), namespace=namespace, named=named)
    if isinstance(avro_type, str):
        resolved = _lookup_named(avro_type, namespace, named)
        if resolved is not None and isinstance(resolved, dict):
            return str(resolved.get("type")), False
        return avro_type, avro_type == _NULL
    raise CatalogError(f"Unrecognized avro type declaration: {avro_type!r}")


def translate_schema(descriptor: SchemaDescriptor) -> TableSchema:
    """
    Translate a registry descriptor into a TableSchema.

    Raises:
        UnsupportedSchemaTypeError: the descriptor is not Avro.
        UnmappedTypeError: a field type has no column counterpart.
        CatalogError: the definition is not a valid Avro record.
    """
    if descriptor.schema_type != SchemaType.AVRO:
        raise UnsupportedSchemaTypeError("Only support avro schema.")

    record, named = _parse_avro(descriptor.definition)
    namespace = _record_namespace(record)
    builder = TableSchema.builder()
    for field in record.get("fields", []):
        type_name, nullable = avro_type_name(
            field.get("type"), namespace=namespace, named=named
        )
        mapped: DataType = convert_to_data_type(type_name)
        try:
            builder.column(
                field["name"], mapped.nullable_copy() if nullable else mapped.not_null()
            )
        except ValueError as exc:
            raise CatalogError(str(exc)) from exc

    schema = builder.build()
    logger.debug(
        "Translated subject %s into %d columns", descriptor.subject, len(schema.columns)
    )
    return schema
