"""Avro type name -> column type mapping.

The mapping is total over the Avro types that can back a flat column.
Adding a type is a one-line edit of `AVRO_TYPE_MAPPING`; names missing
from it (record, array, map, union, named type references) are rejected.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from topiccat.core.errors import UnmappedTypeError
from topiccat.core.models import DataType

NULL = DataType("NULL")
BOOLEAN = DataType("BOOLEAN")
INT = DataType("INT")
BIGINT = DataType("BIGINT")
FLOAT = DataType("FLOAT")
DOUBLE = DataType("DOUBLE")
BYTES = DataType("BYTES")
STRING = DataType("STRING")

AVRO_TYPE_MAPPING: Mapping[str, DataType] = MappingProxyType(
    {
        "null": NULL,
        "boolean": BOOLEAN,
        "int": INT,
        "long": BIGINT,
        "float": FLOAT,
        "double": DOUBLE,
        "bytes": BYTES,
        "string": STRING,
        "enum": STRING,
        "fixed": BYTES,
    }
)


def convert_to_data_type(type_name: str) -> DataType:
    """Return the column type for an Avro type name."""
    try:
        return AVRO_TYPE_MAPPING[type_name]
    except KeyError:
        raise UnmappedTypeError(
            f"Unsupported avro type '{type_name}'; "
            f"supported types: {', '.join(sorted(AVRO_TYPE_MAPPING))}."
        ) from None
