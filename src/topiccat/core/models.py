"""Core domain models for the topic catalog.

These models represent catalog entities (paths, databases, tables, column
types) and schema registry responses in a simple, immutable form.
They are intentionally free of Kafka / Schema Registry SDK types and
UI/CLI concerns.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class ObjectPath:
    """Path of a catalog object: `<database>.<object>`."""

    database_name: str
    object_name: str

    @property
    def full_name(self) -> str:
        return f"{self.database_name}.{self.object_name}"

    @classmethod
    def from_full_name(cls, full_name: str) -> ObjectPath:
        """Split `database.object` into an ObjectPath."""
        database, sep, name = full_name.strip().partition(".")
        if not sep or not database or not name:
            raise ValueError("Object path must be in the form `database.object`.")
        return cls(database_name=database, object_name=name)

    def __str__(self) -> str:
        return self.full_name


@dataclass(frozen=True)
class DataType:
    """Column type of the table model (e.g. INT, STRING)."""

    type_name: str
    nullable: bool = True

    def not_null(self) -> DataType:
        return replace(self, nullable=False)

    def nullable_copy(self) -> DataType:
        return replace(self, nullable=True)

    def __str__(self) -> str:
        return self.type_name if self.nullable else f"{self.type_name} NOT NULL"


@dataclass(frozen=True)
class Column:
    """A named, typed table column."""

    name: str
    data_type: DataType


@dataclass(frozen=True)
class TableSchema:
    """Ordered list of columns of a table."""

    columns: tuple[Column, ...] = ()

    @property
    def column_names(self) -> list[str]:
        return [c.name for c in self.columns]

    @property
    def data_types(self) -> list[DataType]:
        return [c.data_type for c in self.columns]

    @staticmethod
    def builder() -> SchemaBuilder:
        return SchemaBuilder()


class SchemaBuilder:
    """Collects columns in call order and builds a TableSchema."""

    def __init__(self) -> None:
        self._columns: list[Column] = []

    def column(self, name: str, data_type: DataType) -> SchemaBuilder:
        if any(c.name == name for c in self._columns):
            raise ValueError(f"Column '{name}' is defined more than once.")
        self._columns.append(Column(name=name, data_type=data_type))
        return self

    def build(self) -> TableSchema:
        return TableSchema(columns=tuple(self._columns))


@dataclass(frozen=True)
class CatalogDatabase:
    """Lightweight representation of a catalog database."""

    name: str
    properties: Mapping[str, str] = field(default_factory=dict)
    comment: str | None = None


@dataclass(frozen=True)
class CatalogTable:
    """
    Resolved table: translated schema plus connector options.

    Attributes:
        schema: Columns in the declaration order of the source schema.
        options: Connector configuration (connector kind, topic, brokers).
        partition_keys: Always empty for topic tables.
        comment: Optional table comment.
    """

    schema: TableSchema
    options: Mapping[str, str]
    partition_keys: tuple[str, ...] = ()
    comment: str | None = None


@dataclass(frozen=True)
class TableStatistics:
    """Table level statistics; -1 means unknown."""

    row_count: int
    file_count: int
    total_size: int
    raw_data_size: int


@dataclass(frozen=True)
class ColumnStatistics:
    """Per-column statistics keyed by column name."""

    column_statistics: Mapping[str, object] = field(
        default_factory=lambda: MappingProxyType({})
    )


UNKNOWN_TABLE_STATISTICS = TableStatistics(
    row_count=-1, file_count=-1, total_size=-1, raw_data_size=-1
)
UNKNOWN_COLUMN_STATISTICS = ColumnStatistics()


class SchemaType(str, Enum):
    """
    Encodings a schema registry can hand back for a subject.

    Values:
        AVRO: Avro record definition (the only encoding the catalog translates).
        JSON: JSON Schema document.
        PROTOBUF: Protocol Buffers IDL.
    """

    AVRO = "AVRO"
    JSON = "JSON"
    PROTOBUF = "PROTOBUF"


@dataclass(frozen=True)
class SchemaDescriptor:
    """
    Latest schema registered for a subject.

    Attributes:
        subject: Registry subject, used as the topic / table name.
        schema_type: Encoding tag of the definition.
        definition: Serialized schema (Avro JSON for AVRO subjects).
        schema_id: Registry-wide schema id, if known.
        version: Subject version, if known.
    """

    subject: str
    schema_type: SchemaType
    definition: str
    schema_id: int | None = None
    version: int | None = None
