"""
app/mappers package marker.
"""

from app.mappers.schema_mapper import (
    DEFAULT_COLUMN_ALIASES,
    LOGICAL_FIELDS,
    MappingResolution,
    SchemaMapper,
)

__all__ = [
    "DEFAULT_COLUMN_ALIASES",
    "LOGICAL_FIELDS",
    "MappingResolution",
    "SchemaMapper",
]
