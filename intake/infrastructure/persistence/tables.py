"""SQLAlchemy table definitions - dialect-agnostic (works with SQLite and PostgreSQL)."""

from sqlalchemy import Column, DateTime, Index, MetaData, String, Table, Text
from sqlalchemy.types import JSON

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# REQUEST TYPES TABLE
# ============================================================================
request_types_table = Table(
    "request_types",
    metadata,
    Column("id", String, primary_key=True),  # UUID as string
    Column("source_organization", String(255), nullable=False),  # RSIN of the owner
    Column("name", String(255), nullable=False),
    Column("description", Text, nullable=True),
    Column("properties", JSON, nullable=False),  # Owned properties, in order
    # No foreign key: dangling and cyclic references are reported on read
    Column("extends_id", String, nullable=True),
    Column("available_from", DateTime(timezone=True), nullable=True),
    Column("available_until", DateTime(timezone=True), nullable=True),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
)

Index("idx_request_types_extends_id", request_types_table.c.extends_id)
Index("idx_request_types_source_organization", request_types_table.c.source_organization)
