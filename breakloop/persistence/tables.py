"""SQLAlchemy table definitions for Breakloop.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import Column, LargeBinary, MetaData, String, Table, text
from sqlalchemy.dialects.postgresql import TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# KV_RECORDS TABLE (one row per persisted collection)
# ============================================================================
kv_records_table = Table(
    "kv_records",
    metadata,
    Column("key", String(255), primary_key=True),
    Column("value", LargeBinary, nullable=False),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")
    ),
)
