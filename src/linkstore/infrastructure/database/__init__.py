"""SQL engine and schema for the link store via SQLAlchemy Core."""

from linkstore.infrastructure.database.engine import (
    create_db_engine,
    init_database,
    sqlite_file_path,
)
from linkstore.infrastructure.database.schema import links, metadata

__all__ = [
    "create_db_engine",
    "init_database",
    "links",
    "metadata",
    "sqlite_file_path",
]
