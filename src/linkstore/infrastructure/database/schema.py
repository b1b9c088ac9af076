"""SQLAlchemy Core table definition for the link store.

One table, two columns in positional order. There is deliberately no
primary key or unique constraint: the same link may be stored twice for
one user and each copy is a separate row.
"""

from __future__ import annotations

from sqlalchemy import Column, Index, Integer, MetaData, Table, Text

metadata = MetaData()

links = Table(
    "links",
    metadata,
    Column("user_id", Integer, nullable=False),
    Column("link", Text, nullable=False),
)

Index("ix_links_user_id", links.c.user_id)
