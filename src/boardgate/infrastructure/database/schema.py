"""SQLAlchemy Core table definitions for board and membership storage.

Only the columns the policy evaluator reads, plus titles for the CLI.
``boards.comment_policy`` is free text: values are checked on
write by the request schemas and resolved on read by the domain layer.
"""

from __future__ import annotations

from sqlalchemy import Column, ForeignKey, Index, MetaData, Table, Text, UniqueConstraint

metadata = MetaData()

workspaces = Table(
    "workspaces",
    metadata,
    Column("id", Text, primary_key=True),
    Column("title", Text, nullable=False, default="", server_default=""),
)

boards = Table(
    "boards",
    metadata,
    Column("id", Text, primary_key=True),
    Column("title", Text, nullable=False, default="", server_default=""),
    Column("comment_policy", Text),  # NULL = never set, resolves to "members"
    Column("workspace_id", Text, ForeignKey("workspaces.id")),
    Index("idx_board_workspace_id", "workspace_id"),
)

board_members = Table(
    "board_members",
    metadata,
    Column("board_id", Text, ForeignKey("boards.id"), nullable=False),
    Column("user_id", Text, nullable=False),
    UniqueConstraint("board_id", "user_id"),
)

workspace_members = Table(
    "workspace_members",
    metadata,
    Column("workspace_id", Text, ForeignKey("workspaces.id"), nullable=False),
    Column("user_id", Text, nullable=False),
    UniqueConstraint("workspace_id", "user_id"),
)
