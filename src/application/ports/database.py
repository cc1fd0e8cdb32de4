"""Database port for the ledger storage."""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the engine the transaction store writes to.

    Keeps URL resolution and pooling out of the application layer.
    """

    def get_ledger_engine(self) -> Engine:
        """Return the SQLAlchemy engine of the ledger database."""


__all__ = ["DatabaseEnginePort"]
