# bookyz/storage.py

from typing import Optional

from sqlmodel import Session

from .models import KeyValue


class KeyValueStore:
    """Local key-value storage. Every call is its own session; last write wins."""

    def __init__(self, engine):
        self.engine = engine

    def get(self, key: str) -> Optional[str]:
        with Session(self.engine) as session:
            row = session.get(KeyValue, key)
            return row.value if row is not None else None

    def set(self, key: str, value: str) -> None:
        with Session(self.engine) as session:
            row = session.get(KeyValue, key)
            if row is None:
                row = KeyValue(key=key, value=value)
            else:
                row.value = value
            session.add(row)
            session.commit()

    def delete(self, key: str) -> None:
        with Session(self.engine) as session:
            row = session.get(KeyValue, key)
            if row is not None:
                session.delete(row)
                session.commit()
