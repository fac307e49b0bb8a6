# bookyz/models.py

from sqlmodel import SQLModel, Field


class KeyValue(SQLModel, table=True):
    key: str = Field(primary_key=True)
    value: str  # serialized blob, opaque to the storage layer
