"""
Shared Pydantic base classes.

Request bodies use camelCase keys, rows read from the store are
serialized with the store's PascalCase column names.
"""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel, to_pascal


class RequestModel(BaseModel):
    """Incoming JSON body."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, allow_inf_nan=False)


class EchoModel(BaseModel):
    """Entity echoed back after a write, or a computed response object."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class RowModel(BaseModel):
    """Row read from the store."""

    model_config = ConfigDict(alias_generator=to_pascal, populate_by_name=True, from_attributes=True)


class Message(BaseModel):
    """Plain ``{message}`` body."""

    message: str
