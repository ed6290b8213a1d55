"""Shared schema base and response envelopes."""
from __future__ import annotations

from typing import Annotated, Generic, Literal, TypeVar

from fastapi import Path
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DataT = TypeVar("DataT")

# Largest value a SQLite INTEGER primary key can hold
MAX_ID = 2**63 - 1

ResourceId = Annotated[int, Field(ge=1, le=MAX_ID)]
PathId = Annotated[int, Path(ge=1, le=MAX_ID)]


class APIModel(BaseModel):
    """camelCase on the wire, snake_case in Python; either is accepted on input."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        str_strip_whitespace=True,
    )


class SuccessResponse(BaseModel, Generic[DataT]):
    status: Literal["success"] = "success"
    data: DataT


class ListResponse(BaseModel, Generic[DataT]):
    status: Literal["success"] = "success"
    results: int
    data: DataT


class ErrorResponse(BaseModel):
    status: Literal["error"] = "error"
    message: str
