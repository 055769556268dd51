from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# ---------------------------------------------------------------------------
# Hierarchy data
# ---------------------------------------------------------------------------


class Node(BaseModel):
    name: str
    children: list["Node"] | None = None


Node.model_rebuild()  # necessary for recursive types


# ---------------------------------------------------------------------------
# Postman collection (schema v2.1)
# ---------------------------------------------------------------------------


class Script(BaseModel):
    type: str = "text/javascript"
    exec: list[str]


class Event(BaseModel):
    listen: str
    script: Script


class Header(BaseModel):
    key: str
    value: str


class Body(BaseModel):
    mode: str = "raw"
    raw: str


class Request(BaseModel):
    method: str
    header: list[Header] = Field(default_factory=list)
    body: Body | None = None
    url: str
    description: str


class RequestItem(BaseModel):
    name: str
    event: list[Event]
    request: Request
    response: list[Any] = Field(default_factory=list)


class Folder(BaseModel):
    name: str
    item: list[RequestItem]


class Variable(BaseModel):
    key: str
    value: str
    type: str = "string"


class Info(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    postman_id: str = Field(alias="_postman_id")
    name: str
    description: str
    schema_url: str = Field(
        default="https://schema.getpostman.com/json/collection/v2.1.0/collection.json",
        alias="schema",
    )


class CollectionDocument(BaseModel):
    model_config = ConfigDict(frozen=True)

    info: Info
    item: list[Folder]
    event: list[Event]
    variable: list[Variable]


class Metadata(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    generated_at: str
    build_number: str
    base_url: str
    collection_name: str
    request_count: int
    file_name: str
