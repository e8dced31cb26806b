"""Search source value objects."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from vodgate.domain.shared.urls import encode_uri_component


class Source(BaseModel):
    """
    Value object representing one third-party content-search backend.

    Sources are resolved per request from layered configuration and are
    immutable for the lifetime of that request. On the wire the endpoint
    is published under the ``api`` key, which is how site catalogues
    describe it.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    key: str = Field(..., min_length=1, description="Unique, stable source id")
    name: str = Field(..., description="Display name")
    endpoint: str = Field(
        ...,
        alias="api",
        min_length=1,
        description="Base API endpoint queried with ?ac=detail",
    )
    active: bool = Field(
        default=False,
        description="Whether search fans out to this source",
    )

    @field_validator("key", "endpoint")
    @classmethod
    def _strip(cls, v: str) -> str:
        v = v.strip()
        if not v:
            msg = "must not be blank"
            raise ValueError(msg)
        return v

    def to_wire(self) -> dict:
        """Serialize the source the way site catalogues describe it."""
        return self.model_dump(by_alias=True)

    def search_url(self, keyword: str) -> str:
        return f"{self.endpoint}?ac=detail&wd={encode_uri_component(keyword)}"

    def detail_url(self, item_id: str) -> str:
        return f"{self.endpoint}?ac=detail&ids={encode_uri_component(item_id)}"
