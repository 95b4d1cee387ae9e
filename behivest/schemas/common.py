"""Base model shared by calculator requests and results."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        allow_inf_nan=False,
    )


class ResultModel(CamelModel):
    """Immutable calculator output."""

    model_config = ConfigDict(frozen=True)
