"""Common base for every model exchanged with the Rango API."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Immutable value object with camelCase wire names.

    Unknown wire fields are ignored; snake_case names are accepted too.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


# Integer/boolean fields are never coerced from strings
Decimals = Annotated[StrictInt, Field(ge=0)]
Seconds = Annotated[StrictInt, Field(ge=0)]
Flag = StrictBool
