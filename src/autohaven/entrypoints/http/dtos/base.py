from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Serializes as camelCase (userId, createdAt); accepts snake_case on input too."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )
