from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

class Message(BaseModel):
    message: str

class CamelModel(BaseModel):
    """Base for payloads and responses exchanged with the front end in camelCase."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
