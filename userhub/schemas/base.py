# File: userhub/schemas/base.py

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Schemas speak camelCase on the wire (``phoneNumber``) and snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
