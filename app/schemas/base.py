from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class RequestModel(BaseModel):
    """Accepts camelCase keys from the frontend as well as snake_case"""

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
    }


class ResponseModel(BaseModel):
    """Built from ORM objects, serialized with camelCase keys"""

    model_config = {
        "from_attributes": True,
        "alias_generator": to_camel,
        "populate_by_name": True,
    }
