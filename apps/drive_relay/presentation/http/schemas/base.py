"""Schema base."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """JSON 필드명을 camelCase로 직렬화하는 베이스 모델."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
