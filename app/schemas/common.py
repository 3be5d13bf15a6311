# app/schemas/common.py

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    База для всех документов хранилища и ответов API.
    В JSON поля хранятся в camelCase (isRedeemed, referralLink, ...),
    в Python-коде используются snake_case имена.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )
