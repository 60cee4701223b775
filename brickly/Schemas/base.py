from typing import Union
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, confloat, conint
from pydantic.alias_generators import to_camel

# JSON booleans and numeric strings are rejected rather than coerced
Count = conint(strict=True, gt=0)
Percent = Union[conint(strict=True, ge=0), confloat(strict=True, ge=0)]
# anything below one cent would be stored as 0
Money = Union[conint(strict=True, ge=1), confloat(strict=True, ge=0.01)]


class CamelModel(BaseModel):
    # camelCase on the wire, snake_case in Python; reads ORM attributes by field name
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


def dump(schema, obj) -> dict:
    return schema.model_validate(obj).model_dump(mode="json", by_alias=True)


def dump_many(schema, objs) -> list:
    return [dump(schema, o) for o in objs]


def check_http_urls(urls: list) -> list:
    for url in urls:
        parsed = urlparse(url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError(f"Invalid url: {url}")
    return urls
