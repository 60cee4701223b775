from flask import request
from pydantic import ValidationError

from brickly.Utils.errors import ValidationFailed


def first_error_message(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    err = errors[0]
    loc = ".".join(str(part) for part in err.get("loc", ()))
    msg = err.get("msg", "Invalid request")
    return f"{loc}: {msg}" if loc else msg


def parse_body(schema):
    body = request.get_json(silent=True)
    if body is None:
        body = {}
    try:
        return schema.model_validate(body)
    except ValidationError as e:
        raise ValidationFailed(first_error_message(e))


def parse_query(schema):
    try:
        return schema.model_validate(request.args.to_dict())
    except ValidationError as e:
        raise ValidationFailed(first_error_message(e))
