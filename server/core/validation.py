# server/core/validation.py

import os
from dotenv import load_dotenv
from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, EmailStr, Field, ValidationInfo, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticCustomError
from core.errors import ValidationError


load_dotenv()

EMAIL_CHECK_DNS = os.getenv("EMAIL_CHECK_DNS", "false").lower() in ("1", "true", "yes")

ErrorMap = dict[str, list[str]]

# pydantic error type -> message shown to API clients
MESSAGES = {
    "missing": "The {label} field is required.",
    "string_type": "The {label} field must be a string.",
    "string_too_short": "The {label} field must be at least {min_length} characters.",
    "string_too_long": "The {label} field must not be greater than {max_length} characters.",
    "value_error": "The {label} field must be a valid email address.",
    "confirmed": "The {label} field confirmation does not match.",
}

REQUEST_LOCATIONS = ("body", "path", "query", "header", "cookie")


def _blank_is_missing(value):
    if value is None or (isinstance(value, str) and not value.strip()):
        raise PydanticCustomError("missing", "Field required")
    return value


# -------------------------------
# Request schemas
# -------------------------------

class RegisterRequest(BaseModel):
    name: str = Field(max_length=250)
    email: EmailStr
    password: str = Field(min_length=8, max_length=72)
    password_confirmation: str | None = Field(default=None, validate_default=True)

    @field_validator("name", "email", "password", mode="before")
    @classmethod
    def required(cls, value):
        return _blank_is_missing(value)

    @field_validator("email")
    @classmethod
    def email_rules(cls, value: str) -> str:
        if len(value) > 250:
            raise PydanticCustomError(
                "string_too_long", "String should have at most {max_length} characters", {"max_length": 250}
            )
        if EMAIL_CHECK_DNS:
            try:
                validate_email(value, check_deliverability=True)
            except EmailNotValidError as e:
                raise PydanticCustomError("value_error", "value is not a valid email address: {reason}", {"reason": str(e)})
        return value

    @field_validator("password_confirmation")
    @classmethod
    def confirmed(cls, value, info: ValidationInfo):
        # only present in info.data when the password itself was valid
        password = info.data.get("password")
        if password is not None and value != password:
            raise PydanticCustomError("confirmed", "Password confirmation does not match", {"field": "password"})
        return value


class LoginRequest(BaseModel):
    email: EmailStr
    password: str

    @field_validator("email", "password", mode="before")
    @classmethod
    def required(cls, value):
        return _blank_is_missing(value)


class BlogRequest(BaseModel):
    title: str = Field(max_length=250)
    content: str

    @field_validator("title", "content", mode="before")
    @classmethod
    def required(cls, value):
        return _blank_is_missing(value)


# -------------------------------
# Error map
# -------------------------------

def error_map(errors: list[dict]) -> ErrorMap:
    """
    Turns pydantic's error list into `{field: [messages]}`.
    A leading request location (`body`, `path`, ...) is dropped from the field name.
    """
    result: ErrorMap = {}
    for error in errors:
        loc = [str(part) for part in error["loc"]]
        if len(loc) > 1 and loc[0] in REQUEST_LOCATIONS:
            loc = loc[1:]
        ctx = error.get("ctx") or {}
        field = ctx.get("field") or ".".join(loc) or "body"

        template = MESSAGES.get(error["type"])
        if template is None:
            message = error["msg"]
        else:
            message = template.format(label=field.replace("_", " "), **ctx)
        result.setdefault(field, []).append(message)
    return result


def parse(model: type[BaseModel], payload: dict) -> tuple[BaseModel | None, ErrorMap]:
    try:
        return model.model_validate(payload), {}
    except PydanticValidationError as e:
        return None, error_map(e.errors())


def validate(model: type[BaseModel], payload: dict) -> BaseModel:
    request, errors = parse(model, payload)
    if errors:
        raise ValidationError(errors)
    return request
