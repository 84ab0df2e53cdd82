from dataclasses import dataclass, field
from typing import Annotated, Any, Mapping, Union

from pydantic import AfterValidator, BaseModel, EmailStr, Field, TypeAdapter, ValidationError

# ASCII digits only
PHONE_PATTERN = r"^\([0-9]{2}\) [0-9]{5}-[0-9]{4}$"

NAME_REQUIRED = "Campo nome é obrigatório"
NAME_TOO_SHORT = "O nome deve ter no mínimo 03 caracteres."
PHONE_INVALID = "Deve enviar um telefone válido"
EMAIL_INVALID = "Deve ser um e-mail válido."

# pydantic error types meaning "no usable value was sent"
_ABSENT = {"missing", "string_type"}

_ABSENT_MESSAGES = {
    "nome": NAME_REQUIRED,
}

_INVALID_MESSAGES = {
    "nome": NAME_TOO_SHORT,
    "telefone": PHONE_INVALID,
    "email": EMAIL_INVALID,
}

_email_adapter = TypeAdapter(EmailStr)


def _check_email(value: str) -> str:
    """Accept a syntactically valid address and keep it exactly as sent."""
    try:
        _email_adapter.validate_python(value)
    except ValidationError:
        raise ValueError("invalid email address") from None
    return value


class ContactCreate(BaseModel):
    nome: str = Field(min_length=3)
    telefone: str = Field(pattern=PHONE_PATTERN)
    email: Annotated[str, AfterValidator(_check_email)]


@dataclass(frozen=True)
class ContactValid:
    contact: ContactCreate


@dataclass(frozen=True)
class ContactInvalid:
    errors: list[str] = field(default_factory=list)


ValidationResult = Union[ContactValid, ContactInvalid]


def _message_for(error: dict) -> str:
    name = error["loc"][0]
    if error["type"] in _ABSENT and name in _ABSENT_MESSAGES:
        return _ABSENT_MESSAGES[name]
    return _INVALID_MESSAGES[name]


def validate_contact(data: Mapping[str, Any]) -> ValidationResult:
    """Check a submitted field mapping against the contact constraints.

    Every field is checked before returning, so a submission breaking all
    three constraints gets three messages, ordered nome, telefone, email.
    """
    try:
        contact = ContactCreate.model_validate(dict(data))
    except ValidationError as exc:
        errors: list[str] = []
        seen = set()
        for error in exc.errors():
            name = error["loc"][0]
            if name in seen:
                continue
            seen.add(name)
            errors.append(_message_for(error))
        return ContactInvalid(errors)
    return ContactValid(contact)
