"""
Request schemas (Pydantic) for the write endpoints.
"""
from typing import Any, ClassVar, Dict, Optional, Type, TypeVar

from pydantic import BaseModel, Field, StrictInt, StrictStr
from pydantic import ValidationError as PydanticValidationError

from teamscore.errors import ValidationError

SchemaT = TypeVar('SchemaT', bound=BaseModel)


class LoginRequest(BaseModel):
    """Request schema for teacher login."""
    teacherId: StrictStr = Field(..., min_length=1)
    password: StrictStr = Field(..., min_length=1)

    error_messages: ClassVar[Dict[str, str]] = {
        'teacherId': "L'identifiant est requis",
        'password': 'Le mot de passe est requis',
    }


class ScoreEntryCreate(BaseModel):
    """Request schema for appending a score entry."""
    teamId: StrictInt
    teacherId: StrictInt
    action: StrictStr = Field(..., min_length=1)
    points: StrictInt

    error_messages: ClassVar[Dict[str, str]] = {
        'teamId.missing': "L'équipe est requise",
        'teamId': "L'identifiant d'équipe doit être un nombre entier",
        'teacherId.missing': "L'enseignant est requis",
        'teacherId': "L'identifiant d'enseignant doit être un nombre entier",
        'action': "L'action est requise",
        'points': 'Les points doivent être un nombre entier',
    }


def parse_request(schema: Type[SchemaT], data: Optional[Dict[str, Any]]) -> SchemaT:
    """Validate a JSON body, raising ValidationError with the first message."""
    if not isinstance(data, dict):
        raise ValidationError('Corps de requête JSON attendu')
    try:
        return schema.model_validate(data)
    except PydanticValidationError as exc:
        raise ValidationError(first_error_message(schema, exc)) from exc


def first_error_message(schema: Type[BaseModel], exc: PydanticValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return ValidationError.message
    first = errors[0]
    field = str(first['loc'][0]) if first.get('loc') else ''
    messages = getattr(schema, 'error_messages', {})
    # A "field.error_type" key wins over the plain field key
    for key in (f"{field}.{first.get('type')}", field):
        if key in messages:
            return messages[key]
    return f"{field}: {first['msg']}" if field else first['msg']
