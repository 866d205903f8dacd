#!/usr/bin/env python3
"""
Movie schemas.
MovieCreate checks a complete record, MovieUpdate checks only the fields a client supplies.
"""

from datetime import date
from typing import Annotated, Any, Dict, List
from pydantic import AnyUrl, BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator

FIRST_FILM_YEAR = 1888

_url_adapter = TypeAdapter(AnyUrl)

GenreLabel = Annotated[str, Field(min_length=1)]


def current_year() -> int:
    return date.today().year


class MovieCreate(BaseModel):
    """Full movie payload; every field except rate is required."""

    model_config = ConfigDict(strict=True, extra='ignore')

    title: str = Field(min_length=1)
    year: int = Field(ge=FIRST_FILM_YEAR)
    director: str = Field(min_length=1)
    duration: int = Field(gt=0)
    poster: str
    genre: List[GenreLabel] = Field(min_length=1)
    rate: float = Field(0, ge=0, le=10)

    @field_validator('year', 'duration', mode='before')
    @classmethod
    def whole_float_to_int(cls, value: Any) -> Any:
        # JSON has one number type, so 2010.0 is an integer here
        if isinstance(value, float) and value.is_integer():
            return int(value)
        return value

    @field_validator('year')
    @classmethod
    def year_not_in_future(cls, value: int) -> int:
        latest = current_year()
        if value > latest:
            raise ValueError(f'Year must be between {FIRST_FILM_YEAR} and {latest}')
        return value

    @field_validator('poster')
    @classmethod
    def poster_is_url(cls, value: str) -> str:
        try:
            _url_adapter.validate_python(value)
        except ValidationError:
            raise ValueError('Poster must be a valid URL')
        # Keep the text exactly as the client sent it
        return value


class MovieUpdate(MovieCreate):
    """Partial movie payload: same constraints, nothing required."""

    # Defaults are never validated, so omitted fields pass while an explicit null fails the type check
    title: str = Field(None, min_length=1)
    year: int = Field(None, ge=FIRST_FILM_YEAR)
    director: str = Field(None, min_length=1)
    duration: int = Field(None, gt=0)
    poster: str = None
    genre: List[GenreLabel] = Field(None, min_length=1)
    rate: float = Field(None, ge=0, le=10)


def format_validation_errors(error: ValidationError) -> List[Dict[str, Any]]:
    """Flatten a pydantic ValidationError into JSON-friendly per-field issues."""
    return [
        {
            'field': '.'.join(str(part) for part in issue['loc']),
            'type': issue['type'],
            'message': issue['msg'],
        }
        for issue in error.errors()
    ]
