# (c) Nelen & Schuurmans

from typing import Type
from typing import TypeVar

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import ValidationError

from .exceptions import BadRequest

__all__ = ["ValueObject"]


T = TypeVar("T", bound="ValueObject")


class ValueObject(BaseModel):
    model_config = ConfigDict(frozen=True)

    def run_validation(self: T) -> T:
        try:
            return self.__class__(**self._field_values())
        except ValidationError as e:
            raise BadRequest(e)

    @classmethod
    def create(cls: Type[T], **values) -> T:
        try:
            return cls(**values)
        except ValidationError as e:
            raise BadRequest(e)

    def update(self: T, **values) -> T:
        try:
            return self.__class__(**{**self._field_values(), **values})
        except ValidationError as e:
            raise BadRequest(e)

    def _field_values(self):
        # field values are passed on by reference; model_dump() would copy
        # nested models and mappings
        return {name: getattr(self, name) for name in self.__class__.model_fields}

    def __hash__(self):
        return hash(self.__class__) + hash(tuple(self.__dict__.values()))
