# (c) Nelen & Schuurmans

from collections.abc import Iterator
from collections.abc import Mapping
from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

__all__ = ["Headers"]


class Headers(Mapping[str, str]):
    """A read-only mapping of header names to header values.

    Keys are case-sensitive. The mapping passed in is copied, so mutating it
    afterwards does not affect the Headers instance.

    Usable as a pydantic field type: any mapping of strings validates into a
    (fresh) Headers instance.
    """

    __slots__ = ("_data",)

    def __init__(self, headers: Mapping[str, str] | None = None):
        self._data: dict[str, str] = dict(headers or {})

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __hash__(self) -> int:
        return hash(frozenset(self._data.items()))

    def __repr__(self) -> str:
        return f"Headers({self._data!r})"

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_after_validator_function(
            cls,
            core_schema.dict_schema(
                keys_schema=core_schema.str_schema(),
                values_schema=core_schema.str_schema(),
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(dict),
        )
