"""Decoding of Hangar response bodies into typed models.

Decoding is all-or-nothing: either the whole payload validates and a frozen
model comes back, or ``DecodeError`` is raised naming every failing field path.
"""

from __future__ import annotations

import logging
from types import UnionType
from typing import Annotated, Any, TypeVar, Union, get_args, get_origin, overload

from pydantic import TypeAdapter, ValidationError

logger = logging.getLogger(__name__)

R = TypeVar("R")


class HangarError(Exception):
    """Base exception for errors raised by this package."""


class DecodeError(HangarError, ValueError):
    """A response body did not match the expected shape.

    ``paths`` lists the failing locations using wire (camelCase) names, joined
    with dots, e.g. ``settings.tags.0``. An empty string means the document
    itself was rejected (invalid JSON, wrong top-level type).
    """

    def __init__(self, response_type: Any, errors: list[dict[str, Any]]):
        self.response_type = response_type
        self.errors = errors
        self.paths = [_format_loc(error.get("loc", ())) for error in errors]
        details = "; ".join(f"{path or '<root>'}: {error.get('msg', 'invalid')}" for path, error in zip(self.paths, errors))
        super().__init__(f"Failed to decode {_type_name(response_type)}: {details}")

    @classmethod
    def from_validation_error(cls, response_type: Any, exc: ValidationError) -> DecodeError:
        return cls(response_type, exc.errors(include_url=False))


def _format_loc(loc: tuple[int | str, ...]) -> str:
    return ".".join(str(part) for part in loc)


def _type_name(response_type: Any) -> str:
    if get_origin(response_type) is Annotated:
        response_type = get_args(response_type)[0]
    if get_origin(response_type) in (Union, UnionType):
        return " | ".join(_type_name(member) for member in get_args(response_type))
    return getattr(response_type, "__name__", None) or repr(response_type)


@overload
def decode(response_type: type[R], body: str | bytes | bytearray | Any) -> R: ...


@overload
def decode(response_type: Any, body: str | bytes | bytearray | Any) -> Any: ...


def decode(response_type: Any, body: Any) -> Any:
    """Validate ``body`` against ``response_type``.

    Args:
        response_type: Any pydantic-validatable type, usually one of the
            response models (``ProjectsResponse``, ``Version``, ...), a
            parametrised ``ByPlatform`` or ``VersionDownloads``.
        body: Raw JSON as ``str``/``bytes``, or data that was already parsed.
            Only the camelCase wire keys are read; snake_case attribute
            names are for building models in Python.

    Raises:
        DecodeError: If the body is not valid JSON or does not match the type.
    """
    adapter: TypeAdapter[Any] = TypeAdapter(response_type)
    try:
        # LEARN: validate_json parses and validates in one pass inside pydantic-core,
        # so there is no intermediate dict and JSON syntax errors surface as ValidationError too.
        if isinstance(body, str | bytes | bytearray):
            return adapter.validate_json(body, by_alias=True, by_name=False)
        return adapter.validate_python(body, by_alias=True, by_name=False)
    except ValidationError as exc:
        error = DecodeError.from_validation_error(response_type, exc)
        logger.debug("%s", error)
        raise error from exc
