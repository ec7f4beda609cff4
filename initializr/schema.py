"""Metadata schema: Pydantic models for server categories and the fetched document.

Four server categories (language, bootVersion, packaging, javaVersion) share
one shape, ``{type, default, values: [{id, name}]}``, and all map onto
SchemaCategory. Dependencies are grouped one level deeper and get their own
models.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from initializr.constants import DEPENDENCIES
from initializr.errors import SchemaError


class SchemaEntry(BaseModel):
    """One selectable value of a category."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    display_name: str = Field(alias="name")


class SchemaCategory(BaseModel):
    """A single-select category: ordered entries plus the server-declared default id."""

    model_config = ConfigDict(populate_by_name=True)

    kind: str = Field(default="", alias="type")
    default_id: str = Field(default="", alias="default")
    entries: list[SchemaEntry] = Field(alias="values", min_length=1)

    @field_validator("default_id", mode="before")
    @classmethod
    def _none_default_is_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class DependencyEntry(BaseModel):
    """One selectable dependency. group is filled from the enclosing group name."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    display_name: str = Field(alias="name")
    description: str = ""
    group: str = ""

    @field_validator("description", mode="before")
    @classmethod
    def _none_description_is_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class DependencyGroup(BaseModel):
    """A named group of dependencies. A missing or null values list means no members."""

    name: str = ""
    values: list[DependencyEntry] = Field(default_factory=list)

    @field_validator("values", mode="before")
    @classmethod
    def _none_values_is_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class DependencyCategory(BaseModel):
    """The two-level dependencies category."""

    model_config = ConfigDict(populate_by_name=True)

    kind: str = Field(default="", alias="type")
    groups: list[DependencyGroup] = Field(alias="values")


def _first_error(exc: ValidationError) -> str:
    err = exc.errors()[0]
    loc = ".".join(str(p) for p in err.get("loc", ()))
    return f"{loc}: {err.get('msg')}" if loc else str(err.get("msg"))


def parse_category(key: str, raw: Any) -> SchemaCategory:
    """Validate one raw category. Raises SchemaError on shape mismatch."""
    if not isinstance(raw, dict):
        raise SchemaError(key, "expected an object")
    try:
        return SchemaCategory.model_validate(raw)
    except ValidationError as e:
        raise SchemaError(key, _first_error(e)) from e


class SchemaDocument:
    """A fetched metadata document with typed, per-category extraction.

    Extraction is lazy: a malformed category only fails the caller that asks
    for it, the rest of the document stays usable.
    """

    def __init__(self, raw: dict[str, Any]) -> None:
        self._raw = raw

    @property
    def raw(self) -> dict[str, Any]:
        return self._raw

    def category(self, key: str) -> SchemaCategory:
        """Return the single-select category under key. Raises SchemaError."""
        if key not in self._raw:
            raise SchemaError(key, "missing from metadata")
        return parse_category(key, self._raw[key])

    def dependency_category(self) -> DependencyCategory:
        """Return the dependencies category. Raises SchemaError if absent or malformed."""
        raw = self._raw.get(DEPENDENCIES)
        if raw is None:
            raise SchemaError(DEPENDENCIES, "missing from metadata")
        if not isinstance(raw, dict):
            raise SchemaError(DEPENDENCIES, "expected an object")
        try:
            return DependencyCategory.model_validate(raw)
        except ValidationError as e:
            raise SchemaError(DEPENDENCIES, _first_error(e)) from e

    def text_default(self, key: str) -> str | None:
        """Default of a text field such as groupId, or None when not declared."""
        field = self._raw.get(key)
        if not isinstance(field, dict):
            return None
        value = field.get("default")
        return value if isinstance(value, str) else None
