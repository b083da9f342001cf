"""Operator answers collected by the setup wizard."""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Characters that cannot live inside a double-quoted .env value
_FORBIDDEN_CHARS = ('"', "\n", "\r")


class Feature(StrEnum):
    """Optional ForgeScript extensions offered during setup."""

    CANVAS = "ForgeCanvas"
    DB = "ForgeDB"
    REGEX = "ForgeRegex"

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS: dict[Feature, str] = {
    Feature.CANVAS: "Canvas (ForgeCanvas)",
    Feature.DB: "ForgeDB (Database System)",
    Feature.REGEX: "ForgeRegex (Regex Tools)",
}


class Answers(BaseModel):
    """Immutable record of everything the operator told us.

    Token, URI and prefix are free text: empty strings are allowed and
    passed through unchanged.  The only rejected input is a value that
    would break its ``KEY="VALUE"`` line in ``.env``.
    """

    model_config = ConfigDict(frozen=True)

    token: str = ""
    mongo_uri: str = ""
    prefix: str = ""
    features: frozenset[Feature] = Field(default_factory=frozenset)

    @field_validator("token", "mongo_uri", "prefix")
    @classmethod
    def validate_env_safe(cls, v: str) -> str:
        check_env_safe(v)
        return v


def check_env_safe(value: str) -> None:
    """Raise ``ValueError`` if *value* cannot be written as a quoted .env value."""
    if any(ch in value for ch in _FORBIDDEN_CHARS):
        msg = "value must not contain double quotes or line breaks"
        raise ValueError(msg)
