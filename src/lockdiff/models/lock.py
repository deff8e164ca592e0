import typing

import pydantic


class LockSource(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(frozen=True, extra="ignore")

    reference: str | None = None


class LockPackage(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(frozen=True, extra="ignore")

    name: str
    version: str
    type: str = ""
    source: LockSource | None = None

    @pydantic.field_validator("type", mode="before")
    @classmethod
    def null_type_is_empty(cls, value: typing.Any) -> typing.Any:
        return "" if value is None else value

    @property
    def reference(self) -> str | None:
        return self.source.reference if self.source is not None else None


class LockManifest(pydantic.BaseModel):
    """
    The part of a composer.lock file that takes part in a comparison.
    """

    model_config = pydantic.ConfigDict(frozen=True, extra="ignore")

    packages: list[LockPackage] = pydantic.Field(default_factory=list)

    @pydantic.field_validator("packages", mode="before")
    @classmethod
    def null_packages_is_empty(cls, value: typing.Any) -> typing.Any:
        return [] if value is None else value
