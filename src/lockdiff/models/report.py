import typing

import pydantic

Status = typing.Literal["added", "removed", "updated", "unchanged"]

STATUSES: tuple[Status, ...] = ("added", "removed", "updated", "unchanged")


class VersionDelta(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(frozen=True)

    from_version: str | None = pydantic.Field(default=None, serialization_alias="from")
    to_version: str | None = pydantic.Field(default=None, serialization_alias="to")
    from_ref: str | None = pydantic.Field(default=None, serialization_alias="fromRef")
    to_ref: str | None = pydantic.Field(default=None, serialization_alias="toRef")


class GroupSummary(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(frozen=True)

    added: int = 0
    removed: int = 0
    updated: int = 0
    unchanged: int = 0

    def count(self, status: Status) -> int:
        return getattr(self, status)


class Report(pydantic.BaseModel):
    """
    The result of comparing two lock snapshots.

    `groups` maps group -> status -> package name -> version delta. Empty status buckets are left
    out; use `entries` to read a bucket that may be missing.
    """

    model_config = pydantic.ConfigDict(frozen=True)

    summary: dict[str, GroupSummary]
    groups: dict[str, dict[Status, dict[str, VersionDelta]]] = pydantic.Field(
        serialization_alias="report"
    )

    def entries(self, group: str, status: Status) -> dict[str, VersionDelta]:
        return self.groups.get(group, {}).get(status, {})
