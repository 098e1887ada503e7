"""Path description DTOs."""

from pydantic import BaseModel, ConfigDict, Field

from pathtext.domain.enums import RootKind


class PathDescription(BaseModel):
    """Every decomposition of a single path."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    path: str
    root: str
    root_kind: RootKind = Field(alias="rootKind")
    is_absolute: bool = Field(alias="isAbsolute")
    is_root: bool = Field(alias="isRoot")
    entry_name: str = Field(alias="entryName")
    base_name: str = Field(alias="baseName")
    parent_folder: str = Field(alias="parentFolder")
    suffix: str
    complete_suffix: str | None = Field(None, alias="completeSuffix")  # None: no suffix at all
    shortened: str


class RelativizeResult(BaseModel):
    """Paths mapped relative to a root folder."""

    model_config = ConfigDict(populate_by_name=True)

    root_folder: str = Field(alias="rootFolder")
    relative: dict[str, str] = Field(default_factory=dict)
    outside: list[str] = Field(default_factory=list)  # Paths not inside root_folder
