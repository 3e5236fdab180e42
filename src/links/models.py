"""Link span and link action models for terminal references."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

LinkKind = Literal["issue", "work_item", "file_path"]


class LinkSpan(BaseModel):
    """A linkable region detected in one line of terminal text.

    ``start`` and ``length`` index the matched substring of the scanned line.
    For file paths ``length`` covers any ``:line:col`` suffix while ``value``
    holds the bare path; for references ``value`` is the digit run.
    """

    model_config = ConfigDict(frozen=True)

    start: int = Field(ge=0)
    length: int = Field(gt=0)
    kind: LinkKind
    text: str
    value: str
    tooltip: str
    line: int | None = None
    column: int | None = None

    @model_validator(mode="after")
    def _check_position(self) -> LinkSpan:
        if len(self.text) != self.length:
            msg = "length must match the matched text"
            raise ValueError(msg)
        if self.kind != "file_path" and (
            self.line is not None or self.column is not None
        ):
            msg = "only file path spans carry a line or column"
            raise ValueError(msg)
        if self.column is not None and self.line is None:
            msg = "column requires a line"
            raise ValueError(msg)
        return self


class WorkTrackingIdentity(BaseModel):
    """Organization and project of the work-tracking service."""

    model_config = ConfigDict(frozen=True)

    organization: str
    project: str


class Selection(BaseModel):
    """Zero-based cursor position inside a document."""

    model_config = ConfigDict(frozen=True)

    line: int = Field(ge=0)
    character: int = Field(ge=0)


class OpenExternal(BaseModel):
    model_config = ConfigDict(frozen=True)

    action: Literal["open_external"] = "open_external"
    url: str


class OpenDocument(BaseModel):
    model_config = ConfigDict(frozen=True)

    action: Literal["open_document"] = "open_document"
    path: str
    selection: Selection | None = None


class ShowWarning(BaseModel):
    model_config = ConfigDict(frozen=True)

    action: Literal["show_warning"] = "show_warning"
    message: str


class NoAction(BaseModel):
    model_config = ConfigDict(frozen=True)

    action: Literal["none"] = "none"
    reason: str


LinkAction = Annotated[
    Union[OpenExternal, OpenDocument, ShowWarning, NoAction],
    Field(discriminator="action"),
]


__all__ = [
    "LinkAction",
    "LinkKind",
    "LinkSpan",
    "NoAction",
    "OpenDocument",
    "OpenExternal",
    "Selection",
    "ShowWarning",
    "WorkTrackingIdentity",
]
