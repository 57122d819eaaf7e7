import datetime as dt
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .utils.text_utils import SUPERSEDED_SUFFIX, TextUtils

STATUS_PROPOSED = "Proposed"
STATUS_ACCEPTED = "Accepted"
STATUS_SUPERSEDED = "Superseded"
SUPERSEDED_BY_PREFIX = "Superceded by "

PLACEHOLDER_CONTEXT = "Context here..."
PLACEHOLDER_DECISION = "We will ..."
PLACEHOLDER_CONSEQUENCES = "Consequences of decision..."


class AdrSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    path: str = Field(..., min_length=1, description="Directory holding the records")

    @field_validator("path")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("path must not be blank")
        return value

    @property
    def directory(self) -> Path:
        return Path(self.path)

    def ensure_directory(self) -> Path:
        self.directory.mkdir(parents=True, exist_ok=True)
        return self.directory


class AdrEntry(BaseModel):
    """A single Architecture Decision Record.

    ``number`` stays 0 until the editor session allocates one. The supersede
    relation lives in ``superseded_by``; it is only turned into the
    "Superceded by ..." status text when the record is written.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    number: int = Field(0, ge=0, description="Sequence number, 0 while unallocated")
    title: str = Field(..., description="Free text title")
    date: dt.date = Field(default_factory=dt.date.today, description="Creation date")
    status: str = Field(STATUS_PROPOSED, description="Proposed, Accepted or Superseded")
    context: str = Field(PLACEHOLDER_CONTEXT)
    decision: str = Field(PLACEHOLDER_DECISION)
    consequences: str = Field(PLACEHOLDER_CONSEQUENCES)
    superseded_by: Optional[str] = Field(None, description="Filename of the superseding record")

    @property
    def filename(self) -> str:
        return f"{TextUtils.number_prefix(self.number)}{TextUtils.title_to_slug(self.title)}.md"

    @property
    def superseded_filename(self) -> str:
        return f"{Path(self.filename).stem}{SUPERSEDED_SUFFIX}.md"

    @property
    def status_text(self) -> str:
        if self.superseded_by:
            return f"{SUPERSEDED_BY_PREFIX}{self.superseded_by}"
        return self.status

    def mark_superseded_by(self, other: "AdrEntry") -> None:
        self.superseded_by = other.filename
        self.status = STATUS_SUPERSEDED
