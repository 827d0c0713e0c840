import time
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def now_millis() -> int:
    """Current time as milliseconds since the epoch."""
    return int(time.time() * 1000)


def to_millis(value: str) -> int:
    """Convert an ISO-8601 timestamp (as returned by the GitHub API) to epoch milliseconds."""
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return int(round(parsed.timestamp() * 1000))


class MassCodeModel(BaseModel):
    """Base for records written to the massCode database file (camelCase keys)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProgrammingLanguage(BaseModel):
    """A catalog entry mapping a file extension to a language name."""

    model_config = ConfigDict(frozen=True)

    extension: str
    name: str


PLAIN_TEXT = ProgrammingLanguage(extension="txt", name="Plain Text")


class Tag(MassCodeModel):
    id: str
    name: str
    created_at: int
    updated_at: int


class Folder(MassCodeModel):
    id: str
    name: str
    default_language: str
    parent_id: Optional[str] = None
    is_open: bool = False
    is_system: bool = False
    created_at: int
    updated_at: int
    index: int


class SnippetContent(MassCodeModel):
    label: str
    language: str
    value: str


class Snippet(MassCodeModel):
    id: str
    is_deleted: bool = False
    is_favorites: bool = False
    folder_id: str
    tags_ids: List[str] = Field(default_factory=list)
    description: str
    name: str
    content: List[SnippetContent]
    created_at: int
    updated_at: int


class MassCodeDocument(MassCodeModel):
    """The aggregated output of one run."""

    folders: List[Folder] = Field(default_factory=list)
    tags: List[Tag] = Field(default_factory=list)
    snippets: List[Snippet] = Field(default_factory=list)

    def to_json_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)
