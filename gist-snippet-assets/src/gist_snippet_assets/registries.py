from typing import Callable, Dict, List, Set

from gist_snippet_assets.identifiers import generate_short_id
from gist_snippet_assets.models import Folder, ProgrammingLanguage, Tag, now_millis


class _Registry:
    def __init__(self, clock: Callable[[], int] = now_millis):
        self._clock = clock
        self._ids: Set[str] = set()

    def _new_id(self) -> str:
        new_id = generate_short_id(8)
        while new_id in self._ids:
            new_id = generate_short_id(8)
        self._ids.add(new_id)
        return new_id


class TagRegistry(_Registry):
    """Append-only tag store, deduplicated by exact (case-sensitive) name."""

    def __init__(self, clock: Callable[[], int] = now_millis):
        super().__init__(clock)
        self.tags: List[Tag] = []
        self._by_name: Dict[str, Tag] = {}

    def __len__(self) -> int:
        return len(self.tags)

    def get_or_create(self, name: str) -> str:
        """Return the id of the tag called `name`, creating it on first sight."""
        existing = self._by_name.get(name)
        if existing is not None:
            return existing.id

        now = self._clock()
        tag = Tag(id=self._new_id(), name=name, created_at=now, updated_at=now)
        self.tags.append(tag)
        self._by_name[name] = tag
        return tag.id


class FolderRegistry(_Registry):
    """Append-only folder store, one folder per language display name.

    `index` is the 1-based discovery position of the folder across the run.
    """

    def __init__(self, clock: Callable[[], int] = now_millis):
        super().__init__(clock)
        self.folders: List[Folder] = []
        self._by_name: Dict[str, Folder] = {}

    def __len__(self) -> int:
        return len(self.folders)

    def get_or_create(self, language: ProgrammingLanguage) -> str:
        existing = self._by_name.get(language.name)
        if existing is not None:
            return existing.id

        now = self._clock()
        folder = Folder(
            id=self._new_id(),
            name=language.name,
            default_language=language.extension,
            created_at=now,
            updated_at=now,
            index=len(self.folders) + 1,
        )
        self.folders.append(folder)
        self._by_name[language.name] = folder
        return folder.id
