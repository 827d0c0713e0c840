import json
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from dagster import get_dagster_logger

from gist_snippet_assets.models import PLAIN_TEXT, ProgrammingLanguage

DEFAULT_CATALOG_PATH = Path(__file__).parent / "data" / "languages.json"


class LanguageCatalog:
    """Static extension -> language lookup, loaded once and queried per snippet."""

    def __init__(self, languages: Iterable[ProgrammingLanguage]):
        self.languages: List[ProgrammingLanguage] = list(languages)
        self._by_extension: Dict[str, ProgrammingLanguage] = {}
        for language in self.languages:
            # first entry wins for duplicated extensions
            self._by_extension.setdefault(language.extension.lower(), language)

    @classmethod
    def from_file(cls, path: str | Path) -> "LanguageCatalog":
        """Load a catalog from a JSON array of {extension, name} records."""
        with open(path, "r", encoding="utf-8") as f:
            records = json.load(f)

        catalog = cls(ProgrammingLanguage(**record) for record in records)
        get_dagster_logger().debug(f"Loaded {len(catalog)} languages from {path}")
        return catalog

    @classmethod
    def default(cls) -> "LanguageCatalog":
        return cls.from_file(DEFAULT_CATALOG_PATH)

    def __len__(self) -> int:
        return len(self.languages)

    def get(self, extension: str) -> Optional[ProgrammingLanguage]:
        return self._by_extension.get(extension.lower())

    def for_filename(self, filename: str) -> ProgrammingLanguage:
        """Resolve a language from the text after the last dot of a filename, or Plain Text."""
        if "." not in filename:
            return PLAIN_TEXT

        extension = filename.rsplit(".", 1)[1]
        return self.get(extension) or PLAIN_TEXT
