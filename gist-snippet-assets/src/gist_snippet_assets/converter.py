import re
from typing import Any, Dict, List, Optional

from dagster import get_dagster_logger

from gist_snippet_assets.identifiers import generate_snippet_id
from gist_snippet_assets.languages import LanguageCatalog
from gist_snippet_assets.models import Snippet, SnippetContent, now_millis, to_millis
from gist_snippet_assets.registries import FolderRegistry, TagRegistry
from gist_snippet_assets.resources.github_resource import GitHubGistResource

TAG_PATTERN = re.compile(r"#(\w+)", re.ASCII)


def extract_name(description: str) -> str:
    """Text before the first '#', trimmed. The whole description when there is no '#'."""
    name, _, _ = description.partition("#")
    return name.strip()


def extract_tags(description: str) -> List[str]:
    """Every '#word' in the description, in order and without the '#'."""
    return TAG_PATTERN.findall(description)


class SnippetConverter:
    """Turns one gist from the GitHub API into a massCode snippet.

    Folders and tags are looked up in (or added to) the registries owned by the caller.
    """

    def __init__(
        self,
        github: GitHubGistResource,
        catalog: LanguageCatalog,
        tags: TagRegistry,
        folders: FolderRegistry,
    ):
        self.github = github
        self.catalog = catalog
        self.tags = tags
        self.folders = folders

    def convert(self, gist: Dict[str, Any]) -> Optional[Snippet]:
        """Convert a gist, or return None if it has no downloadable files or conversion fails."""
        gist_id = gist.get("id", "<unknown>") if isinstance(gist, dict) else "<unknown>"
        try:
            return self._convert(gist)
        except Exception as e:
            get_dagster_logger().error(f"Error converting gist {gist_id}: {e}")
            return None

    def _convert(self, gist: Dict[str, Any]) -> Optional[Snippet]:
        description = gist.get("description")
        if not isinstance(description, str):
            raise ValueError(f"description must be a string, got {type(description).__name__}")
        tag_names = extract_tags(description)
        name = extract_name(description)

        created_at = to_millis(gist["created_at"])
        updated_at = to_millis(gist["updated_at"]) if gist.get("updated_at") else now_millis()

        content = self._fetch_content(gist.get("files") or {})
        if not content:
            get_dagster_logger().debug(f"Gist {gist.get('id', '<unknown>')} has no downloadable files, skipping")
            return None

        # folder comes from the first file's extension, not its declared language
        primary_language = self.catalog.for_filename(content[0].label)
        folder_id = self.folders.get_or_create(primary_language)

        snippet = Snippet(
            id=generate_snippet_id(),
            is_deleted=False,
            is_favorites=False,
            folder_id=folder_id,
            tags_ids=[self.tags.get_or_create(tag_name) for tag_name in tag_names],
            description=description,
            name=name,
            content=content,
            created_at=created_at,
            updated_at=updated_at,
        )
        get_dagster_logger().info(f'Snippet "{snippet.name}" converted')
        return snippet

    def _fetch_content(self, files: Dict[str, Dict[str, Any]]) -> List[SnippetContent]:
        content = []
        for filename, file_data in files.items():
            raw_url = file_data.get("raw_url")
            if not raw_url:
                continue

            content.append(
                SnippetContent(
                    label=filename,
                    language=(file_data.get("language") or "").lower() or "plain_text",
                    value=self.github.fetch_raw_content(raw_url),
                )
            )
        return content
