from typing import List, Optional

from dagster import get_dagster_logger

from gist_snippet_assets.converter import SnippetConverter
from gist_snippet_assets.languages import LanguageCatalog
from gist_snippet_assets.models import MassCodeDocument, Snippet
from gist_snippet_assets.registries import FolderRegistry, TagRegistry
from gist_snippet_assets.resources.github_resource import GitHubGistResource
from gist_snippet_assets.resources.masscode_resource import MassCodeStorageResource


class GistSnippetExporter:
    """Exports every gist of a GitHub user into a single massCode database file.

    Registries are created fresh for each call to `run`. Gists that fail to
    convert are skipped; a failure while listing gists aborts the run and
    nothing is written.
    """

    def __init__(
        self,
        github: GitHubGistResource,
        storage: MassCodeStorageResource,
        catalog: Optional[LanguageCatalog] = None,
    ):
        self.github = github
        self.storage = storage
        self.catalog = catalog or LanguageCatalog.default()

    def run(self, username: str) -> Optional[MassCodeDocument]:
        tags = TagRegistry()
        folders = FolderRegistry()
        snippets: List[Snippet] = []
        converter = SnippetConverter(self.github, self.catalog, tags, folders)

        try:
            for page in self.github.iter_gist_pages(username):
                for gist in page:
                    snippet = converter.convert(gist)
                    if snippet is not None:
                        snippets.append(snippet)
        except Exception as e:
            get_dagster_logger().error(f"Failed to process snippets: {e}")
            return None

        document = MassCodeDocument(folders=folders.folders, tags=tags.tags, snippets=snippets)
        output_path = self.storage.write_document(document.to_json_dict())

        get_dagster_logger().info(
            f"{len(folders)} folders, {len(tags)} tags and {len(snippets)} snippets saved to {output_path}"
        )
        return document
