from typing import Optional

import dagster as dg

from gist_snippet_assets.export import GistSnippetExporter
from gist_snippet_assets.languages import LanguageCatalog
from gist_snippet_assets.resources.github_resource import GitHubGistResource
from gist_snippet_assets.resources.masscode_resource import MassCodeStorageResource


class GistSnippetsComponent(dg.Component, dg.Model, dg.Resolvable):
    """Component exporting a GitHub user's gists as a massCode database."""

    username: str
    catalog_path: Optional[str] = None
    asset_name: str = "masscode_db"
    group_name: str = "gist_snippets"

    def load_catalog(self) -> LanguageCatalog:
        if self.catalog_path:
            return LanguageCatalog.from_file(self.catalog_path)
        return LanguageCatalog.default()

    def build_defs(self, context: Optional[dg.ComponentLoadContext] = None) -> dg.Definitions:
        """Build Dagster definitions for the gist export."""

        @dg.asset(
            name=self.asset_name,
            group_name=self.group_name,
            kinds={"github", "json"},
            owners=["team:data"],
        )
        def masscode_db(
            context: dg.AssetExecutionContext,
            github: GitHubGistResource,
            masscode: MassCodeStorageResource,
        ) -> dg.MaterializeResult:
            """All gists of the configured user, converted to massCode folders, tags and snippets."""

            if not self.username:
                raise dg.Failure(description="GITHUB_USERNAME is not set")

            context.log.info(f"Exporting gists of {self.username} to {masscode.output_path}")
            exporter = GistSnippetExporter(github=github, storage=masscode, catalog=self.load_catalog())
            document = exporter.run(self.username)

            if document is None:
                raise dg.Failure(description=f"Could not list gists of {self.username}, nothing was written")

            return dg.MaterializeResult(
                metadata={
                    "folders": len(document.folders),
                    "tags": len(document.tags),
                    "snippets": len(document.snippets),
                    "output_path": dg.MetadataValue.path(masscode.output_path),
                }
            )

        return dg.Definitions(assets=[masscode_db])
