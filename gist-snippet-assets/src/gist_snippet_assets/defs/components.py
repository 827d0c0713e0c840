"""Component configuration for the gist export."""

import os

from gist_snippet_assets.components.gist_snippets import GistSnippetsComponent


gist_snippets_component = GistSnippetsComponent(
    username=os.getenv("GITHUB_USERNAME", ""),
    catalog_path=os.getenv("LANGUAGE_CATALOG_PATH") or None,
)

defs = gist_snippets_component.build_defs()
