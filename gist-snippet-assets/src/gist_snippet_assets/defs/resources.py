"""Shared resources for all components."""

import os

import dagster as dg
from gist_snippet_assets.resources.github_resource import GitHubGistResource
from gist_snippet_assets.resources.masscode_resource import MassCodeStorageResource


defs = dg.Definitions(
    resources={
        "github": GitHubGistResource(
            github_token=dg.EnvVar("GITHUB_TOKEN"),
            api_base_url=os.getenv("GITHUB_API_BASE_URL", "https://api.github.com"),
        ),
        "masscode": MassCodeStorageResource(output_path=os.getenv("MASSCODE_DB_PATH", "db.json")),
    }
)
