"""
Gist to massCode exporter
=========================

Downloads every gist of a GitHub user and writes them to a massCode
database file (folders per language, tags parsed from "#tag" words in
the gist description).

Usage:
    gist-snippets [--username USER] [--token TOKEN] [--output db.json]
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from dagster import get_dagster_logger
from dotenv import load_dotenv

from gist_snippet_assets.export import GistSnippetExporter
from gist_snippet_assets.languages import LanguageCatalog
from gist_snippet_assets.resources.github_resource import GitHubGistResource
from gist_snippet_assets.resources.masscode_resource import MassCodeStorageResource

LOG_FORMAT = "%(asctime)s %(levelname)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Export GitHub gists to a massCode database file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    gist-snippets --username octocat
    gist-snippets --output ~/massCode/db.json
    gist-snippets --catalog languages.json --verbose

Environment Variables (a .env file in the working directory is read too):
    GITHUB_TOKEN            GitHub personal access token (required)
    GITHUB_USERNAME         User whose gists are exported (required)
    GITHUB_API_BASE_URL     API root, for GitHub Enterprise
    MASSCODE_DB_PATH        Output file
    LANGUAGE_CATALOG_PATH   JSON array of {extension, name} records
        """
    )

    parser.add_argument(
        "--username",
        default=os.getenv("GITHUB_USERNAME"),
        help="GitHub user whose gists are exported (or set GITHUB_USERNAME env var)"
    )

    parser.add_argument(
        "--token",
        default=os.getenv("GITHUB_TOKEN"),
        help="GitHub personal access token (or set GITHUB_TOKEN env var)"
    )

    parser.add_argument(
        "--output",
        default=os.getenv("MASSCODE_DB_PATH", "db.json"),
        help="Output file (default: db.json)"
    )

    parser.add_argument(
        "--catalog",
        default=os.getenv("LANGUAGE_CATALOG_PATH"),
        help="Language catalog JSON file (default: bundled catalog)"
    )

    parser.add_argument(
        "--api-base-url",
        default=os.getenv("GITHUB_API_BASE_URL", "https://api.github.com"),
        help="GitHub API base URL (default: https://api.github.com)"
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    logger = get_dagster_logger()
    logger.setLevel(level)

    if not args.token:
        logger.error("GitHub token is missing. Set GITHUB_TOKEN or pass --token.")
        return 1
    if not args.username:
        logger.error("GitHub username is missing. Set GITHUB_USERNAME or pass --username.")
        return 1

    try:
        catalog = LanguageCatalog.from_file(args.catalog) if args.catalog else LanguageCatalog.default()
        exporter = GistSnippetExporter(
            github=GitHubGistResource(github_token=args.token, api_base_url=args.api_base_url),
            storage=MassCodeStorageResource(output_path=args.output),
            catalog=catalog,
        )
        document = exporter.run(args.username)
    except KeyboardInterrupt:
        logger.error("Export interrupted by user")
        return 1
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        return 1

    if document is None:
        return 1

    logger.info("All snippets processed and saved successfully.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
