import pytest

from gist_snippet_assets.languages import LanguageCatalog
from gist_snippet_assets.models import ProgrammingLanguage


@pytest.fixture
def catalog():
    return LanguageCatalog(
        [
            ProgrammingLanguage(extension="py", name="Python"),
            ProgrammingLanguage(extension="js", name="JavaScript"),
            ProgrammingLanguage(extension="sh", name="Shell"),
            ProgrammingLanguage(extension="bash", name="Shell"),
        ]
    )


@pytest.fixture
def make_gist():
    """Factory for gist records shaped like GitHub's /users/{user}/gists response."""

    def _make_gist(
        description="Hello #demo",
        files=None,
        gist_id="abc123",
        created_at="2023-01-02T03:04:05Z",
        updated_at="2023-02-03T04:05:06Z",
    ):
        if files is None:
            files = {
                "main.py": {
                    "filename": "main.py",
                    "raw_url": f"https://gist.githubusercontent.com/octocat/{gist_id}/raw/main.py",
                }
            }
        return {
            "id": gist_id,
            "description": description,
            "files": files,
            "created_at": created_at,
            "updated_at": updated_at,
        }

    return _make_gist
