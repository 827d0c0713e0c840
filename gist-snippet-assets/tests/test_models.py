"""Unit tests for the massCode records and timestamp helpers."""

from gist_snippet_assets.models import (
    Folder,
    MassCodeDocument,
    Snippet,
    SnippetContent,
    Tag,
    now_millis,
    to_millis,
)


def test_to_millis_parses_github_timestamps():
    """Test the Z suffix and explicit offsets."""
    assert to_millis("1970-01-01T00:00:01Z") == 1000
    assert to_millis("2023-01-02T03:04:05Z") == 1672628645000
    assert to_millis("2023-01-02T04:04:05+01:00") == 1672628645000


def test_to_millis_naive_timestamp_is_utc():
    """Test that a timestamp without offset is read as UTC."""
    assert to_millis("1970-01-01T00:00:02") == 2000


def test_now_millis_is_milliseconds():
    """Test now_millis is in the millisecond range."""
    assert now_millis() > 1_600_000_000_000


def test_document_serializes_camel_case_keys():
    """Test the JSON shape of the output document."""
    document = MassCodeDocument(
        folders=[
            Folder(id="f1", name="Python", default_language="py", created_at=1, updated_at=2, index=1)
        ],
        tags=[Tag(id="t1", name="demo", created_at=1, updated_at=1)],
        snippets=[
            Snippet(
                id="s1",
                folder_id="f1",
                tags_ids=["t1"],
                description="Hello #demo",
                name="Hello",
                content=[SnippetContent(label="main.py", language="python", value="print(1)")],
                created_at=3,
                updated_at=4,
            )
        ],
    )

    data = document.to_json_dict()

    assert data["folders"] == [
        {
            "id": "f1",
            "name": "Python",
            "defaultLanguage": "py",
            "parentId": None,
            "isOpen": False,
            "isSystem": False,
            "createdAt": 1,
            "updatedAt": 2,
            "index": 1,
        }
    ]
    assert data["tags"] == [{"id": "t1", "name": "demo", "createdAt": 1, "updatedAt": 1}]
    assert data["snippets"] == [
        {
            "id": "s1",
            "isDeleted": False,
            "isFavorites": False,
            "folderId": "f1",
            "tagsIds": ["t1"],
            "description": "Hello #demo",
            "name": "Hello",
            "content": [{"label": "main.py", "language": "python", "value": "print(1)"}],
            "createdAt": 3,
            "updatedAt": 4,
        }
    ]


def test_folder_flags_default_to_flat_and_closed():
    """Test a folder built from its required fields is top-level, closed and not a system folder."""
    folder = Folder(id="f1", name="Go", default_language="go", created_at=1, updated_at=1, index=1)

    assert folder.parent_id is None
    assert folder.is_open is False
    assert folder.is_system is False
