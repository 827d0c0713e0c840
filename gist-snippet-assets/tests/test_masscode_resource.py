"""Unit tests for MassCodeStorageResource."""

import json
from unittest.mock import patch

import pytest

from gist_snippet_assets.resources.masscode_resource import MassCodeStorageResource


def test_write_document_pretty_prints(tmp_path):
    """Test the document is written as indented UTF-8 JSON."""
    target = tmp_path / "out" / "db.json"
    storage = MassCodeStorageResource(output_path=str(target))

    written = storage.write_document({"folders": [], "tags": [{"name": "café"}], "snippets": []})

    assert written == target
    text = target.read_text(encoding="utf-8")
    assert "café" in text
    assert '\n  "tags": [' in text
    assert json.loads(text) == {"folders": [], "tags": [{"name": "café"}], "snippets": []}


def test_write_document_replaces_existing_file(tmp_path):
    """Test an existing file is overwritten and no temp files remain."""
    target = tmp_path / "db.json"
    target.write_text("old", encoding="utf-8")
    storage = MassCodeStorageResource(output_path=str(target))

    storage.write_document({"folders": [], "tags": [], "snippets": []})

    assert json.loads(target.read_text(encoding="utf-8"))["snippets"] == []
    assert [p.name for p in tmp_path.iterdir()] == ["db.json"]


def test_failed_write_keeps_previous_file(tmp_path):
    """Test a failure during serialization leaves the old file and no temp file."""
    target = tmp_path / "db.json"
    target.write_text("old", encoding="utf-8")
    storage = MassCodeStorageResource(output_path=str(target))

    with patch(
        "gist_snippet_assets.resources.masscode_resource.json.dump", side_effect=OSError("disk full")
    ):
        with pytest.raises(OSError):
            storage.write_document({"folders": []})

    assert target.read_text(encoding="utf-8") == "old"
    assert [p.name for p in tmp_path.iterdir()] == ["db.json"]
