"""Tests for the static viewer export."""

from __future__ import annotations

import json

import frontmatter
import pytest
from pathlib import Path

from lifecommit.errors import ExportFailed
from lifecommit.models import Commit
from lifecommit.site import TEMPLATE_DIR, export_site, render_post

COMMITS = [
    Commit(id="c2", lifemoji="🎉", title="Party", message="We won\n\nAll night.", date="2024-06-01"),
    Commit(id="c1", lifemoji="😀", title="Day one", message="hi", date="2024-01-01"),
]


class TestExportSite:
    def test_copies_template(self, tmp_path: Path):
        target = export_site(COMMITS, tmp_path / "website")
        for name in ("index.html", "app.js", "style.css"):
            assert (target / name).read_bytes() == (TEMPLATE_DIR / name).read_bytes()

    def test_writes_commit_data(self, tmp_path: Path):
        target = export_site(COMMITS, tmp_path / "website")
        data = json.loads((target / "commits.json").read_text(encoding="utf-8"))
        assert [c["id"] for c in data] == ["c2", "c1"]
        assert data[0]["lifemoji"] == "🎉"

    def test_writes_posts_with_front_matter(self, tmp_path: Path):
        target = export_site(COMMITS, tmp_path / "website")
        post = frontmatter.load(str(target / "posts" / "c2.md"))
        assert post.metadata == {
            "id": "c2",
            "lifemoji": "🎉",
            "title": "Party",
            "date": "2024-06-01",
        }
        assert post.content == "We won\n\nAll night."

    def test_empty_journal(self, tmp_path: Path):
        target = export_site([], tmp_path / "website")
        assert (target / "commits.json").read_text(encoding="utf-8") == "[]"
        assert list((target / "posts").iterdir()) == []

    def test_existing_target_fails(self, tmp_path: Path):
        (tmp_path / "website").mkdir()
        with pytest.raises(ExportFailed, match="exists"):
            export_site(COMMITS, tmp_path / "website")

    def test_missing_template_fails(self, tmp_path: Path):
        with pytest.raises(ExportFailed):
            export_site(COMMITS, tmp_path / "website", template=tmp_path / "nope")


def test_render_post_body_is_message():
    text = render_post(COMMITS[1])
    assert text.startswith("---\n")
    assert text.rstrip().endswith("hi")
