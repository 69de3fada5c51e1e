"""Static viewer export: copies the bundled template and writes commit data into it."""

from __future__ import annotations

import json
import logging
import shutil
from pathlib import Path

import frontmatter

from lifecommit.errors import ExportFailed
from lifecommit.models import Commit
from lifecommit.store import DATA_ENCODING, JSON_INDENT

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "website"
POSTS_DIRNAME = "posts"
DATA_FILENAME = "commits.json"


def render_post(commit: Commit) -> str:
    """Markdown post with YAML front matter; the message is the body."""
    post = frontmatter.Post(
        commit.message,
        id=commit.id,
        lifemoji=commit.lifemoji,
        title=commit.title,
        date=commit.date,
    )
    return frontmatter.dumps(post) + "\n"


def export_site(commits: list[Commit], target: Path, template: Path = TEMPLATE_DIR) -> Path:
    """Copy ``template`` to ``target`` and fill it with ``commits``.

    ``target`` must not exist yet. Any OS error is reported as ExportFailed.
    """
    try:
        shutil.copytree(template, target)
        (target / DATA_FILENAME).write_text(
            json.dumps([c.to_dict() for c in commits], indent=JSON_INDENT, ensure_ascii=False),
            encoding=DATA_ENCODING,
        )
        posts_dir = target / POSTS_DIRNAME
        posts_dir.mkdir(exist_ok=True)
        for commit in commits:
            (posts_dir / f"{commit.id}.md").write_text(render_post(commit), encoding=DATA_ENCODING)
    except OSError as e:
        raise ExportFailed(str(e)) from e

    logger.info("Exported %d commits to %s", len(commits), target)
    return target
