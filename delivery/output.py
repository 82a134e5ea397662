"""
Output delivery. CLI (stdout) and JSON export.

The export document is the one stable external format: seven keys,
fixed order, two-space indent.
"""

import json
import logging
import re
from datetime import datetime, timezone
from pathlib import Path

from models import Difficulty, ProjectIdea, SavedIdea

log = logging.getLogger(__name__)


def export_json(idea: ProjectIdea) -> str:
    return json.dumps(idea.to_export_dict(), indent=2, ensure_ascii=False)


def export_filename(idea: ProjectIdea) -> str:
    slug = re.sub(r"\s+", "-", idea.title).lower()
    return f"{slug}.json"


def export_idea(idea: ProjectIdea, out_path: Path | None = None) -> Path:
    """
    Write the export document. `out_path` may be a file or a directory;
    a directory (or None, meaning cwd) gets the title-derived file name.
    """
    if out_path is None:
        out_path = Path.cwd()
    if out_path.is_dir():
        out_path = out_path / export_filename(idea)

    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(export_json(idea), encoding="utf-8")
    log.info(f"Exported {idea.title!r} to {out_path}")
    return out_path


def share_text(idea: ProjectIdea) -> str:
    return f"{idea.title}\n\n{idea.description}\n\nTech Stack: {', '.join(idea.stack)}"


def save_idea(idea: ProjectIdea, notes: str | None = None, favorite: bool = False) -> SavedIdea:
    """Keep an idea. The saved copy gets its own save timestamp."""
    return SavedIdea(
        id=idea.id,
        title=idea.title,
        description=idea.description,
        stack=list(idea.stack),
        difficulty=idea.difficulty,
        features=list(idea.features),
        time_estimate=idea.time_estimate,
        category=idea.category,
        tags=list(idea.tags),
        created_at=idea.created_at,
        saved_at=datetime.now(timezone.utc),
        is_favorite=favorite,
        notes=notes,
    )


def filter_ideas(
    ideas: list[ProjectIdea],
    search: str = "",
    difficulty: Difficulty | str = "",
    category: str = "",
) -> list[ProjectIdea]:
    """
    Saved-ideas filter. Search is a case-insensitive substring match on
    title or description; difficulty and category must match exactly.
    Empty criteria match everything.
    """
    needle = search.lower()
    level = Difficulty(difficulty) if difficulty else None

    matched = []
    for idea in ideas:
        if needle and needle not in idea.title.lower() and needle not in idea.description.lower():
            continue
        if level and idea.difficulty != level:
            continue
        if category and idea.category != category:
            continue
        matched.append(idea)
    return matched


def deliver_cli(idea: ProjectIdea):
    """Print to stdout. That's it."""
    separator = "─" * 60

    print(f"\n{separator}")
    print(f"  {idea.title}")
    print(f"  {idea.category} · {idea.difficulty.value} · {idea.time_estimate}")
    print(separator)
    print()
    print(idea.description)
    print()
    print(f"Stack: {', '.join(idea.stack)}")
    print()
    print("Features:")
    for feature in idea.features:
        print(f"  - {feature}")
    print()
    print(f"Tags: {' '.join('#' + t for t in idea.tags)}")
    print(separator)


def deliver_popularity(rows: list[tuple[str, int]], highlight: set[str] | None = None):
    """Print a popularity table. Highlighted technologies get a marker."""
    highlight = highlight or set()
    separator = "─" * 60

    print(f"\n{separator}")
    print("  TECHNOLOGY POPULARITY")
    print(separator)
    for tech, score in rows:
        marker = "*" if tech in highlight else " "
        bar = "█" * (score // 5)
        print(f" {marker} {tech:<16} {score:>3}  {bar}")
    print(separator)
