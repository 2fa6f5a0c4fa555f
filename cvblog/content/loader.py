"""Read articles from a content directory of Markdown/MDX files."""

import math
import re
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from ..exceptions import ContentLoadError
from ..models import ArticleRecord, ManualRelatedPost
from .corpus import Corpus

console = Console()

CONTENT_SUFFIXES = (".md", ".mdx")
DEFAULT_WORDS_PER_MINUTE = 220

# YAML frontmatter between --- delimiters at the very top of the file
FRONTMATTER_PATTERN = re.compile(r"\A---[ \t]*\n(.*?)^---[ \t]*$\n?", re.DOTALL | re.MULTILINE)


def split_frontmatter(text: str) -> Tuple[Dict[str, Any], str]:
    """
    Split a content file into its frontmatter mapping and body.

    Files without frontmatter return an empty mapping and the whole text.

    Raises:
        ValueError: if the frontmatter is not valid YAML or not a mapping
    """
    text = text.lstrip("\ufeff").replace("\r\n", "\n")
    match = FRONTMATTER_PATTERN.match(text)
    if not match:
        return {}, text

    try:
        data = yaml.safe_load(match.group(1))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML frontmatter: {e}")

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("Frontmatter must be a mapping")

    return data, text[match.end():]


def estimate_reading_minutes(text: str, words_per_minute: int = DEFAULT_WORDS_PER_MINUTE) -> int:
    """Reading time in whole minutes, never less than one."""
    words = len(text.split())
    return max(1, math.ceil(words / words_per_minute))


def find_content_files(content_dir: Path) -> List[Path]:
    """All .md/.mdx files under content_dir, in a stable order."""
    return sorted(
        p for p in content_dir.rglob("*")
        if p.is_file() and p.suffix.lower() in CONTENT_SUFFIXES
    )


def article_id_for(path: Path, content_dir: Path) -> str:
    """Slug path relative to the content dir, without extension."""
    return path.relative_to(content_dir).with_suffix("").as_posix()


def _string(value: Any) -> Optional[str]:
    return value.strip() if isinstance(value, str) and value.strip() else None


def _manual_related(raw: Any) -> List[ManualRelatedPost]:
    if not isinstance(raw, list):
        return []

    entries = []
    for item in raw:
        if not isinstance(item, dict):
            continue
        entries.append(
            ManualRelatedPost(
                title=item.get("title"),
                href=item.get("href"),
                category=item.get("category"),
                reading_time_minutes=item.get("readingTimeMinutes"),
                excerpt=item.get("excerpt"),
                date_iso=item.get("dateISO"),
            )
        )
    return entries


def record_from_frontmatter(
    article_id: str,
    frontmatter: Dict[str, Any],
    body: str,
    source_path: Optional[str] = None,
    words_per_minute: int = DEFAULT_WORDS_PER_MINUTE,
) -> ArticleRecord:
    """Map frontmatter keys onto an ArticleRecord."""
    category = _string(frontmatter.get("category"))
    if category is None and "/" in article_id:
        category = article_id.split("/")[0]

    reading_time = frontmatter.get("readingTime")
    if isinstance(reading_time, bool) or not isinstance(reading_time, int):
        reading_time = estimate_reading_minutes(body, words_per_minute)

    return ArticleRecord(
        id=article_id,
        category=category or "",
        tags=frontmatter.get("tags"),
        published_at=frontmatter.get("date"),
        draft=frontmatter.get("draft") is True,
        title=_string(frontmatter.get("title")),
        excerpt=_string(frontmatter.get("description")),
        reading_time_minutes=reading_time,
        manual_related=_manual_related(frontmatter.get("relatedPosts")),
        body=body,
        layout_version=frontmatter.get("layoutVersion"),
        article_type=frontmatter.get("articleType"),
        layout_preset=frontmatter.get("layoutPreset"),
        key_takeaways=frontmatter.get("keyTakeaways"),
        checklist=frontmatter.get("checklist"),
        source_path=source_path,
    )


def load_article(
    path: Path,
    content_dir: Path,
    words_per_minute: int = DEFAULT_WORDS_PER_MINUTE,
) -> ArticleRecord:
    """
    Load one content file.

    Raises:
        ContentLoadError: if the file cannot be read or parsed
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ContentLoadError(path, f"could not read file: {e}")

    try:
        frontmatter, body = split_frontmatter(text)
    except ValueError as e:
        raise ContentLoadError(path, str(e))

    try:
        return record_from_frontmatter(
            article_id_for(path, content_dir),
            frontmatter,
            body,
            source_path=path.as_posix(),
            words_per_minute=words_per_minute,
        )
    except ValidationError as e:
        raise ContentLoadError(path, f"invalid article record: {e}")


def load_articles(
    content_dir: Path,
    words_per_minute: int = DEFAULT_WORDS_PER_MINUTE,
) -> Tuple[List[ArticleRecord], List[ContentLoadError]]:
    """Load every article under content_dir, collecting per-file failures."""
    if not content_dir.is_dir():
        raise FileNotFoundError(f"Content directory not found: {content_dir}")

    articles = []
    failures = []
    for path in find_content_files(content_dir):
        try:
            articles.append(load_article(path, content_dir, words_per_minute))
        except ContentLoadError as e:
            console.print(f"[yellow]Skipping {escape(str(e.path))}: {escape(e.reason)}[/yellow]", soft_wrap=True)
            failures.append(e)

    return articles, failures


def load_corpus(content_dir: Path, words_per_minute: int = DEFAULT_WORDS_PER_MINUTE) -> Corpus:
    """Load a content directory into a Corpus."""
    articles, _ = load_articles(content_dir, words_per_minute)
    return Corpus(articles)
