"""Field extraction service.

Each metadata field is resolved from an ordered table of lookup rules. The
selectors cover the markup used by common Ghost themes plus generic Open
Graph metadata; the first rule that yields non-blank text wins.
"""

from dataclasses import dataclass
from typing import Optional, Sequence

from story_card.services.date_formatter import format_date
from story_card.services.document import ParsedDocument


DEFAULT_TITLE = "Untitled Post"


@dataclass(frozen=True)
class LookupRule:
    """Read `attribute` from the first node matching `query`, or its text."""

    query: str
    attribute: Optional[str] = None

    def apply(self, document: ParsedDocument) -> Optional[str]:
        node = document.find_first(self.query)
        if self.attribute is None:
            return document.text(node)
        return document.attribute(node, self.attribute)


TITLE_RULES = (
    LookupRule('meta[property="og:title"]', "content"),
    LookupRule("h1.post-title"),
    LookupRule("h1.article-title"),
    LookupRule("h1"),
    LookupRule("title"),
)

EXCERPT_RULES = (
    LookupRule('meta[property="og:description"]', "content"),
    LookupRule('meta[name="description"]', "content"),
    LookupRule(".post-excerpt"),
    LookupRule(".article-excerpt"),
)

IMAGE_RULES = (
    LookupRule('meta[property="og:image"]', "content"),
    LookupRule(".post-image img", "src"),
    LookupRule(".feature-image img", "src"),
    LookupRule("article img", "src"),
)

DATE_RULES = (
    LookupRule('meta[property="article:published_time"]', "content"),
    LookupRule("time", "datetime"),
    LookupRule(".post-date"),
)

# The document <body> is the last resort, handled in extract_body_text
BODY_RULES = (
    LookupRule(".post-content"),
    LookupRule(".article-content"),
    LookupRule(".gh-content"),
    LookupRule("article"),
)


@dataclass(frozen=True)
class ExtractedFields:
    """Raw field values pulled from a document, before read time estimation."""

    title: str
    excerpt: str
    featured_image: str
    published_at: str
    body_text: str


def first_non_empty(
    document: ParsedDocument,
    rules: Sequence[LookupRule],
    default: str = "",
) -> str:
    """Return the first trimmed, non-empty value produced by `rules`."""
    for rule in rules:
        value = rule.apply(document)
        if value and value.strip():
            return value.strip()
    return default


def extract_published_at(document: ParsedDocument) -> str:
    raw = first_non_empty(document, DATE_RULES)
    if not raw:
        return ""
    return format_date(raw)


def extract_body_text(document: ParsedDocument) -> str:
    text = first_non_empty(document, BODY_RULES)
    if text:
        return text
    return (document.text(document.body) or "").strip()


def extract_fields(document: ParsedDocument) -> ExtractedFields:
    """Resolve every field of a post page.

    Missing markers never raise; unresolved fields come back empty (or
    "Untitled Post" for the title).
    """
    return ExtractedFields(
        title=first_non_empty(document, TITLE_RULES, DEFAULT_TITLE),
        excerpt=first_non_empty(document, EXCERPT_RULES),
        featured_image=first_non_empty(document, IMAGE_RULES),
        published_at=extract_published_at(document),
        body_text=extract_body_text(document),
    )
