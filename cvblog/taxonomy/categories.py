"""
Canonical blog category definitions.

The taxonomy is closed: five categories, each with display copy and the
default layout preset and funnel stage used for posts filed under it.
"""

from typing import Dict, Iterable, List, Literal, Optional, Tuple, get_args

from pydantic import BaseModel, Field

from .slug import normalize_base_path

CategorySlug = Literal[
    "cv-strategy",
    "linkedin",
    "career-growth",
    "kenya-market",
    "hiring-insights",
]

BlogPostPreset = Literal[
    "conversionArticle",
    "editorialArticle",
    "analysisArticle",
    "shortInsight",
    "campaignLanding",
]

FunnelStage = Literal["TOFU", "MOFU", "BOFU", "MOFU_BOFU"]

CATEGORY_SLUGS: Tuple[str, ...] = get_args(CategorySlug)
LAYOUT_PRESETS: Tuple[str, ...] = get_args(BlogPostPreset)

CATEGORY_BASE_PATH = "/blog"
DEFAULT_PRESET: BlogPostPreset = "conversionArticle"
DEFAULT_FUNNEL_STAGE: FunnelStage = "MOFU"


class ImageConfig(BaseModel):
    """Hero or Open Graph image."""

    src: str
    alt: str


class BlogCategory(BaseModel):
    """Category metadata."""

    slug: CategorySlug = Field(..., description="URL-safe slug used in routes and frontmatter")
    name: str = Field(..., description="Display name")
    description: str = Field(..., description="Intro / meta description")
    hero_title: str = Field(..., description="H1 on the category landing page")
    hero_subtitle: str = Field(..., description="Subtitle on the category landing page")
    card_subtitle: str = Field(..., description="Subtitle on category cards")
    card_body: str = Field(..., description="Body copy on category cards")
    default_preset: BlogPostPreset = Field(..., description="Layout preset for posts in this category")
    default_funnel_stage: FunnelStage = Field(..., description="Funnel stage for posts in this category")
    hero_image: Optional[ImageConfig] = None
    og_image: Optional[ImageConfig] = None


CATEGORIES: Tuple[BlogCategory, ...] = (
    BlogCategory(
        slug="cv-strategy",
        name="CV & Application Strategy",
        description=(
            "Clear, practical frameworks for CVs, cover letters, and ATS-ready "
            "applications tailored to the Kenyan market."
        ),
        hero_title="Build a CV That Gets You Shortlisted",
        hero_subtitle="Clear, practical frameworks for the modern Kenyan job market.",
        card_subtitle="Clear, practical guides for stronger applications.",
        card_body="Proven CV, cover letter, and ATS frameworks tailored for the Kenyan job market.",
        default_preset="conversionArticle",
        default_funnel_stage="BOFU",
    ),
    BlogCategory(
        slug="linkedin",
        name="LinkedIn & Professional Branding",
        description=(
            "Guides for positioning your LinkedIn profile for visibility, "
            "credibility, and recruiter search."
        ),
        hero_title="Strengthen Your Professional Presence Online",
        hero_subtitle="Position yourself for visibility, credibility, and recruiter search.",
        card_subtitle="Be visible. Be credible.",
        card_body="Position your profile for recruiter search, clarity, and professional authority.",
        default_preset="conversionArticle",
        default_funnel_stage="MOFU_BOFU",
    ),
    BlogCategory(
        slug="career-growth",
        name="Career Growth & Transitions",
        description=(
            "Practical frameworks for progression, transitions, and leadership "
            "decisions in the Kenyan context."
        ),
        hero_title="Navigate Career Decisions with Clarity",
        hero_subtitle="Practical frameworks for progression, transitions, and leadership.",
        card_subtitle="Navigate your next step with confidence.",
        card_body=(
            "Practical career strategy, progression insights, and transition "
            "frameworks for Kenyan professionals."
        ),
        default_preset="editorialArticle",
        default_funnel_stage="MOFU",
    ),
    BlogCategory(
        slug="kenya-market",
        name="Kenya Job Market & Sector Insights",
        description=(
            "Data-backed sector outlooks, salary trends, and hiring patterns "
            "across the Kenyan economy."
        ),
        hero_title="Understand the Trends Shaping Work in Kenya",
        hero_subtitle="Sector outlooks, hiring patterns, and salary intelligence.",
        card_subtitle="Local trends that shape real opportunities.",
        card_body=(
            "Sector outlooks, salary benchmarks, and hiring insights grounded "
            "in Kenya's evolving economy."
        ),
        default_preset="analysisArticle",
        default_funnel_stage="TOFU",
    ),
    BlogCategory(
        slug="hiring-insights",
        name="Interviews, Shortlisting & Recruiter Systems",
        description="Interview preparation and recruiter-process insights for Kenyan jobseekers.",
        hero_title="Learn How Hiring Really Works",
        hero_subtitle="Interview prep, shortlisting insights, and recruiter behaviour.",
        card_subtitle="Understand how hiring really works.",
        card_body=(
            "Interview prep, recruiter behaviour, and shortlisting dynamics to "
            "help you stand out and get hired."
        ),
        default_preset="conversionArticle",
        default_funnel_stage="MOFU_BOFU",
    ),
)


def pretty_slug(slug: str) -> str:
    """'some-slug' -> 'Some Slug'."""
    return " ".join(part.capitalize() for part in slug.split("-") if part)


class CategoryTable:
    """
    Read-only category lookup.

    Build one per batch run and pass it to whatever needs category metadata
    or the category base path.
    """

    def __init__(
        self,
        categories: Iterable[BlogCategory] = CATEGORIES,
        base_path: str = CATEGORY_BASE_PATH,
    ) -> None:
        self._categories: Tuple[BlogCategory, ...] = tuple(categories)
        self._by_slug: Dict[str, BlogCategory] = {c.slug: c for c in self._categories}
        self.base_path = normalize_base_path(base_path)

    def __contains__(self, slug: object) -> bool:
        return slug in self._by_slug

    def __iter__(self):
        return iter(self._categories)

    def __len__(self) -> int:
        return len(self._categories)

    @property
    def slugs(self) -> List[str]:
        return [c.slug for c in self._categories]

    def get(self, slug: str) -> Optional[BlogCategory]:
        """Category by slug, or None for unknown slugs."""
        return self._by_slug.get(slug)

    def all(self) -> List[BlogCategory]:
        return list(self._categories)

    def pretty_title(self, slug: str) -> str:
        """Display name, falling back to a title-cased slug."""
        category = self.get(slug)
        if category:
            return category.name
        return pretty_slug(slug)

    def build_title(self, slug: str) -> str:
        """<title> text for a category listing page."""
        return f"{self.pretty_title(slug)} · Blog Category"

    def build_description(self, slug: str) -> str:
        """Meta description for a category listing page."""
        category = self.get(slug)
        if category and category.description:
            return category.description
        return f"Articles and insights in the {self.pretty_title(slug)} category."

    def related(self, current: str, limit: int = 3) -> List[BlogCategory]:
        """All other categories in canonical order, truncated to limit."""
        others = [c for c in self._categories if c.slug != current]
        return others[: max(0, limit)]

    def resolve_preset(self, slug: str, explicit: Optional[str] = None) -> str:
        """Explicit preset if given, else the category default."""
        if explicit:
            return explicit
        category = self.get(slug)
        return category.default_preset if category else DEFAULT_PRESET

    def resolve_funnel_stage(self, slug: str, explicit: Optional[str] = None) -> str:
        """Explicit funnel stage if given, else the category default."""
        if explicit:
            return explicit
        category = self.get(slug)
        return category.default_funnel_stage if category else DEFAULT_FUNNEL_STAGE
