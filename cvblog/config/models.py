"""Configuration models."""

from pydantic import BaseModel, Field, field_validator


class ContentConfig(BaseModel):
    """Where articles are read from."""

    content_dir: str = Field("src/content/blog", description="Directory holding .md/.mdx articles")
    words_per_minute: int = Field(220, description="Reading speed for estimated reading time", ge=50, le=1000)


class SiteConfig(BaseModel):
    """URL layout of the blog."""

    category_base_path: str = Field("/blog", description="Base path for article and category routes")

    @field_validator("category_base_path")
    @classmethod
    def validate_base_path(cls, v: str) -> str:
        """Base path must not be blank."""
        if not v.strip():
            raise ValueError("category_base_path must not be empty")
        return v.strip()


class BuildDefaults(BaseModel):
    """Defaults for listing and related reading."""

    per_page: int = Field(8, description="Articles per category listing page", ge=1, le=100)
    related_limit: int = Field(6, description="Maximum related articles per post", ge=1, le=50)
    output_dir: str = Field("public/blog/_data", description="Where build data files are written")


class ConfigModel(BaseModel):
    """Main configuration model."""

    content: ContentConfig = Field(default_factory=ContentConfig)
    site: SiteConfig = Field(default_factory=SiteConfig)
    build: BuildDefaults = Field(default_factory=BuildDefaults)
