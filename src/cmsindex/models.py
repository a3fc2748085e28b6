"""Loaded content entries and the paths they were read from."""

from typing import Any, Dict, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class LocalizedContent(BaseModel):
    """One locale's copy of an entry."""

    model_config = ConfigDict(extra="allow")

    content: Dict[str, Any] = Field(default_factory=dict)
    path: Optional[str] = None
    sha: Optional[str] = None


class Entry(BaseModel):
    """A content entry, read-only once loaded."""

    model_config = ConfigDict(extra="allow", populate_by_name=True, frozen=True)

    id: Optional[str] = None
    slug: Optional[str] = None
    sha: Optional[str] = None
    collection_name: str = Field(
        validation_alias=AliasChoices("collectionName", "collection_name")
    )
    file_name: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("fileName", "file_name")
    )
    locales: Dict[str, LocalizedContent] = Field(default_factory=dict)

    def label(self) -> str:
        """Short human readable reference, used in logs and CLI output."""
        name = self.file_name or self.slug or self.id or "?"
        return f"{self.collection_name}/{name}"


class ContentPath(BaseModel):
    """Where and how the entries of a collection (or collection file) are stored."""

    model_config = ConfigDict(populate_by_name=True)

    collection_name: str = Field(
        validation_alias=AliasChoices("collectionName", "collection_name")
    )
    file_name: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("fileName", "file_name")
    )
    file: Optional[str] = None
    folder: Optional[str] = None
    extension: str = "md"
    format: str = "frontmatter"
    frontmatter_delimiter: str | List[str] = Field(
        default="---",
        validation_alias=AliasChoices("frontmatterDelimiter", "frontmatter_delimiter"),
    )
    yaml_quote: bool = Field(
        default=False, validation_alias=AliasChoices("yamlQuote", "yaml_quote")
    )
