"""Trip records and the JSON projections embedded in rendered pages."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ManifestEntry(BaseModel):
    """Reduced trip projection consumed by the explorer page script."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    slug: str
    title: str
    ai_files: tuple[str, ...] = Field(default=(), alias="aiFiles")

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class TripPageData(ManifestEntry):
    """Payload embedded in a trip hub page."""

    overview_path: str = Field(alias="overviewPath")


class Trip(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    slug: str
    title: str
    ai_files: tuple[str, ...] = Field(default=(), alias="aiFiles")
    overview_html: str = Field(alias="overviewHtml", min_length=1)

    def manifest_entry(self) -> ManifestEntry:
        return ManifestEntry(slug=self.slug, title=self.title, ai_files=self.ai_files)

    def page_data(self, overview_filename: str) -> TripPageData:
        return TripPageData(
            slug=self.slug,
            title=self.title,
            ai_files=self.ai_files,
            overview_path=f"./{overview_filename}",
        )
