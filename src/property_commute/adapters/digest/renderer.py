"""Render the property digest as HTML with Jinja2."""

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from property_commute.domain.models.digest_entry import PropertyDigestEntry

TEMPLATE_DIR = Path(__file__).parent / "templates"
TEMPLATE_NAME = "digest.html.j2"


@dataclass(frozen=True)
class DigestSummary:
    """Search criteria shown at the top of the digest."""

    area_name: str
    object_types: str
    max_distance_to_water: int
    days_active: int
    origin_label: str


def image_src(entry: PropertyDigestEntry, inline_images: bool) -> str | None:
    """Pick the image source for an entry.

    Inline rendering embeds the image as a data URI; email rendering references
    the attachment by Content-ID. Falls back to the remote URL, then to None.
    """
    if entry.image is not None:
        return entry.image.data_uri() if inline_images else f"cid:{entry.image.cid}"
    return entry.image_url


class DigestRenderer:
    """Renders digest entries into a self-contained HTML document."""

    def __init__(self, template_dir: Path = TEMPLATE_DIR) -> None:
        """Initialize the Jinja2 environment."""
        self._env = Environment(
            loader=FileSystemLoader(str(template_dir)),
            autoescape=select_autoescape(["html", "j2"]),
        )
        self._env.filters["image_src"] = image_src

    def render(
        self,
        entries: list[PropertyDigestEntry],
        summary: DigestSummary,
        title: str,
        inline_images: bool = False,
        generated_at: datetime | None = None,
    ) -> str:
        """Render the digest.

        Args:
            entries: Properties to list.
            summary: Search criteria for the summary box.
            title: Page heading and title.
            inline_images: Embed images as data URIs (debug files) instead of cid: references.
            generated_at: Timestamp printed in the footer (default: now).
        """
        template = self._env.get_template(TEMPLATE_NAME)
        return template.render(
            entries=entries,
            summary=summary,
            title=title,
            inline_images=inline_images,
            generated_at=generated_at or datetime.now(),
        )
