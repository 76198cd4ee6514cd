"""Write the property digest to an HTML file for previewing."""

import asyncio
import logging
from datetime import UTC, datetime
from pathlib import Path

from property_commute.adapters.digest.renderer import DigestRenderer, DigestSummary
from property_commute.domain.models.digest_entry import PropertyDigestEntry
from property_commute.domain.ports.digest_publisher import DigestPublisher

logger = logging.getLogger(__name__)


def digest_filename(now: datetime) -> str:
    """File name for a digest written at ``now``, e.g. property-email-2025-12-23T17-35-00-000Z.html."""
    timestamp = now.isoformat(timespec="milliseconds").replace("+00:00", "Z")
    return f"property-email-{timestamp.replace(':', '-').replace('.', '-')}.html"


class HtmlFilePublisher(DigestPublisher):
    """Renders the digest with inline images and saves it to disk."""

    def __init__(
        self,
        output_dir: Path,
        summary: DigestSummary,
        title: str,
        renderer: DigestRenderer | None = None,
    ) -> None:
        """Initialize with the directory to write files into."""
        self._output_dir = output_dir
        self._summary = summary
        self._title = title
        self._renderer = renderer or DigestRenderer()
        self.last_path: Path | None = None

    async def publish(self, entries: list[PropertyDigestEntry]) -> bool:
        """Write the digest file. Returns False if it could not be written."""
        html = self._renderer.render(entries, self._summary, title=self._title, inline_images=True)
        path = self._output_dir / digest_filename(datetime.now(UTC))

        try:
            await asyncio.to_thread(path.write_text, html, encoding="utf-8")
        except OSError as e:
            logger.error(f"Error saving HTML file: {e}")
            return False

        self.last_path = path
        logger.info(f"HTML content saved to: {path}")
        logger.info("Open this file in a web browser to preview the email.")
        return True
