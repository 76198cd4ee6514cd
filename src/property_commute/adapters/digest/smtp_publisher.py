"""Deliver the property digest by email over SMTP."""

import asyncio
import logging
import smtplib
from email.message import EmailMessage

from property_commute.adapters.config import AppConfig
from property_commute.adapters.digest.renderer import DigestRenderer, DigestSummary
from property_commute.domain.models.digest_entry import ListingImage, PropertyDigestEntry
from property_commute.domain.ports.digest_publisher import DigestPublisher

logger = logging.getLogger(__name__)


def _split_mime_type(mime_type: str) -> tuple[str, str]:
    """Split "image/png; charset=..." into ("image", "png")."""
    maintype, _, subtype = mime_type.split(";", 1)[0].strip().partition("/")
    return maintype or "image", subtype or "jpeg"


def build_plain_text(entries: list[PropertyDigestEntry]) -> str:
    """Plain-text alternative for mail clients without HTML support."""
    lines = [f"{len(entries)} new properties", ""]
    for index, entry in enumerate(entries, start=1):
        lines.append(f"{index}. {entry.address}")
        lines.append(f"   Type: {entry.object_type}")
        lines.append(f"   Location: {entry.location}")
        lines.append(f"   Price: {entry.price}")
        lines.append(f"   Travel time: {entry.travel_time}")
        lines.append(f"   {entry.url}")
        lines.append("")
    return "\n".join(lines)


class SmtpDigestPublisher(DigestPublisher):
    """Sends the digest as an HTML email with images attached inline."""

    def __init__(
        self,
        config: AppConfig,
        summary: DigestSummary,
        renderer: DigestRenderer | None = None,
    ) -> None:
        """Initialize with SMTP settings from the app config."""
        self._config = config
        self._summary = summary
        self._renderer = renderer or DigestRenderer()

    def build_message(self, entries: list[PropertyDigestEntry]) -> EmailMessage:
        """Build the MIME message: text and HTML alternatives, images as related parts."""
        html = self._renderer.render(
            entries, self._summary, title=self._config.email_subject, inline_images=False
        )

        message = EmailMessage()
        message["Subject"] = self._config.email_subject
        message["From"] = self._config.email_from or self._config.smtp_user or ""
        message["To"] = ", ".join(self._config.recipients)
        message.set_content(build_plain_text(entries))
        message.add_alternative(html, subtype="html")

        html_part = message.get_payload()[1]
        images: list[ListingImage] = [e.image for e in entries if e.image is not None]
        for image in images:
            maintype, subtype = _split_mime_type(image.mime_type)
            html_part.add_related(
                image.content,
                maintype=maintype,
                subtype=subtype,
                cid=f"<{image.cid}>",
                filename=image.filename,
                disposition="inline",
            )
        return message

    def _send(self, message: EmailMessage) -> None:
        """Send synchronously; runs in a worker thread."""
        host = self._config.smtp_host or ""
        port = self._config.smtp_port

        smtp: smtplib.SMTP
        if self._config.smtp_secure:
            smtp = smtplib.SMTP_SSL(host, port)
        else:
            smtp = smtplib.SMTP(host, port)

        with smtp as server:
            if not self._config.smtp_secure:
                server.ehlo()
                if server.has_extn("starttls"):
                    server.starttls()
                    server.ehlo()
            if self._config.smtp_user and self._config.smtp_pass:
                server.login(self._config.smtp_user, self._config.smtp_pass)
            server.send_message(message)

    async def publish(self, entries: list[PropertyDigestEntry]) -> bool:
        """Email the digest. Returns False if email is not configured or sending failed."""
        if not self._config.email_configured:
            logger.warning("Email not sent - SMTP configuration missing (SMTP_HOST, EMAIL_TO)")
            return False

        message = self.build_message(entries)
        attachments = sum(1 for e in entries if e.image is not None)
        logger.info(f"Sending email with {attachments} image attachment(s)...")

        try:
            await asyncio.to_thread(self._send, message)
        except smtplib.SMTPAuthenticationError:
            logger.error("SMTP authentication failed - check SMTP_USER and SMTP_PASS")
            return False
        except (smtplib.SMTPException, OSError) as e:
            logger.error(f"Error sending email: {e}")
            return False

        logger.info(f"Email sent to {len(self._config.recipients)} recipient(s)")
        return True
