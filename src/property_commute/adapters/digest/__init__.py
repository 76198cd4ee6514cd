"""Digest rendering and delivery adapters."""

from property_commute.adapters.digest.html_file_publisher import HtmlFilePublisher
from property_commute.adapters.digest.image_fetcher import ImageFetcher
from property_commute.adapters.digest.renderer import DigestRenderer, DigestSummary
from property_commute.adapters.digest.smtp_publisher import SmtpDigestPublisher

__all__ = [
    "DigestRenderer",
    "DigestSummary",
    "HtmlFilePublisher",
    "ImageFetcher",
    "SmtpDigestPublisher",
]
