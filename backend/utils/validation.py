import re
from typing import Optional
from urllib.parse import urlsplit

from config.constants import ANALYSIS_LIMITS
from exceptions import ValidationException
from models import ArticleInput


class InputValidator:

    CONTROL_CHARS_PATTERN = re.compile(r'[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]')

    ALLOWED_SCHEMES = ("http", "https")

    @staticmethod
    def sanitize_text(
        value: Optional[str], field: str, max_length: int, strip: bool = True
    ) -> Optional[str]:
        if value is None:
            return None

        value = InputValidator.CONTROL_CHARS_PATTERN.sub('', value)
        if strip:
            value = value.strip()

        if not value:
            return None

        if len(value) > max_length:
            raise ValidationException(field, f"cannot exceed {max_length} characters")

        return value

    @staticmethod
    def sanitize_url(value: Optional[str], field: str) -> Optional[str]:
        value = InputValidator.sanitize_text(value, field, ANALYSIS_LIMITS.MAX_URL_LENGTH)
        if value is None:
            return None

        try:
            parts = urlsplit(value)
            host = parts.hostname
        except ValueError:
            raise ValidationException(field, "is not a valid URL")

        if parts.scheme.lower() not in InputValidator.ALLOWED_SCHEMES:
            raise ValidationException(field, "must be an http or https URL")
        if not host:
            raise ValidationException(field, "must include a host")

        return value

    @staticmethod
    def sanitize_article(article: ArticleInput) -> ArticleInput:
        """Return a cleaned copy of the article or raise ValidationException."""
        cleaned = ArticleInput(
            text=InputValidator.sanitize_text(article.text, "text", ANALYSIS_LIMITS.MAX_TEXT_LENGTH),
            title=InputValidator.sanitize_text(article.title, "title", ANALYSIS_LIMITS.MAX_TITLE_LENGTH),
            url=InputValidator.sanitize_url(article.url, "url"),
            image_url=InputValidator.sanitize_url(article.image_url, "imageUrl"),
        )

        if not cleaned.has_content():
            raise ValidationException("article", "provide text, url, or imageUrl")

        return cleaned
