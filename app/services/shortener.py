from typing import List, Optional, Tuple
import logging

from app.core.config import settings
from app.models.short_link import ShortLink
from app.utils.encoding import (
    ALPHABET,
    DEFAULT_LENGTH,
    Algorithm,
    CodeGenerator,
    default_generator,
    is_valid,
)


logger = logging.getLogger(__name__)

SUPPORTED_ALGORITHMS = [
    Algorithm.MD5.display_name,
    Algorithm.HASH.display_name,
    Algorithm.RANDOM.display_name,
    Algorithm.TIMESTAMP.display_name,
]


class InvalidShortLinkRequest(ValueError):
    pass


class ShortLinkService:

    generator: CodeGenerator = default_generator

    @staticmethod
    def validate_url(original_url: Optional[str]) -> str:
        if original_url is None or not original_url.strip():
            raise InvalidShortLinkRequest("URL must not be empty")
        try:
            original_url.encode("utf-8")
        except UnicodeEncodeError:
            raise InvalidShortLinkRequest("URL must be valid UTF-8 text")
        return original_url

    @staticmethod
    def normalize_length(length: Optional[int]) -> int:
        if length is None or length <= 0:
            return DEFAULT_LENGTH
        if length > settings.MAX_CODE_LENGTH:
            raise InvalidShortLinkRequest(f"length must be at most {settings.MAX_CODE_LENGTH}")
        return length

    @classmethod
    def create_short_link(cls, original_url: Optional[str], algorithm: Optional[str] = None) -> ShortLink:
        original_url = cls.validate_url(original_url)
        resolved = Algorithm.resolve(algorithm)
        short_code = cls.generator.generate(original_url, resolved)

        logger.info("Generated %s via %s for URL: %s", short_code, resolved.display_name, original_url[:50])
        return ShortLink(original_url=original_url, short_code=short_code, algorithm=resolved.display_name)

    @classmethod
    def create_batch(cls, urls: Optional[List[str]]) -> List[ShortLink]:
        if not urls:
            raise InvalidShortLinkRequest("URL list must not be empty")
        if len(urls) > settings.MAX_BATCH_SIZE:
            raise InvalidShortLinkRequest(f"URL list must contain at most {settings.MAX_BATCH_SIZE} entries")

        links = [cls.create_short_link(url) for url in urls]
        logger.info("Batch generated %d short links", len(links))
        return links

    @classmethod
    def create_custom_length(cls, original_url: Optional[str], length: Optional[int]) -> ShortLink:
        original_url = cls.validate_url(original_url)
        length = cls.normalize_length(length)
        short_code = cls.generator.by_custom_length(original_url, length)

        logger.info("Generated %s (length %d) for URL: %s", short_code, length, original_url[:50])
        return ShortLink(original_url=original_url, short_code=short_code, algorithm=Algorithm.SHA256.display_name)

    @staticmethod
    def validate_short_link(short_link: str) -> Tuple[bool, Optional[int]]:
        if is_valid(short_link):
            return True, len(short_link)
        logger.debug("Rejected short link format: %r", short_link)
        return False, None

    @staticmethod
    def describe(total_generated: int) -> dict:
        return {
            "total_generated": total_generated,
            "supported_algorithms": SUPPORTED_ALGORITHMS,
            "default_length": DEFAULT_LENGTH,
            "character_set_size": len(ALPHABET),
            "possible_combinations": len(ALPHABET) ** DEFAULT_LENGTH,
        }
