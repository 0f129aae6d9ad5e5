import base64
import hashlib
import logging
import random
import re
import time
from enum import Enum
from typing import Callable, Optional

logger = logging.getLogger(__name__)

# Base62 alphabet: digits, lowercase, uppercase (order matters for radix encoding)
ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
BASE = len(ALPHABET)
DEFAULT_LENGTH = 6

_NON_ALPHANUMERIC = re.compile(r"[^a-zA-Z0-9]")


class Algorithm(str, Enum):
    MD5 = "md5"
    SHA256 = "sha256"
    HASH = "hash"
    RANDOM = "random"
    TIMESTAMP = "timestamp"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @classmethod
    def resolve(cls, selector: Optional[str]) -> "Algorithm":
        """Map a caller-supplied selector to an Algorithm; unknown or missing means MD5."""
        if not selector:
            return cls.MD5
        return _SELECTORS.get(selector.strip().lower(), cls.MD5)


_DISPLAY_NAMES = {
    Algorithm.MD5: "MD5",
    Algorithm.SHA256: "SHA-256",
    Algorithm.HASH: "Hash",
    Algorithm.RANDOM: "Random",
    Algorithm.TIMESTAMP: "Timestamp",
}

_SELECTORS = {member.value: member for member in Algorithm}
_SELECTORS["sha-256"] = Algorithm.SHA256

_DIGESTS = {
    Algorithm.MD5: "md5",
    Algorithm.SHA256: "sha256",
}


def current_millis() -> int:
    return time.time_ns() // 1_000_000


def java_string_hash(value: str) -> int:
    """32-bit polynomial hash over UTF-16 code units, stable across processes."""
    h = 0
    data = value.encode("utf-16-be", "surrogatepass")
    for i in range(0, len(data), 2):
        unit = (data[i] << 8) | data[i + 1]
        h = (31 * h + unit) & 0xFFFFFFFF
    return h


class CodeGenerator:
    """
    Produces fixed-length base62 codes from input strings.

    The random source and the millisecond clock are injected so callers (and
    tests) can make every strategy deterministic.
    """

    def __init__(self, rng: Optional[random.Random] = None, clock: Optional[Callable[[], int]] = None):
        self.rng = rng or random.Random()
        self.clock = clock or current_millis

    def by_random(self, target_length: int = DEFAULT_LENGTH) -> str:
        return ''.join(self.rng.choice(ALPHABET) for _ in range(target_length))

    def by_digest_truncation(self, value: str, algorithm: Algorithm, target_length: int = DEFAULT_LENGTH) -> str:
        # surrogatepass keeps lone surrogates hashable
        data = value.encode("utf-8", "surrogatepass")
        try:
            digest = hashlib.new(_DIGESTS[algorithm], data).digest()
        except (KeyError, ValueError):
            logger.warning("Digest %s unavailable, falling back to random code", algorithm.value)
            return self.by_random(target_length)

        encoded = base64.urlsafe_b64encode(digest).decode("ascii").rstrip("=")
        filtered = _NON_ALPHANUMERIC.sub("", encoded)

        if len(filtered) < target_length:
            return filtered + self.by_random(target_length - len(filtered))
        return filtered[:target_length]

    def by_checksum(self, value: str, target_length: int = DEFAULT_LENGTH) -> str:
        h = java_string_hash(value) & 0x7FFFFFFF
        out = []
        for _ in range(target_length):
            h, rem = divmod(h, BASE)
            out.append(ALPHABET[rem])
        return ''.join(out)

    def by_salted_timestamp(self, value: str, target_length: int = DEFAULT_LENGTH) -> str:
        return self.by_digest_truncation(f"{value}{self.clock()}", Algorithm.MD5, target_length)

    def by_custom_length(self, value: str, length: int) -> str:
        if length <= 0:
            length = DEFAULT_LENGTH
        return self.by_digest_truncation(value, Algorithm.SHA256, length)

    def generate(self, value: str, algorithm: Algorithm = Algorithm.MD5, target_length: int = DEFAULT_LENGTH) -> str:
        if algorithm is Algorithm.HASH:
            return self.by_checksum(value, target_length)
        if algorithm is Algorithm.RANDOM:
            return self.by_random(target_length)
        if algorithm is Algorithm.TIMESTAMP:
            return self.by_salted_timestamp(value, target_length)
        return self.by_digest_truncation(value, algorithm, target_length)


def matches_format(code: Optional[str], length: int) -> bool:
    """True iff code has exactly `length` characters, all from ALPHABET."""
    if not isinstance(code, str) or len(code) != length:
        return False
    return all(ch in ALPHABET for ch in code)


def is_valid(code: Optional[str]) -> bool:
    """Validate against the default length only; custom-length codes need matches_format."""
    return matches_format(code, DEFAULT_LENGTH)


default_generator = CodeGenerator()


def generate_short_code(value: str, algorithm: Algorithm = Algorithm.MD5, length: int = DEFAULT_LENGTH) -> str:
    return default_generator.generate(value, algorithm, length)
