"""
Failure Fingerprinting
======================
Content hashing of failures for stack trace deduplication.
"""

import hashlib
import json
from typing import Any, List, Protocol, Union

from ..core.config import validate_hash_algorithm
from ..core.types import FailureInfo


class FingerprintCalculator(Protocol):
    """Anything that maps a failure to a stable, filename-safe string."""

    def calculate_fingerprint(self, failure: Union[FailureInfo, BaseException]) -> str:
        ...


def _canonical_form(failure: FailureInfo) -> List[Any]:
    return [
        failure.kind,
        failure.message,
        [list(frame.identity()) for frame in failure.frames],
        [_canonical_form(cause) for cause in failure.causes],
    ]


class ContentFingerprintCalculator:
    """
    Hashes kind, message, frames and the whole cause chain.

    The preimage is compact JSON of nested lists, so an absent message (null)
    and an empty message ("") hash differently, and field boundaries cannot
    be forged by the field contents. The result is a lowercase hex digest.
    """

    def __init__(self, algorithm: str = "sha256"):
        self.algorithm = validate_hash_algorithm(algorithm)

    def calculate_fingerprint(self, failure: Union[FailureInfo, BaseException]) -> str:
        failure = FailureInfo.coerce(failure)
        preimage = json.dumps(
            _canonical_form(failure),
            ensure_ascii=False,
            separators=(",", ":"),
        ).encode("utf-8", errors="surrogatepass")
        return hashlib.new(self.algorithm, preimage).hexdigest()


_default_calculator = ContentFingerprintCalculator()


def generate_failure_fingerprint(failure: Union[FailureInfo, BaseException]) -> str:
    """
    Fingerprint a failure with the default SHA-256 calculator.

    Args:
        failure: exception or FailureInfo snapshot

    Returns:
        SHA-256 hash (hex string)
    """
    return _default_calculator.calculate_fingerprint(failure)
