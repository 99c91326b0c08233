"""OpsLog Inquisitor - Failure fingerprinting."""

from .fingerprint import (
    ContentFingerprintCalculator,
    FingerprintCalculator,
    generate_failure_fingerprint,
)

__all__ = [
    "ContentFingerprintCalculator",
    "FingerprintCalculator",
    "generate_failure_fingerprint",
]
