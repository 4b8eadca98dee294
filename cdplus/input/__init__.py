"""Input-layer public API: terminal key decoding and key-combo dispatch tables."""

from .reader import ESC_SEQUENCE_TIMEOUT_MS, UNKNOWN_SEQUENCE, _PENDING_BYTES, normalize_enter, read_key
from .key_registry import KeyComboBinding, KeyComboRegistry

__all__ = [
    "read_key",
    "normalize_enter",
    "_PENDING_BYTES",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "UNKNOWN_SEQUENCE",
    "KeyComboBinding",
    "KeyComboRegistry",
]
