"""
Exception types raised inside the voice NLU engine.

None of these escape the public conversion calls (process_transcript,
classify_intent, extract_entities); they are raised by lower layers and
translated to boolean results or HTTP errors at the boundaries.
"""


class VoiceNluError(Exception):
    """Base class for engine errors."""


class UnsupportedVariantError(VoiceNluError):
    """Raised when a language variant has no registered lexicon."""

    def __init__(self, variant):
        self.variant = variant
        super().__init__(f"Unsupported language variant: {variant!r}")


class ConfigurationImportError(VoiceNluError):
    """Raised while staging an exported configuration that cannot be applied."""
