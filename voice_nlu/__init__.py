"""
Voice NLU: utterance normalization and intent/entity extraction for voice
food ordering.

    from voice_nlu import initialize

    engine = initialize("fr-CH")
    engine.process_transcript("je voudrais septante grammes de fromage")
    # "Je voudrais 70 grammes de fromage"
"""

__version__ = "1.0.0"

from .engine import UtteranceEngine, initialize
from .exceptions import ConfigurationImportError, UnsupportedVariantError, VoiceNluError
from .schemas.configuration import ConversationContext, EngineConfiguration, EngineOptions

__all__ = [
    "ConfigurationImportError",
    "ConversationContext",
    "EngineConfiguration",
    "EngineOptions",
    "UnsupportedVariantError",
    "UtteranceEngine",
    "VoiceNluError",
    "__version__",
    "initialize",
]
