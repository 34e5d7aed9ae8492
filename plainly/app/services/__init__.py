"""
Services package.
Contracts of the external collaborators used around the calculation engine.

- ai_provider: text completion and image generation interfaces + errors
"""
from plainly.app.services.ai_provider import (
    AIConfigurationError,
    AIServiceError,
    ImageGenerationProvider,
    OfflineError,
    TextCompletionProvider,
    )

__all__ = [
    "AIServiceError",
    "OfflineError",
    "AIConfigurationError",
    "TextCompletionProvider",
    "ImageGenerationProvider",
    ]
