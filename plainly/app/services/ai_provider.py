"""
AI collaborator contracts.

The AI-assisted tools (code, image, SQL/schema generators, chat assistant)
are not part of the calculation engine. They consume two external services
through the abstract interfaces below; concrete providers are supplied by
the surrounding application.

Failures are surfaced distinctly so the UI can tell "you are offline" from
"the service is misconfigured". Nothing in the engine retries a failed
request.
"""
from abc import ABC, abstractmethod

from plainly.app.schemas.provider import ImageSize, TextCompletionOptions


# ============================================================================
# EXCEPTIONS
# ============================================================================

class AIServiceError(Exception):
    """Base exception for AI collaborator errors."""
    pass


class OfflineError(AIServiceError):
    """Raised when the AI service cannot be reached (no connectivity)."""
    pass


class AIConfigurationError(AIServiceError):
    """Raised when the AI service is misconfigured (missing key, bad endpoint)."""
    pass


# ============================================================================
# ABSTRACT BASE CLASSES
# ============================================================================

class TextCompletionProvider(ABC):
    """
    Abstract base class for text completion providers.

    Contract:
        complete(prompt, system_prompt, options) -> str

    Raises:
        OfflineError: No connectivity
        AIServiceError: Any other failure
    """

    @property
    @abstractmethod
    def provider_code(self) -> str:
        """Short identifier, e.g. 'groq'."""
        pass

    @abstractmethod
    def complete(self, prompt: str, system_prompt: str, options: TextCompletionOptions) -> str:
        """Return the completion text for `prompt` under `system_prompt`."""
        pass


class ImageGenerationProvider(ABC):
    """
    Abstract base class for image generation providers.

    Contract:
        generate(prompt, size) -> image URL

    Raises:
        AIConfigurationError: Provider misconfigured
        AIServiceError: Any other failure
    """

    @property
    @abstractmethod
    def provider_code(self) -> str:
        pass

    @abstractmethod
    def generate(self, prompt: str, size: ImageSize) -> str:
        """Return the URL of an image generated from `prompt`."""
        pass


def request_completion(
    provider: TextCompletionProvider,
    prompt: str,
    system_prompt: str = "",
    options: TextCompletionOptions = TextCompletionOptions()
    ) -> str:
    """
    Validate a completion request and forward it to `provider` once.

    Raises:
        ValueError: If prompt is blank
        OfflineError, AIServiceError: Propagated from the provider unchanged
    """
    if not prompt or not prompt.strip():
        raise ValueError("prompt must not be empty")
    return provider.complete(prompt, system_prompt, options)


def request_image(provider: ImageGenerationProvider, prompt: str, size: ImageSize = ImageSize()) -> str:
    """
    Validate an image request and forward it to `provider` once.

    Raises:
        ValueError: If prompt is blank
        AIConfigurationError, AIServiceError: Propagated from the provider unchanged
    """
    if not prompt or not prompt.strip():
        raise ValueError("prompt must not be empty")
    return provider.generate(prompt, size)
