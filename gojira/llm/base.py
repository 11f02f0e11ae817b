"""Completion Provider Base Class"""

import logging
from abc import ABC, abstractmethod

from gojira.env import get_env
from gojira.errors import MissingCredential

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 120  # seconds, completions can be slow


class CompletionProvider(ABC):
    """Abstract base for completion backends.

    Subclasses read their API key from the environment at construction and
    only complain about a missing key when a completion is requested, so the
    CLI can list providers without credentials.
    """

    API_KEY_ENV = ""
    MODELS: tuple[str, ...] = ()
    DEFAULT_MODEL = ""

    def __init__(self, api_key: str | None = None, client=None):
        self.api_key = api_key if api_key is not None else get_env(self.API_KEY_ENV, warn=False)
        self._client = client

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    def available_models(self) -> list[str]:
        return list(self.MODELS)

    def default_model(self) -> str:
        return self.DEFAULT_MODEL

    def get_completions(self, prompt: str, model_id: str | None = None) -> str:
        """Send a single user turn and return the generated text."""
        if not self.api_key:
            raise MissingCredential(
                f"{self.API_KEY_ENV} is not set. Add it to your environment or .env file:\n"
                f"  {self.API_KEY_ENV}=your-key-here"
            )
        model = model_id or self.default_model()
        request = self.build_request(prompt, model)
        logger.debug("Requesting completion from %s (model=%s, prompt=%d chars)", self.name, model, len(prompt))
        response = self._send(request)
        return self.parse_response(response)

    @abstractmethod
    def build_request(self, prompt: str, model: str) -> dict:
        """Backend-specific request body."""
        pass

    @abstractmethod
    def _send(self, request: dict):
        pass

    @abstractmethod
    def parse_response(self, response) -> str:
        pass
