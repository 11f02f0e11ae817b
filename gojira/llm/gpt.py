"""OpenAI Completion Provider"""

from gojira.errors import ProviderHTTPError, ProviderMalformedResponse
from gojira.llm.base import CompletionProvider, REQUEST_TIMEOUT


class OpenAIProvider(CompletionProvider):
    """OpenAI chat completions. Requires OPENAI_API_KEY."""

    API_KEY_ENV = "OPENAI_API_KEY"
    MODELS = ("gpt-4o", "gpt-4-turbo", "gpt-4", "gpt-3.5-turbo")
    DEFAULT_MODEL = "gpt-4o"
    MAX_COMPLETION_TOKENS = 16383

    @property
    def name(self) -> str:
        return "OpenAI"

    def _get_client(self):
        if self._client is None:
            try:
                from openai import OpenAI
            except ImportError:
                raise ProviderHTTPError(
                    "OpenAI SDK not installed. Run:\n"
                    "  pip install openai"
                )
            self._client = OpenAI(api_key=self.api_key, timeout=REQUEST_TIMEOUT, max_retries=0)
        return self._client

    def build_request(self, prompt: str, model: str) -> dict:
        return {
            "model": model,
            "messages": [{"role": "user", "content": prompt}],
            "max_completion_tokens": self.MAX_COMPLETION_TOKENS,
        }

    def _send(self, request: dict):
        import openai

        client = self._get_client()
        try:
            return client.chat.completions.create(**request)
        except openai.AuthenticationError as e:
            raise ProviderHTTPError("Invalid API key. Check your OPENAI_API_KEY.", status_code=e.status_code) from e
        except openai.APIStatusError as e:
            raise ProviderHTTPError(f"OpenAI API error ({e.status_code}): {e.message}", status_code=e.status_code) from e
        except openai.APITimeoutError as e:
            raise ProviderHTTPError(f"OpenAI request timed out after {REQUEST_TIMEOUT}s") from e
        except openai.APIConnectionError as e:
            raise ProviderHTTPError(f"Could not reach OpenAI: {e}") from e

    def parse_response(self, response) -> str:
        choices = getattr(response, "choices", None)
        if not choices:
            raise ProviderMalformedResponse("Unexpected response from OpenAI: no choices returned")
        message = getattr(choices[0], "message", None)
        content = getattr(message, "content", None)
        if not isinstance(content, str):
            raise ProviderMalformedResponse("Unexpected response from OpenAI: first choice has no text")
        return content
