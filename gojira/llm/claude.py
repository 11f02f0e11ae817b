"""Claude (Anthropic) Completion Provider"""

from gojira.errors import ProviderHTTPError, ProviderMalformedResponse
from gojira.llm.base import CompletionProvider, REQUEST_TIMEOUT


class AnthropicProvider(CompletionProvider):
    """Anthropic messages API. Requires ANTHROPIC_API_KEY."""

    API_KEY_ENV = "ANTHROPIC_API_KEY"
    MODELS = (
        "claude-3-opus-20240229",
        "claude-3-sonnet-20240229",
        "claude-3-haiku-20240307",
        "claude-3-5-sonnet-20240620",
    )
    DEFAULT_MODEL = "claude-3-5-sonnet-20240620"
    MAX_TOKENS = 4096

    @property
    def name(self) -> str:
        return "Anthropic"

    def _get_client(self):
        if self._client is None:
            try:
                from anthropic import Anthropic
            except ImportError:
                raise ProviderHTTPError(
                    "Anthropic SDK not installed. Run:\n"
                    "  pip install anthropic"
                )
            self._client = Anthropic(api_key=self.api_key, timeout=REQUEST_TIMEOUT, max_retries=0)
        return self._client

    def build_request(self, prompt: str, model: str) -> dict:
        return {
            "model": model,
            "messages": [{"role": "user", "content": prompt}],
            "max_tokens": self.MAX_TOKENS,
        }

    def _send(self, request: dict):
        import anthropic

        client = self._get_client()
        try:
            return client.messages.create(**request)
        except anthropic.AuthenticationError as e:
            raise ProviderHTTPError("Invalid API key. Check your ANTHROPIC_API_KEY.", status_code=e.status_code) from e
        except anthropic.APIStatusError as e:
            raise ProviderHTTPError(f"Claude API error ({e.status_code}): {e.message}", status_code=e.status_code) from e
        except anthropic.APITimeoutError as e:
            raise ProviderHTTPError(f"Claude request timed out after {REQUEST_TIMEOUT}s") from e
        except anthropic.APIConnectionError as e:
            raise ProviderHTTPError(f"Could not reach Anthropic: {e}") from e

    def parse_response(self, response) -> str:
        for block in getattr(response, "content", None) or []:
            if getattr(block, "type", None) == "text" and isinstance(getattr(block, "text", None), str):
                return block.text
        raise ProviderMalformedResponse("Unexpected response from Anthropic: no text block returned")
