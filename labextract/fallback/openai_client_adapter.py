import httpx
import openai

from labextract.fallback.client_base import BaseFallbackClient
from labextract.fallback.exceptions import FallbackError, FallbackNetworkError


class OpenAIClientAdapter(BaseFallbackClient):
    """Fallback client built on the OpenAI chat completions API."""

    MAX_TOKENS = 2000

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
        )

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                max_tokens=self.MAX_TOKENS,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise FallbackNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise FallbackNetworkError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise FallbackError("AI returned no choices")
        content = response.choices[0].message.content
        if content is None:
            raise FallbackError("AI returned empty response")
        return content
