"""AI-powered marker extraction used when pattern matching finds too little."""

import json
from pathlib import Path

from labextract.fallback.base import BaseMarkerFallback
from labextract.fallback.client_base import BaseFallbackClient
from labextract.fallback.exceptions import FallbackError
from labextract.fallback.prompt_loader import load_prompt_template, load_system_prompt
from labextract.logging.logger import Log


class LlmMarkerFallback(BaseMarkerFallback):
    """Asks a chat model for a JSON array of markers found in the report."""

    TRUNCATION_NOTE = "\n[Text truncated for processing...]"

    def __init__(
        self,
        *,
        client: BaseFallbackClient,
        model: str,
        temperature: float = 0.1,
        max_text_chars: int = 12000,
        prompt_template_path: Path | None = None,
        system_prompt_path: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(0.2, temperature))
        self._max_text_chars = max_text_chars
        self._prompt_template = load_prompt_template(prompt_template_path)
        self._system_prompt = load_system_prompt(system_prompt_path)

    def extract_markers(self, text: str) -> list[dict[str, object]]:
        """Return the raw marker dicts the model found in *text*."""
        prompt = self._build_prompt(text)
        Log.debug(f"Fallback prompt:\n{prompt}")

        raw_response = self._client.create_chat_completion(
            model=self._model,
            temperature=self._temperature,
            system_prompt=self._system_prompt,
            user_prompt=prompt,
        )
        Log.debug(f"AI raw response:\n{raw_response}")

        markers = self._parse_json(raw_response)
        Log.info(f"Fallback response parsed: {len(markers)} markers")
        return markers

    def _build_prompt(self, text: str) -> str:
        if len(text) > self._max_text_chars:
            text = text[: self._max_text_chars] + self.TRUNCATION_NOTE
        return self._prompt_template.format(report_text=text)

    @staticmethod
    def _parse_json(raw: str) -> list[dict[str, object]]:
        cleaned = raw.strip()
        if cleaned.startswith("```"):
            lines = cleaned.splitlines()
            if lines and lines[0].startswith("```"):
                lines = lines[1:]
            if lines and lines[-1].strip() == "```":
                lines = lines[:-1]
            cleaned = "\n".join(lines)

        try:
            parsed = json.loads(cleaned)
        except json.JSONDecodeError as exc:
            raise FallbackError(f"Invalid JSON response: {exc}") from exc

        if isinstance(parsed, dict):
            parsed = parsed.get("markers")
        if not isinstance(parsed, list):
            raise FallbackError("JSON response must be an array of markers")
        return [item for item in parsed if isinstance(item, dict)]
