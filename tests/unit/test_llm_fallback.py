"""Tests for the LLM marker fallback."""

import json
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from labextract.fallback.exceptions import FallbackError, FallbackNetworkError
from labextract.fallback.llm_fallback import LlmMarkerFallback


def _make_fallback(client: MagicMock | None = None, **kwargs: object) -> LlmMarkerFallback:
    if client is None:
        client = MagicMock()
    return LlmMarkerFallback(client=client, model="test-model", **kwargs)  # type: ignore[arg-type]


def _markers_json() -> str:
    return json.dumps([
        {"code": "GLU", "name": "Glucose", "value": 90, "unit": "mg/dL"},
    ])


class TestExtractMarkers:
    def test_returns_marker_dicts(self) -> None:
        client = MagicMock()
        client.create_chat_completion.return_value = _markers_json()
        result = _make_fallback(client).extract_markers("Glucose ninety")
        assert result == [{"code": "GLU", "name": "Glucose", "value": 90, "unit": "mg/dL"}]

    def test_passes_text_to_prompt(self) -> None:
        client = MagicMock()
        client.create_chat_completion.return_value = "[]"
        _make_fallback(client).extract_markers("clinical input")
        user_prompt = client.create_chat_completion.call_args.kwargs["user_prompt"]
        assert "clinical input" in user_prompt

    def test_passes_system_prompt(self) -> None:
        client = MagicMock()
        client.create_chat_completion.return_value = "[]"
        _make_fallback(client).extract_markers("text")
        system_prompt = client.create_chat_completion.call_args.kwargs["system_prompt"]
        assert "lab report" in system_prompt

    def test_calls_ai_with_model(self) -> None:
        client = MagicMock()
        client.create_chat_completion.return_value = "[]"
        _make_fallback(client).extract_markers("text")
        assert client.create_chat_completion.call_args.kwargs["model"] == "test-model"

    def test_clamps_temperature(self) -> None:
        client = MagicMock()
        client.create_chat_completion.return_value = "[]"
        _make_fallback(client, temperature=0.9).extract_markers("text")
        assert client.create_chat_completion.call_args.kwargs["temperature"] == 0.2

    def test_truncates_long_text(self) -> None:
        client = MagicMock()
        client.create_chat_completion.return_value = "[]"
        _make_fallback(client, max_text_chars=10).extract_markers("A" * 50)
        user_prompt = client.create_chat_completion.call_args.kwargs["user_prompt"]
        assert "A" * 10 + LlmMarkerFallback.TRUNCATION_NOTE in user_prompt
        assert "A" * 11 not in user_prompt

    def test_custom_prompt_template(self, tmp_path: Path) -> None:
        template = tmp_path / "prompt.txt"
        template.write_text("Report: {report_text}")
        client = MagicMock()
        client.create_chat_completion.return_value = "[]"
        _make_fallback(client, prompt_template_path=template).extract_markers("x")
        assert client.create_chat_completion.call_args.kwargs["user_prompt"] == "Report: x"


class TestJsonParsing:
    def test_strips_markdown_code_fences(self) -> None:
        client = MagicMock()
        client.create_chat_completion.return_value = "```json\n" + _markers_json() + "\n```"
        assert len(_make_fallback(client).extract_markers("text")) == 1

    def test_accepts_markers_object(self) -> None:
        client = MagicMock()
        client.create_chat_completion.return_value = json.dumps(
            {"markers": json.loads(_markers_json())}
        )
        assert len(_make_fallback(client).extract_markers("text")) == 1

    def test_skips_non_object_items(self) -> None:
        client = MagicMock()
        client.create_chat_completion.return_value = '[1, "x", {"code": "A"}]'
        assert _make_fallback(client).extract_markers("text") == [{"code": "A"}]

    def test_invalid_json_raises_error(self) -> None:
        client = MagicMock()
        client.create_chat_completion.return_value = "not valid json"
        with pytest.raises(FallbackError, match="Invalid JSON"):
            _make_fallback(client).extract_markers("text")

    def test_non_list_raises_error(self) -> None:
        client = MagicMock()
        client.create_chat_completion.return_value = '{"result": 1}'
        with pytest.raises(FallbackError, match="array of markers"):
            _make_fallback(client).extract_markers("text")

    def test_network_error_propagates(self) -> None:
        client = MagicMock()
        client.create_chat_completion.side_effect = FallbackNetworkError("network")
        with pytest.raises(FallbackNetworkError, match="network"):
            _make_fallback(client).extract_markers("text")


class TestDebugLogging:
    def test_logs_prompt_in_debug(self) -> None:
        client = MagicMock()
        client.create_chat_completion.return_value = "[]"
        fallback = _make_fallback(client)
        with patch("labextract.fallback.llm_fallback.Log") as mock_log:
            fallback.extract_markers("test text")
            assert "prompt" in mock_log.debug.call_args_list[0].args[0].lower()

    def test_logs_marker_count_in_info(self) -> None:
        client = MagicMock()
        client.create_chat_completion.return_value = "[]"
        fallback = _make_fallback(client)
        with patch("labextract.fallback.llm_fallback.Log") as mock_log:
            fallback.extract_markers("test text")
            assert any("0 markers" in c.args[0] for c in mock_log.info.call_args_list)
