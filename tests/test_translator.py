"""Tests for MarkdownTranslator: prompt, fence handling, fail-soft contract."""

from unittest.mock import AsyncMock

import httpx
import pytest

from mdtranslator.config.models import TranslationSettings
from mdtranslator.llm.models import LLMError, LLMResponse, TokenUsage
from mdtranslator.translator import MarkdownTranslator, TranslationResult
from mdtranslator.translator.client import _strip_wrapping_fence
from mdtranslator.translator.prompts import build_system_prompt


def _response(content: str) -> LLMResponse:
    return LLMResponse(
        content=content,
        usage=TokenUsage(input_tokens=5, output_tokens=7),
        model="test-model",
    )


# ---------------------------------------------------------------------------
# Prompt
# ---------------------------------------------------------------------------


class TestPrompt:
    def test_mentions_languages(self):
        prompt = build_system_prompt("English", "Japanese")
        assert "from English into Japanese" in prompt

    def test_forbids_wrapping(self):
        prompt = build_system_prompt("English", "Japanese")
        assert "Do not add explanations" in prompt
        assert "code fences" in prompt


# ---------------------------------------------------------------------------
# translate()
# ---------------------------------------------------------------------------


class TestTranslate:
    @pytest.mark.asyncio
    async def test_returns_content_on_success(self, mock_llm_provider):
        translator = MarkdownTranslator(mock_llm_provider)
        result = await translator.translate("# Hello")

        assert result.ok
        assert result.content == "[ja] # Hello"
        assert result.usage.output_tokens == 250
        assert result.model == "test-model"
        assert result.error is None

    @pytest.mark.asyncio
    async def test_sends_one_request_with_document_as_user_message(self, mock_llm_provider):
        translator = MarkdownTranslator(
            mock_llm_provider, TranslationSettings(target_language="French")
        )
        await translator.translate("# Hello")

        mock_llm_provider.generate.assert_awaited_once()
        system, user = mock_llm_provider.generate.await_args.args
        assert user == "# Hello"
        assert "into French" in system

    @pytest.mark.asyncio
    async def test_llm_error_becomes_empty_result(self, mock_llm_provider):
        cause = RuntimeError("429 quota")
        mock_llm_provider.generate = AsyncMock(
            side_effect=LLMError("gemini", "generate", cause, retryable=True)
        )
        translator = MarkdownTranslator(mock_llm_provider)

        result = await translator.translate("# Hello")

        assert not result.ok
        assert result.content == ""
        assert "429 quota" in result.error

    @pytest.mark.asyncio
    async def test_transport_error_becomes_empty_result(self, mock_llm_provider):
        mock_llm_provider.generate = AsyncMock(side_effect=httpx.ConnectError("refused"))
        result = await MarkdownTranslator(mock_llm_provider).translate("x")
        assert not result.ok
        assert result.error == "refused"

    @pytest.mark.asyncio
    async def test_malformed_response_becomes_empty_result(self, mock_llm_provider):
        mock_llm_provider.generate = AsyncMock(
            side_effect=ValueError("No text content in Gemini response")
        )
        result = await MarkdownTranslator(mock_llm_provider).translate("x")
        assert not result.ok

    @pytest.mark.asyncio
    async def test_whitespace_response_is_a_failure(self, mock_llm_provider):
        mock_llm_provider.generate = AsyncMock(return_value=_response("  \n"))
        result = await MarkdownTranslator(mock_llm_provider).translate("x")
        assert not result.ok
        assert result.error == "empty response"

    @pytest.mark.asyncio
    async def test_wrapping_fence_removed(self, mock_llm_provider):
        mock_llm_provider.generate = AsyncMock(
            return_value=_response("```markdown\n# こんにちは\n\n本文\n```")
        )
        result = await MarkdownTranslator(mock_llm_provider).translate("# Hello\n\nBody\n")
        assert result.content == "# こんにちは\n\n本文\n"


# ---------------------------------------------------------------------------
# _strip_wrapping_fence
# ---------------------------------------------------------------------------


class TestStripWrappingFence:
    def test_plain_text_untouched(self):
        assert _strip_wrapping_fence("# Title\n", "# Title\n") == "# Title\n"

    def test_inner_code_block_untouched(self):
        text = "# Title\n\n```python\nprint(1)\n```\n"
        assert _strip_wrapping_fence(text, "# Title") == text

    def test_source_starting_with_fence_untouched(self):
        text = "```bash\nls\n```"
        assert _strip_wrapping_fence(text, "```bash\nls\n```") == text

    def test_bare_fence_removed(self):
        assert _strip_wrapping_fence("```\nhello\n```", "hello") == "hello\n"


class TestTranslationResult:
    def test_failed_factory(self):
        result = TranslationResult.failed("boom")
        assert result.content == ""
        assert result.error == "boom"
        assert result.ok is False
