"""Shared test fixtures for mdtranslator."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from mdtranslator.config.models import BatchSettings, TranslatorConfig
from mdtranslator.llm.base import LLMProvider
from mdtranslator.llm.models import LLMConfig, LLMResponse, TokenUsage


@pytest.fixture
def mock_llm_provider():
    provider = MagicMock(spec=LLMProvider)
    provider.config = LLMConfig(provider="google", model="test-model")

    async def _fake_generate(system, user, max_tokens=None):
        return LLMResponse(
            content=f"[ja] {user}",
            usage=TokenUsage(input_tokens=100, output_tokens=250),
            model="test-model",
        )

    provider.generate = AsyncMock(side_effect=_fake_generate)
    return provider


@pytest.fixture
def sample_config():
    return TranslatorConfig()


@pytest.fixture
def docs_tree(tmp_path):
    """A small source tree: three Markdown files across nested dirs plus noise."""
    src = tmp_path / "docs"
    (src / "guide" / "advanced").mkdir(parents=True)
    (src / "README.md").write_text("# Readme\n\nHello.\n")
    (src / "guide" / "intro.markdown").write_text("# Intro\n\nWelcome.\n")
    (src / "guide" / "advanced" / "tips.md").write_text("# Tips\n\n- one\n- two\n")
    (src / "guide" / "notes.txt").write_text("not markdown")
    (src / "image.png").write_bytes(b"\x89PNG")
    return src


@pytest.fixture
def batch_settings(tmp_path, docs_tree):
    return BatchSettings(
        source_dir=str(docs_tree),
        output_dir=str(tmp_path / "out"),
        delay_seconds=0,
    )
