from pydantic import BaseModel, Field
from typing import Literal


class LLMSettings(BaseModel):
    provider: Literal["anthropic", "openai", "google", "ollama", "auto"] = "google"
    model: str = "gemini-2.0-flash"
    api_key_env: str = "GEMINI_API_KEY"
    max_tokens: int = Field(default=8192, gt=0)
    temperature: float = Field(default=0.3, ge=0)
    base_url: str | None = None


class BatchSettings(BaseModel):
    source_dir: str = "./markdown-files"
    output_dir: str = "./translated-markdown-files"
    force: bool = False
    delay_seconds: float = Field(default=1.0, ge=0)
    extensions: list[str] = Field(default_factory=lambda: [".md", ".markdown"])


class TranslationSettings(BaseModel):
    source_language: str = "English"
    target_language: str = "Japanese"


class TranslatorConfig(BaseModel):
    llm: LLMSettings = Field(default_factory=LLMSettings)
    batch: BatchSettings = Field(default_factory=BatchSettings)
    translation: TranslationSettings = Field(default_factory=TranslationSettings)
    log_level: Literal["debug", "info", "warn", "error"] = "info"
    log_format: Literal["text", "json"] = "text"
