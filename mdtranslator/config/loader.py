"""YAML config loading with env var expansion."""

import os
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import TranslatorConfig

CONFIG_FILENAME = "mdtranslator.yaml"

_ENV_REF = re.compile(r"\$\{(\w+)\}")


def _candidate_paths(cli_path: str | None) -> list[Path]:
    paths = [Path(cli_path)] if cli_path else []
    paths.append(Path(".") / CONFIG_FILENAME)
    paths.append(Path.home() / ".mdtranslator" / "config.yaml")
    return paths


def _read_mapping(path: Path) -> dict | None:
    """Parse ``path`` as YAML. Returns None for an empty file."""
    try:
        with open(path, encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e
    if raw is not None and not isinstance(raw, dict):
        raise ValueError(f"Invalid config in {path}: expected a mapping")
    return raw


def load_config(cli_path: str | None = None) -> TranslatorConfig:
    """Load config with resolution order: CLI > project-local > user-global > defaults.

    An empty file is passed over in favour of the next candidate. Malformed
    YAML or invalid values raise ValueError naming the file.
    """
    for path in _candidate_paths(cli_path):
        if not path.is_file():
            continue
        raw = _read_mapping(path)
        if raw is None:
            continue
        try:
            return TranslatorConfig(**_expand_env_vars(raw))
        except ValidationError as e:
            raise ValueError(f"Invalid config in {path}: {e}") from e

    return TranslatorConfig()


def _expand_env_vars(obj: object) -> object:
    """Recursively expand ${VAR} references in strings. Unset variables expand to ""."""
    if isinstance(obj, str):
        return _ENV_REF.sub(lambda m: os.environ.get(m.group(1), ""), obj)
    if isinstance(obj, dict):
        return {k: _expand_env_vars(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_expand_env_vars(v) for v in obj]
    return obj


# Default YAML template for `mdtranslator config init`
DEFAULT_CONFIG_TEMPLATE = """\
# mdtranslator.yaml

# LLM Provider
llm:
  provider: "google"           # anthropic | openai | google | ollama | auto
  model: "gemini-2.0-flash"    # also names the output subdirectory
  api_key_env: "GEMINI_API_KEY"
  max_tokens: 8192
  temperature: 0.3
  # base_url: "http://localhost:11434"   # ollama only

# Batch
batch:
  source_dir: "./markdown-files"
  output_dir: "./translated-markdown-files"
  force: false                 # re-translate files that are already up to date
  delay_seconds: 1.0           # pause between documents to respect rate limits
  extensions: [".md", ".markdown"]

# Translation
translation:
  source_language: "English"
  target_language: "Japanese"

# Logging
log_level: "info"              # debug | info | warn | error
log_format: "text"             # text | json
"""
