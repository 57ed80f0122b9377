"""CLI entry point for mdtranslator."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Annotated

import typer
import yaml
from dotenv import load_dotenv
from pydantic import ValidationError
from rich import print as rprint
from rich.panel import Panel
from rich.status import Status
from rich.syntax import Syntax
from rich.table import Table

from mdtranslator.config import TranslatorConfig, load_config
from mdtranslator.config.loader import CONFIG_FILENAME, DEFAULT_CONFIG_TEMPLATE
from mdtranslator.llm import create_llm_provider
from mdtranslator.llm.auto_detect import DEFAULT_MODELS
from mdtranslator.log import configure_logging, console
from mdtranslator.output import model_dir_name
from mdtranslator.pipeline import (
    BatchOrchestrator,
    BatchSummary,
    ItemOutcome,
    SourceRootError,
    check_source_root,
    plan_batch,
)
from mdtranslator.translator import MarkdownTranslator

app = typer.Typer(
    name="mdtranslator",
    help="Translate a tree of Markdown files with an LLM, mirroring it per model.",
)

config_app = typer.Typer(help="Manage mdtranslator configuration.")
app.add_typer(config_app, name="config")

# Global state
_config: TranslatorConfig | None = None

# Conventional key variables, used when --provider switches vendors
_DEFAULT_KEY_ENV = {
    "anthropic": "ANTHROPIC_API_KEY",
    "openai": "OPENAI_API_KEY",
    "google": "GEMINI_API_KEY",
}


def _get_config() -> TranslatorConfig:
    if _config is None:
        return load_config()
    return _config


@app.callback()
def main(
    config: Annotated[
        str | None, typer.Option("--config", "-c", help=f"Path to {CONFIG_FILENAME}")
    ] = None,
) -> None:
    """Global options."""
    global _config
    load_dotenv()
    try:
        _config = load_config(config)
    except ValueError as e:
        rprint(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    configure_logging(_config.log_level, _config.log_format)


def _apply_overrides(
    cfg: TranslatorConfig,
    *,
    source: str | None,
    output: str | None,
    model: str | None,
    provider: str | None,
    force: bool,
    delay: float | None,
    target_language: str | None,
) -> TranslatorConfig:
    """Layer CLI flags over the loaded config. Raises ValueError on invalid values."""
    llm_updates: dict = {}
    if model:
        llm_updates["model"] = model
    if provider and provider != cfg.llm.provider:
        llm_updates["provider"] = provider
        if provider in _DEFAULT_KEY_ENV:
            llm_updates["api_key_env"] = _DEFAULT_KEY_ENV[provider]
        if not model and provider in DEFAULT_MODELS:
            llm_updates["model"] = DEFAULT_MODELS[provider]
        elif not model and provider == "auto":
            # Empty model: the detected provider's default is used
            llm_updates["model"] = ""

    batch_updates: dict = {}
    if source:
        batch_updates["source_dir"] = source
    if output:
        batch_updates["output_dir"] = output
    if force:
        batch_updates["force"] = True
    if delay is not None:
        batch_updates["delay_seconds"] = delay

    translation_updates: dict = {}
    if target_language:
        translation_updates["target_language"] = target_language

    data = cfg.model_dump()
    data["llm"].update(llm_updates)
    data["batch"].update(batch_updates)
    data["translation"].update(translation_updates)
    try:
        return TranslatorConfig(**data)
    except ValidationError as e:
        raise ValueError(f"Invalid option: {e}") from e


def _display_plan(cfg: TranslatorConfig, model: str) -> None:
    entries = plan_batch(cfg.batch, model)
    if not entries:
        rprint("[yellow]No Markdown files found.[/yellow]")
        return
    table = Table(title=f"Dry Run ({len(entries)} files)")
    table.add_column("Source", style="cyan")
    table.add_column("Status", justify="center")
    table.add_column("Output", style="dim")
    for e in entries:
        status = "[green]current[/green]" if e.current else "[yellow]translate[/yellow]"
        table.add_row(e.source_path, status, e.output_path)
    rprint(table)
    pending = sum(1 for e in entries if not e.current)
    rprint(f"\n[bold]{pending}[/bold] file(s) would be translated.")


def _display_summary(summary: BatchSummary) -> None:
    table = Table(title="Translation Summary")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right", style="green")
    table.add_row("Total files", str(summary.total_discovered))
    table.add_row("Translated", str(summary.translated_count))
    table.add_row("Skipped", str(summary.skipped_count))
    table.add_row("Failed", str(summary.failed_count))
    table.add_row("Duration", f"{summary.duration:.2f}s")
    rprint(table)

    for item in summary.failures:
        rprint(f"  [red]error:[/red] {item.source}: {item.reason}")


@app.command()
def translate(
    source: Annotated[
        str | None, typer.Option("--source", "-s", help="Source directory containing Markdown files")
    ] = None,
    output: Annotated[
        str | None, typer.Option("--output", "-o", help="Base output directory for translations")
    ] = None,
    model: Annotated[
        str | None, typer.Option("--model", "-m", help="Model name (also the output subdirectory)")
    ] = None,
    provider: Annotated[
        str | None,
        typer.Option("--provider", "-p", help="anthropic | openai | google | ollama | auto"),
    ] = None,
    force: Annotated[
        bool, typer.Option("--force", "-f", help="Re-translate files that are already up to date")
    ] = False,
    delay: Annotated[
        float | None, typer.Option("--delay", min=0, help="Seconds to wait between files")
    ] = None,
    target_language: Annotated[
        str | None, typer.Option("--target-language", "-t", help="Language to translate into")
    ] = None,
    dry_run: Annotated[
        bool, typer.Option("--dry-run", help="List what would be translated without calling the LLM")
    ] = False,
) -> None:
    """Translate every new or changed Markdown file under the source directory."""
    try:
        cfg = _apply_overrides(
            _get_config(),
            source=source,
            output=output,
            model=model,
            provider=provider,
            force=force,
            delay=delay,
            target_language=target_language,
        )
    except ValueError as e:
        rprint(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    try:
        check_source_root(cfg.batch.source_dir)
    except SourceRootError as e:
        rprint(f"[red]Error:[/red] {e}")
        rprint("Create the directory or point --source at another one.")
        raise typer.Exit(1)

    if dry_run:
        plan_model = cfg.llm.model
        if not plan_model:
            # Auto-detection picks the model, and with it the output directory
            try:
                plan_model = create_llm_provider(cfg.llm).config.model
            except ValueError as e:
                rprint(f"[red]Error:[/red] {e}")
                raise typer.Exit(1)
        _display_plan(cfg, plan_model)
        return

    try:
        llm = create_llm_provider(cfg.llm)
    except ValueError as e:
        rprint(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    model_id = llm.config.model
    translator = MarkdownTranslator(llm, cfg.translation)

    rprint(Panel(
        f"[dim]Source:[/dim]    {cfg.batch.source_dir}\n"
        f"[dim]Model:[/dim]     {model_id} ({llm.config.provider})\n"
        f"[dim]Output:[/dim]    {Path(cfg.batch.output_dir) / model_dir_name(model_id)}\n"
        f"[dim]Language:[/dim]  {cfg.translation.source_language} -> "
        f"{cfg.translation.target_language}",
        title="mdtranslator",
        border_style="blue",
    ))
    if cfg.batch.force:
        rprint("[yellow]Force mode (--force): existing translations will be overwritten.[/yellow]")

    done = 0

    with Status("[bold]Translating...", spinner="dots", console=console) as status:

        def _progress(outcome: ItemOutcome) -> None:
            nonlocal done
            done += 1
            status.update(f"[bold]Translating...[/bold] {done} file(s) processed")

        orchestrator = BatchOrchestrator(
            cfg.batch, model_id, translator, on_outcome=_progress
        )
        try:
            summary = asyncio.run(orchestrator.run())
        except SourceRootError as e:
            rprint(f"[red]Error:[/red] {e}")
            raise typer.Exit(1)

    if summary.total_discovered == 0:
        rprint("[yellow]No Markdown files found.[/yellow]")
        return

    _display_summary(summary)
    rprint("[green]Translation complete.[/green]")


@config_app.command("show")
def config_show() -> None:
    """Show current resolved configuration."""
    cfg = _get_config()
    rprint(Syntax(yaml.dump(cfg.model_dump(), default_flow_style=False), "yaml"))


@config_app.command("init")
def config_init(
    force: bool = typer.Option(False, "--force", help="Overwrite existing config"),
) -> None:
    """Create default mdtranslator.yaml in current directory."""
    target = Path(CONFIG_FILENAME)
    if target.exists() and not force:
        rprint(f"[yellow]{CONFIG_FILENAME} already exists.[/yellow] Use --force to overwrite.")
        raise typer.Exit(1)
    target.write_text(DEFAULT_CONFIG_TEMPLATE, encoding="utf-8")
    rprint(f"[green]Created[/green] {target}")


if __name__ == "__main__":
    app()
