"""CLI interface for scene-animator."""

import asyncio
import logging
import sys
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.progress import BarColumn, Progress, TextColumn
from rich.table import Table

from .authoring import (
    AnalysisClient,
    AnalysisError,
    ContentAnalysis,
    build_scene_from_analysis,
    build_scene_from_design,
    build_scene_from_text,
)
from .constants import (
    DEFAULT_ALIGNMENT,
    DEFAULT_COLOR,
    DEFAULT_FONT_SIZE,
    DEFAULT_REFRESH_RATE,
    DEFAULT_SPEED,
    SPEED_OPTIONS,
)
from .player import ScenePlayer
from .scene import (
    DEFAULT_TEMPLATE_NAME,
    AsyncioFrameScheduler,
    ManualFrameScheduler,
    Scene,
    SceneModel,
    StyleOptions,
    supported_template_names,
)

# Load environment variables from .env file
load_dotenv()

console = Console()
err_console = Console(stderr=True)
TEMPLATES_TEXT = ", ".join(supported_template_names())
SPEEDS_TEXT = ", ".join(f"{speed:g}" for speed in SPEED_OPTIONS)

app = typer.Typer(add_completion=False, no_args_is_help=True)


class CLIError(Exception):
    """Base exception for CLI errors with user-friendly messages."""
    pass


InputArgument = typer.Argument(None, help="Text file with the scene content")
TextOption = typer.Option(None, "--text", "-t", help="Scene content given inline")
TemplateOption = typer.Option(
    DEFAULT_TEMPLATE_NAME, "--template", "-T", help=f"Scene template ({TEMPLATES_TEXT})"
)
AnalyzeOption = typer.Option(
    False, "--analyze", "-a", help="Let the language model structure the text first"
)
DesignOption = typer.Option(
    False, "--design", "-d", help="Let the language model lay out and time every element"
)
FontSizeOption = typer.Option(DEFAULT_FONT_SIZE, "--font-size", help="Headline font size")
ColorOption = typer.Option(DEFAULT_COLOR, "--color", help="Headline color")
AlignOption = typer.Option(DEFAULT_ALIGNMENT, "--align", help="Headline alignment")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """
    Render scripted 2-D scenes from text and play them back.

    Examples:
      # Render the frame 1.2 seconds into a presentation
      scene-animator snapshot notes.txt --at 1200 -o frame.png

      # Let the language model pick a structure, then play it
      scene-animator play notes.txt --analyze
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


@app.command()
def snapshot(
    input_file: str = InputArgument,
    text: str = TextOption,
    template: str = TemplateOption,
    analyze: bool = AnalyzeOption,
    design: bool = DesignOption,
    at: float = typer.Option(None, "--at", help="Elapsed time in milliseconds"),
    percent: float = typer.Option(None, "--percent", help="Position as a percentage of the scene"),
    out: str = typer.Option("scene.png", "--output", "-o", help="PNG file to write"),
    font_size: float = FontSizeOption,
    color: str = ColorOption,
    align: str = AlignOption,
) -> None:
    """Render a single frame of a scene to PNG."""
    try:
        if at is not None and percent is not None:
            raise CLIError("Cannot specify both --at and --percent. Choose one.")

        scene = _build_scene(input_file, text, template, analyze, design, font_size, color, align)
        player = ScenePlayer(ManualFrameScheduler(), model=SceneModel([scene]))
        if percent is not None:
            position = player.seek_percent(percent)
        else:
            position = player.seek(at if at is not None else scene.total_duration_ms)

        _write_bytes(out, player.snapshot())
        console.print(f"[green]✓[/green] Frame at {position:.0f}ms saved to {out}")

    except CLIError as e:
        err_console.print(f"[bold red]Error:[/bold red] {e}")
        sys.exit(1)


@app.command()
def markers(
    input_file: str = InputArgument,
    text: str = TextOption,
    template: str = TemplateOption,
    analyze: bool = AnalyzeOption,
    design: bool = DesignOption,
) -> None:
    """List when each element of a scene starts revealing."""
    try:
        scene = _build_scene(
            input_file,
            text,
            template,
            analyze,
            design,
            DEFAULT_FONT_SIZE,
            DEFAULT_COLOR,
            DEFAULT_ALIGNMENT,
        )
        _print_scene(scene)

    except CLIError as e:
        err_console.print(f"[bold red]Error:[/bold red] {e}")
        sys.exit(1)


@app.command()
def play(
    input_file: str = InputArgument,
    text: str = TextOption,
    template: str = TemplateOption,
    analyze: bool = AnalyzeOption,
    design: bool = DesignOption,
    speed: float = typer.Option(DEFAULT_SPEED, "--speed", help=f"Play speed ({SPEEDS_TEXT})"),
    refresh_rate: int = typer.Option(
        DEFAULT_REFRESH_RATE, "--refresh-rate", help="Frames per second"
    ),
    out: str = typer.Option(None, "--output", "-o", help="Save the final frame as PNG"),
    font_size: float = FontSizeOption,
    color: str = ColorOption,
    align: str = AlignOption,
) -> None:
    """Play a scene in real time, showing progress until it ends."""
    try:
        if refresh_rate <= 0:
            raise CLIError("--refresh-rate must be positive")
        scene = _build_scene(input_file, text, template, analyze, design, font_size, color, align)
        player = asyncio.run(_play_to_end(scene, speed, refresh_rate))

        if out:
            _write_bytes(out, player.snapshot())
            console.print(f"[green]✓[/green] Final frame saved to {out}")

    except CLIError as e:
        err_console.print(f"[bold red]Error:[/bold red] {e}")
        sys.exit(1)


@app.command()
def analyze(
    input_file: str = InputArgument,
    text: str = TextOption,
    font_size: float = FontSizeOption,
    color: str = ColorOption,
    align: str = AlignOption,
) -> None:
    """Ask the language model to structure text and show the resulting scene."""
    try:
        content = _load_text(input_file, text)
        analysis = _analyze(content)
        try:
            style = StyleOptions(font_size=font_size, color=color, alignment=align)
            scene = build_scene_from_analysis(analysis, style)
        except ValueError as e:
            raise CLIError(str(e))

        _print_analysis(analysis)
        _print_scene(scene)

    except CLIError as e:
        err_console.print(f"[bold red]Error:[/bold red] {e}")
        sys.exit(1)


@app.command()
def check() -> None:
    """Check connectivity to the language-model API."""
    client = AnalysisClient()
    try:
        ok, message = client.check_connection()
    finally:
        client.close()
    if ok:
        console.print(f"[green]✓[/green] {message}")
        return
    err_console.print(f"[bold red]Error:[/bold red] {message}")
    sys.exit(1)


async def _play_to_end(scene: Scene, speed: float, refresh_rate: int) -> ScenePlayer:
    finished = asyncio.Event()
    scheduler = AsyncioFrameScheduler(asyncio.get_running_loop(), refresh_rate=refresh_rate)
    player = ScenePlayer(scheduler, model=SceneModel([scene]))
    try:
        player.set_speed(speed)
    except ValueError as e:
        raise CLIError(str(e))

    with Progress(
        TextColumn("[bold blue]{task.description}"),
        BarColumn(),
        TextColumn("{task.completed:>6.0f} / {task.total:.0f} ms"),
        console=console,
    ) as progress:
        task = progress.add_task(scene.name, total=scene.total_duration_ms)

        def on_frame(elapsed_ms: float) -> None:
            progress.update(task, completed=elapsed_ms)
            if not player.is_playing:
                finished.set()

        player.driver.on_frame = on_frame
        player.play()
        await finished.wait()

    player.close()
    return player


def _build_scene(
    input_file: str | None,
    text: str | None,
    template: str,
    analyze: bool,
    design: bool,
    font_size: float,
    color: str,
    align: str,
) -> Scene:
    """Build the scene from editor text, a language-model analysis or a design."""
    content = _load_text(input_file, text)
    if analyze and design:
        raise CLIError("Cannot specify both --analyze and --design. Choose one.")
    try:
        style = StyleOptions(font_size=font_size, color=color, alignment=align)
        if design:
            analysis = _analyze(content)
            return build_scene_from_design(_design(analysis), name=analysis.title)
        if analyze:
            return build_scene_from_analysis(_analyze(content), style)
        return build_scene_from_text(content, template, style)
    except ValueError as e:
        # SceneValidationError and unknown template names
        raise CLIError(str(e))


def _analyze(content: str) -> ContentAnalysis:
    console.print("[bold blue]Analyzing text...[/bold blue]")
    client = AnalysisClient()
    try:
        analysis = client.analyze(content)
    except AnalysisError as e:
        raise CLIError(f"Analysis failed: {e}")
    finally:
        client.close()
    console.print(
        f"[green]✓[/green] '{analysis.title}' as {analysis.suggested_structure}"
    )
    return analysis


def _design(analysis: ContentAnalysis) -> dict:
    console.print("[bold blue]Designing scene...[/bold blue]")
    client = AnalysisClient()
    try:
        return client.design(analysis)
    except AnalysisError as e:
        raise CLIError(f"Design failed: {e}")
    finally:
        client.close()


def _load_text(input_file: str | None, text: str | None) -> str:
    """Load scene content from the inline option or a text file."""
    if text and input_file:
        raise CLIError("Cannot specify both an input file and --text. Choose one.")
    if text:
        return text
    if not input_file:
        raise CLIError("Provide an input file or --text")
    try:
        return Path(input_file).read_text(encoding="utf-8")
    except FileNotFoundError:
        raise CLIError(f"File '{input_file}' not found")
    except UnicodeDecodeError as e:
        raise CLIError(f"File '{input_file}' is not valid UTF-8: {e}")


def _write_bytes(file_path: str, data: bytes) -> None:
    try:
        Path(file_path).write_bytes(data)
    except OSError as e:
        raise CLIError(f"Failed to save file '{file_path}': {e}")


def _print_analysis(analysis: ContentAnalysis) -> None:
    console.print(f"[bold]{escape(analysis.title)}[/bold]")
    for idea in analysis.main_ideas:
        console.print(f"  • {escape(idea)}")
    if analysis.key_concepts:
        console.print(f"Concepts: {escape(', '.join(analysis.key_concepts))}")
    if analysis.reasoning:
        console.print(f"[dim]{escape(analysis.reasoning)}[/dim]")


def _print_scene(scene: Scene) -> None:
    table = Table(title=f"{scene.name} ({scene.template}, {scene.total_duration_ms:.0f} ms)")
    table.add_column("Time (ms)", justify="right")
    table.add_column("Color")
    table.add_column("Label")
    for marker in scene.markers():
        table.add_row(
            f"{marker.time_ms:.0f}",
            f"[{marker.color}]{marker.color}[/]",
            escape(marker.label),
        )
    console.print(table)


if __name__ == "__main__":
    app()
