# catsearch/interface/cli.py

from typing import List
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt
from rich import box
from rich.text import Text

from catsearch.domain.models import SearchResult


console = Console()


def display_welcome_banner() -> None:
    console.print(Panel.fit(
        "[bold magenta]🐈 Cat Breed Search[/bold magenta]\n"
        "[dim]Fuzzy keyword matching + synonym expansion[/dim]",
        box=box.DOUBLE,
        border_style="magenta",
    ))


def display_indexing_status(num_entries: int) -> None:
    console.print(f"\n[green]✓[/green] Index built — [bold]{num_entries}[/bold] breeds ready for search.\n")


def prompt_for_query() -> str:
    return Prompt.ask("\n[bold yellow]🔎 Search breeds[/bold yellow]")


def render_title(result: SearchResult) -> Text:
    """Highlighted excerpt, or the plain description when no title was found."""
    if result.title is None:
        return Text(result.entity.description)

    text = Text(result.title.excerpt1)
    text.append(result.title.highlight_word, style="bold yellow")
    text.append(result.title.excerpt2)
    return text


def display_results(query: str, results: List[SearchResult]) -> None:
    console.print(f"\n[bold]Results for:[/bold] [italic]\"{query}\"[/italic]\n")

    if not results:
        console.print("[dim]No matching breeds.[/dim]")
        return

    top_score = results[0].total_score
    for rank, result in enumerate(results, start=1):
        score_color = _score_to_color(result.total_score, top_score)

        panel_content = Text()
        panel_content.append("🐾 Size: ", style="dim")
        panel_content.append(result.entity.size or "—")
        panel_content.append("   Coat: ", style="dim")
        panel_content.append(result.entity.coat or "—")
        panel_content.append("   Color: ", style="dim")
        panel_content.append(result.entity.color or "—")
        panel_content.append("\n🎯 Score: ")
        panel_content.append(f"{result.total_score:.4f}", style=score_color)
        panel_content.append("\n\n")
        panel_content.append_text(render_title(result))

        console.print(Panel(
            panel_content,
            title=f"[bold]#{rank} {result.entity.key}[/bold]",
            border_style=score_color,
            box=box.ROUNDED,
            padding=(1, 2),
        ))


def display_error(message: str) -> None:
    console.print(f"\n[bold red]✗ Error:[/bold red] {message}\n")


def ask_continue() -> bool:
    answer = Prompt.ask(
        "\n[dim]Search again?[/dim]",
        choices=["y", "n"],
        default="y",
    )
    return answer.lower() == "y"


def _score_to_color(score: float, top_score: float) -> str:
    # Raw scores are unbounded, so colour relative to the best hit.
    ratio = score / top_score if top_score > 0 else 0.0
    if ratio >= 0.75:
        return "green"
    elif ratio >= 0.50:
        return "yellow"
    else:
        return "red"
