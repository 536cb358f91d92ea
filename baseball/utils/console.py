"""
Console Input/Output

Display and input collaborators for the game states. The states hand these
objects plain data; all formatting and coloring happens here.
"""

from typing import List, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..config.game_settings import DifficultyMode
from ..models.game import GameRecord, GuessResult
from ..models.user import RankingEntry, User

MAIN_MENU_OPTIONS = [
    (1, "Start game"),
    (2, "Game history"),
    (3, "Ranking"),
    (4, "Logout"),
]


class ConsoleInput:
    """Reads one line of text per request from the terminal."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def read_line(self, prompt: str = "") -> str:
        return self.console.input(prompt)


class GameConsole:
    """Renders menus, guess outcomes, history and ranking with rich."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def show_welcome(self, user: User, created: bool) -> None:
        greeting = "Welcome" if created else "Welcome back"
        self.console.print(Panel(
            f"[bold]{greeting}, {escape(user.username)}![/]\n"
            "[italic]Guess the secret number of distinct digits.[/]",
            title="NUMBER BASEBALL",
            border_style="cyan"
        ))

    def show_main_menu(self) -> None:
        lines = "\n".join(f"[bold cyan]{option}[/]. {label}" for option, label in MAIN_MENU_OPTIONS)
        self.console.print(Panel(lines, title="Main Menu", border_style="blue"))

    def show_difficulty_menu(self) -> None:
        lines = "\n".join(
            f"[bold cyan]{mode.option}[/]. {mode.label} ({mode.length} digits)"
            for mode in DifficultyMode
        )
        self.console.print(Panel(lines, title="Select Difficulty", border_style="blue"))

    def show_error(self, message: str) -> None:
        self.console.print(f"[bold red]! {message}[/]")

    def show_game_start(self, record: GameRecord) -> None:
        self.console.print(
            f"[green]Game #{record.game_number} ({record.difficulty.label}): "
            f"a {record.difficulty.length}-digit secret has been chosen.[/]"
        )

    def show_score(self, result: GuessResult) -> None:
        if result.strikes == 0 and result.balls == 0:
            self.console.print(f"[yellow]{escape(result.guess)}: Nothing[/]")
            return
        self.console.print(
            f"[yellow]{escape(result.guess)}: {result.strikes} strike(s), {result.balls} ball(s)[/]"
        )

    def show_victory(self, record: GameRecord) -> None:
        self.console.print(Panel(
            f"[bold green]Correct! Solved in {record.attempt_count} attempt(s).[/]",
            border_style="green"
        ))

    def show_history(self, user: User) -> None:
        if not user.history:
            self.console.print("[dim]No games played yet.[/]")
            return

        table = Table(title=f"{escape(user.username)}'s games", box=box.SIMPLE)
        table.add_column("Game", justify="right")
        table.add_column("Difficulty")
        table.add_column("Attempts", justify="right")
        table.add_column("Finished at")
        for record in user.history:
            finished_at = record.finished_at.strftime('%Y-%m-%d %H:%M:%S') if record.finished_at else "-"
            table.add_row(
                f"#{record.game_number}",
                record.difficulty.label,
                str(record.attempt_count),
                finished_at
            )
        self.console.print(table)

        stats = user.stats()
        self.console.print(
            f"[dim]Played {stats.games_played}, finished {stats.games_finished}, "
            f"average {stats.average_attempts} attempt(s)[/]"
        )

    def show_ranking(self, entries: List[RankingEntry]) -> None:
        if not entries:
            self.console.print("[dim]No finished games to rank yet.[/]")
            return

        table = Table(title="Ranking (fewest attempts)", box=box.SIMPLE)
        table.add_column("Difficulty")
        table.add_column("Rank", justify="right")
        table.add_column("Player")
        table.add_column("Best", justify="right")
        table.add_column("Games", justify="right")
        for entry in entries:
            table.add_row(
                entry.difficulty,
                str(entry.rank),
                escape(entry.username),
                str(entry.best_attempts),
                str(entry.games_played)
            )
        self.console.print(table)

    def show_goodbye(self, user: User) -> None:
        self.console.print(f"[magenta]Goodbye, {escape(user.username)}.[/]")
