import logging
import math
from typing import List, Optional, Sequence

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import Prompt

from ..config import (
    DEFAULT_BULK_ROLLS, DEFAULT_CONSOLE_MAX_DICE, DEFAULT_CONSOLE_MAX_SIDES, DEFAULT_STAR_UNIT,
)
from ..core import DiceCollection
from ..simulation import expected_counts, format_star_chart, histogram_rows, summarize

logger = logging.getLogger(__name__)

console = Console()

ONCE_OPTIONS = ["1", "once", "one time", "1 time"]
QUIT_OPTIONS = ["quit", "q", "exit", "e"]
NEW_OPTIONS = ["3", "new", "new dice"]


def parse_number(text: str) -> int:
    """Read a whole number the forgiving way: decimals truncate, negatives flip sign."""
    value = float(text.strip())
    if not math.isfinite(value):
        raise ValueError(f"Not a finite number: {text!r}")
    return int(abs(value))


def has_option(selection: str, options: Sequence[str]) -> bool:
    """Case-insensitive match of a menu selection against its aliases."""
    selection = selection.strip().lower()
    return any(selection == option.lower() for option in options)


def bulk_options(rolls: int) -> List[str]:
    """Aliases that select the bulk roll, e.g. '2', '100000', '100,000 times'."""
    return ["2", f"{rolls}", f"{rolls:,}", f"{rolls} times", f"{rolls:,} times"]


class InteractiveCLI:
    """Interactive command-line interface for Dice Collection."""

    def __init__(
        self,
        rolls: int = DEFAULT_BULK_ROLLS,
        unit: int = DEFAULT_STAR_UNIT,
        out: Optional[Console] = None,
        max_dice: int = DEFAULT_CONSOLE_MAX_DICE,
        max_sides: int = DEFAULT_CONSOLE_MAX_SIDES,
    ):
        self.rolls = rolls
        self.unit = unit
        self.max_dice = max_dice
        self.max_sides = max_sides
        self.console = out or console
        self.dice_collection: Optional[DiceCollection] = None

    def ask_number(self, intro: str, minimum: int, maximum: int, too_small: str, too_large: str) -> int:
        """Keep asking until the user enters a number between ``minimum`` and ``maximum``."""
        while True:
            answer = Prompt.ask(intro, console=self.console)
            try:
                value = parse_number(answer)
            except ValueError:
                logger.debug("Rejected non-numeric input %r", answer)
                self.console.print("[red]Only numbers are allowed. Try again.[/red]")
                continue
            if value < minimum:
                logger.debug("Rejected %d, minimum is %d", value, minimum)
                self.console.print(f"[red]{too_small}[/red]")
                continue
            if value > maximum:
                logger.debug("Rejected %d, maximum is %d", value, maximum)
                self.console.print(f"[red]{too_large}[/red]")
                continue
            return value

    def configure_dice(self) -> DiceCollection:
        """Ask for the dice and build a fresh collection from the answers."""
        number_of_dice = self.ask_number(
            "[cyan]How many dice?[/cyan]", 1, self.max_dice,
            "Need at least 1 die. Try again.", f"At most {self.max_dice} dice. Try again."
        )
        sides = [
            self.ask_number(
                f"[cyan]Enter the sides for Die {i + 1}[/cyan]", 2, self.max_sides,
                "Need at least 2 sides. Try again.", f"At most {self.max_sides} sides. Try again."
            )
            for i in range(number_of_dice)
        ]
        self.dice_collection = DiceCollection(sides)
        self.display_collection()
        return self.dice_collection

    def display_collection(self):
        """Show every die and the sum statistics."""
        self.console.print(Panel(self.dice_collection.describe(), title="Dice Collection", border_style="blue"))

    def roll_once(self):
        """Roll all dice once and show the faces."""
        self.dice_collection.roll_all()
        self.console.print(
            f"\n[green]Rolled all dice once.[/green]\n"
            f"The sum of all up sides is: [bold]{self.dice_collection.sum_up_sides()}[/bold]"
        )
        for i, die in enumerate(self.dice_collection.dice, start=1):
            self.console.print(f"Current up side of Die {i}: {die.up_side}")

    def roll_bulk(self):
        """Roll all dice many times and show the histogram of sums."""
        with self.console.status(f"[bold green]Rolling all dice {self.rolls:,} times..."):
            tracker = self.dice_collection.histogram(self.rolls)
        self.display_histogram(tracker)

    def display_histogram(self, tracker):
        """Display a histogram as a table of stars with the expected count for each sum."""
        expected = expected_counts(self.dice_collection.face_counts, self.rolls)

        self.console.print(f"\n[bold]Histogram of {self.rolls:,} times rolling all dice:[/bold]")
        table = Table()
        table.add_column("Sum", style="cyan", justify="right")
        table.add_column("Count", style="magenta", justify="right")
        table.add_column("Expected", style="dim", justify="right")
        table.add_column("Bar", style="yellow")

        for row in histogram_rows(tracker, self.unit):
            table.add_row(str(row.sum_value), str(row.count), f"{expected[row.sum_value - 1]:.0f}", row.bar)

        self.console.print(table)
        self.console.print(f"Each star represents {self.unit}.")
        self.console.print(f"\n[dim]{summarize(tracker)}[/dim]")

    def run(self):
        """Main CLI loop."""
        self.console.print(Panel.fit(
            "[bold cyan]Welcome to Dice Collection![/bold cyan]\n"
            "* Entries of decimal numbers get the decimal places truncated.\n"
            "* Entries of negative numbers get converted into positive numbers.\n"
            "* A die has at least 2 sides.",
            border_style="blue"
        ))

        if self.dice_collection is None:
            self.configure_dice()

        bulk = bulk_options(self.rolls)
        while True:
            self.console.print(f"\n[bold]Roll Options:[/bold]  1. Once  2. {self.rolls:,} times  3. New dice")
            selection = Prompt.ask("Enter an option number or type in the option to select", console=self.console)

            if has_option(selection, ONCE_OPTIONS):
                self.roll_once()
            elif has_option(selection, bulk):
                self.roll_bulk()
            elif has_option(selection, NEW_OPTIONS):
                self.configure_dice()
                continue
            else:
                self.console.print("[red]Invalid selection. Try again.[/red]")
                continue

            quit_selection = Prompt.ask(
                '\nEnter "\\[q]uit" or "\\[e]xit" to close the program or anything else to continue rolling dice',
                console=self.console,
                default="",
                show_default=False,
            )
            if has_option(quit_selection, QUIT_OPTIONS):
                self.console.print("[yellow]Bye![/yellow]")
                break


def print_report(dice_collection: DiceCollection, rolls: int, unit: int, echo=print):
    """Print the collection report and a plain star chart, for non-interactive runs."""
    echo(dice_collection.describe())
    tracker = dice_collection.histogram(rolls)
    echo(f"\nHistogram of {rolls} times rolling all dice:")
    for line in format_star_chart(tracker, unit):
        echo(line)
    echo(f"\nEach star represents {unit}.")
    return tracker
