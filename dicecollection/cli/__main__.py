import click

from ..config import DEFAULT_BULK_ROLLS, DEFAULT_LOG_LEVEL, DEFAULT_SEED, DEFAULT_STAR_UNIT, LOG_LEVELS
from ..core import DiceCollection, InvalidConfiguration, reseed
from ..log import configure_logging
from .interface import InteractiveCLI, print_report


@click.command()
@click.option('--sides', '-s', type=int, multiple=True, help='Sides of one die; repeat for each die to roll non-interactively')
@click.option('--rolls', '-r', type=click.IntRange(min=1), default=DEFAULT_BULK_ROLLS, show_default=True, help='Rolls per histogram')
@click.option('--unit', '-u', type=click.IntRange(min=1), default=DEFAULT_STAR_UNIT, show_default=True, help='Count represented by one star')
@click.option('--seed', type=int, default=DEFAULT_SEED, help='Seed the random source for a reproducible run')
@click.option('--log-level', type=click.Choice(LOG_LEVELS, case_sensitive=False),
              default=DEFAULT_LOG_LEVEL, show_default=True, envvar="DICECOLLECTION_LOG_LEVEL")
@click.option('--gui', is_flag=True, help='Open the graphical form instead of the console')
def main(sides, rolls, unit, seed, log_level, gui):
    """Dice Collection - roll a set of dice and chart the distribution of their sums."""
    configure_logging(log_level)
    if seed is not None:
        reseed(seed)

    if gui:
        from ..gui.form import launch
        launch(rolls=rolls)
        return

    if sides:
        try:
            dice_collection = DiceCollection(sides)
        except InvalidConfiguration as e:
            raise click.BadParameter(str(e), param_hint="'--sides'")
        print_report(dice_collection, rolls, unit, echo=click.echo)
    else:
        InteractiveCLI(rolls=rolls, unit=unit).run()


if __name__ == "__main__":
    main()
