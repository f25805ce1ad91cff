"""Central configuration defaults for Dice Collection."""

import os

# Console and form roll settings
DEFAULT_BULK_ROLLS = int(os.getenv("DICECOLLECTION_BULK_ROLLS", "100000"))  # Trials per histogram
DEFAULT_STAR_UNIT = int(os.getenv("DICECOLLECTION_STAR_UNIT", "200"))  # Counts per star in the console chart

# Upper bounds for dice typed into the console
DEFAULT_CONSOLE_MAX_DICE = int(os.getenv("DICECOLLECTION_CONSOLE_MAX_DICE", "100"))
DEFAULT_CONSOLE_MAX_SIDES = int(os.getenv("DICECOLLECTION_CONSOLE_MAX_SIDES", "1000"))

# The form's chart only has room for a handful of bars
DEFAULT_FORM_MAX_DICE = int(os.getenv("DICECOLLECTION_FORM_MAX_DICE", "6"))
DEFAULT_FORM_MAX_SIDES = int(os.getenv("DICECOLLECTION_FORM_MAX_SIDES", "9"))

# Random source - unset means fresh OS entropy on every start
_seed_env = os.getenv("DICECOLLECTION_SEED")
DEFAULT_SEED = int(_seed_env) if _seed_env else None

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_log_level_env = os.getenv("DICECOLLECTION_LOG_LEVEL", "WARNING").upper()
DEFAULT_LOG_LEVEL = _log_level_env if _log_level_env in LOG_LEVELS else "WARNING"
