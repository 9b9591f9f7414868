from collections import namedtuple
from typing import Any, Dict, Mapping, Optional
import logging
import os

Option = namedtuple("Option", ["description", "default"])

EVALUATOR_OPTIONS: Dict[str, Option] = {
    "ace-low":   Option("Whether A-2-3-4-5 counts as a five-high straight",
                        False),
    "log-level": Option("How much the evaluator logs (DEBUG, INFO, ...)",
                        "WARNING"),
}

# The environment variable that overrides each option
ENV_VARS: Dict[str, str] = {
    "ace-low":   "BEST_HAND_ACE_LOW",
    "log-level": "BEST_HAND_LOG_LEVEL",
}

TRUE_VALUES = ("1", "true", "yes", "on")
FALSE_VALUES = ("0", "false", "no", "off", "")

def _parse_bool(var: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in TRUE_VALUES:
        return True
    if lowered in FALSE_VALUES:
        return False
    raise ValueError(f"{var} must be one of {', '.join(TRUE_VALUES)} or "
                     f"{', '.join(FALSE_VALUES[:-1])}, and '{value}' isn't.")

def _parse_level(var: str, value: str) -> str:
    level = value.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"{var} must be a logging level, and '{value}' "
                         "isn't one.")
    return level

PARSERS = {
    "ace-low":   _parse_bool,
    "log-level": _parse_level,
}

# Returns the value of every option, using the defaults unless they're
# overridden in the environment. Raises ValueError for a value that doesn't
# make sense for its option
def load_options(environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    if environ is None:
        environ = os.environ
    options = {key: value.default for key, value in EVALUATOR_OPTIONS.items()}
    for key, var in ENV_VARS.items():
        value = environ.get(var)
        if value is not None:
            options[key] = PARSERS[key](var, value)
    return options
