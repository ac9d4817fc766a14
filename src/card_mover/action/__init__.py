"""GitHub Actions entry point for the Card Mover."""

from card_mover.action.context import load_event_payload
from card_mover.action.inputs import ActionInputs, ConfigError, get_input, input_env_name

__all__ = [
    "ActionInputs",
    "ConfigError",
    "get_input",
    "input_env_name",
    "load_event_payload",
]
