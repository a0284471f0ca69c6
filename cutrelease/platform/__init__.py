"""Platform helpers: subprocess execution and filesystem writes."""

from .files import atomic_write_text, write_temp_text
from .process import ProcessError, non_interactive_env, run

__all__ = [
    "ProcessError",
    "atomic_write_text",
    "non_interactive_env",
    "run",
    "write_temp_text",
]
