"""Core types: results, exit codes, configuration."""

from .config import (
    BranchPolicy,
    Config,
    ConfigError,
    DuplicatePolicy,
    SyncPolicy,
    UrlPolicy,
    load_config,
    load_project_config,
)
from .errors import ErrorCode
from .result import Err, Ok, Result

__all__ = [
    # config
    "BranchPolicy",
    "Config",
    "ConfigError",
    "DuplicatePolicy",
    "SyncPolicy",
    "UrlPolicy",
    "load_config",
    "load_project_config",
    # errors
    "ErrorCode",
    # result
    "Err",
    "Ok",
    "Result",
]
