"""Central configuration manager.

This module loads the static path-assembly constants together with the values
that can be overridden from the environment (or a ``.env`` file), such as the
maximum path length and the encoding used to decode byte components. Access is
centralized through dictionary-style ``get`` calls.
"""

import codecs
import os
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv


class ParameterLoader:
    """Centralized configuration manager for path assembly parameters."""

    _DEFAULT_MAX_PATH = 260
    _DEFAULT_PATH_ENCODING = "utf-8"
    _DEFAULT_LOG_LEVEL = "INFO"
    _LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

    _ENV_FILEPATH = ".env"

    def __init__(self, env_filepath: Optional[str] = None):
        self.env_filepath = Path(env_filepath or ParameterLoader._ENV_FILEPATH)
        load_dotenv(dotenv_path=self.env_filepath)
        self._parameters: Dict[str, Any] = self._initialize_parameters()

    @staticmethod
    def _parse_max_path(value: Optional[str]) -> int:
        if value is None or len(value.strip()) == 0:
            return ParameterLoader._DEFAULT_MAX_PATH
        try:
            max_path = int(value.strip())
        except ValueError as e:
            raise ValueError(f"MAX_PATH must be an integer: {value!r}") from e
        if max_path < 1:
            raise ValueError(f"MAX_PATH must be a positive integer: {max_path}")
        return max_path

    @staticmethod
    def _parse_encoding(value: Optional[str]) -> str:
        if value is None or len(value.strip()) == 0:
            return ParameterLoader._DEFAULT_PATH_ENCODING
        try:
            return codecs.lookup(value.strip()).name
        except LookupError as e:
            raise ValueError(f"PATH_ENCODING is not a known codec: {value!r}") from e

    @staticmethod
    def _parse_log_level(value: Optional[str]) -> str:
        if value is None or len(value.strip()) == 0:
            return ParameterLoader._DEFAULT_LOG_LEVEL
        level = value.strip().upper()
        if level not in ParameterLoader._LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL is invalid: {value!r}")
        return level

    def _initialize_parameters(self) -> Dict[str, Any]:
        """Initializes the parameters dictionary by merging constant and environment values."""
        constant_params = {
            "accepted_separators": ("/", "\\"),
            "canonical_separator": "\\",
            "drive_delimiter": ":",
            "extension_delimiter": ".",
            "terminator": "\0",
        }
        env_params = {
            "log_level": self._parse_log_level(os.getenv("LOG_LEVEL")),
            "max_path": self._parse_max_path(os.getenv("MAX_PATH")),
            "path_encoding": self._parse_encoding(os.getenv("PATH_ENCODING")),
        }
        return {**constant_params, **env_params}

    def get_all(self) -> Any:
        """Return all parameters."""
        return self._parameters

    def get(self, key: str, default: Any = None) -> Any:
        """Return parameter value if exists, else default."""
        try:
            return self._parameters[key]
        except KeyError:
            return default
