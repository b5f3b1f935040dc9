"""Configuration parser for the trie."""

from pathlib import Path
from typing import Optional, cast

from src.string_trie.children import CHILD_LOOKUP_STRATEGIES


class ConfigBoolParsingError(Exception):
    """Raised when the parsing of bool strings in
    the config file was not successful.
    """


class ConfigNotFoundError(Exception):
    """Raised when any of the required configuration settings is not
    provided.
    """


class ConfigValueError(Exception):
    """Raised when a configuration setting has an unsupported value."""


class TrieConfig:
    """A class to save trie configuration settings."""

    def __init__(
        self,
        child_lookup: str,
        log_details: bool,
        log_file: Optional[Path] = None,
    ) -> None:
        """Initialize the trie configuration.

        Args:
            child_lookup (str): Name of the child lookup strategy
            ("linear" or "keyed").
            log_details (bool): Whether every operation is logged.
            log_file (Optional[Path]): Where the log records are written,
            None for the default location.

        """
        self.child_lookup = child_lookup
        self.log_details = log_details
        self.log_file = log_file

    def __repr__(self) -> str:
        """Return a string representation of the configuration object.

        Returns:
            str: A formatted string representing the configuration settings.

        """
        return f"""
                Trie configuration settings:
                Child lookup: {self.child_lookup}
                Log details: {"YES" if self.log_details else "NO"}
                Log file: {self.log_file if self.log_file else "default"}
            """


def parse_bool(key: str, val: str) -> bool:
    """Parse given values into boolean ones (True or False).

    Args:
        key (str): The key to parse the boolean for.
        val (str): The value to be parsed to boolean.

    Raises:
        ConfigBoolParsingError: If an error occured
        while parsing the value to boolean.

    Returns:
        bool: True or False depending on the output of the parser.

    """
    if val.strip().lower() in {"true", "1", "yes"}:
        return True
    if val.strip().lower() in {"false", "0", "no"}:
        return False

    raise ConfigBoolParsingError(
        f"Invalid boolean value for key '{key}' in the configuration file. "
        "Expected 'true', 'false', '1', '0', 'yes', or 'no' "
        "(case-insensitive).",
    )


def parse_child_lookup(val: str) -> str:
    """Validate the name of a child lookup strategy.

    Args:
        val (str): The configured strategy name.

    Raises:
        ConfigValueError: If no strategy is registered under that name.

    Returns:
        str: The normalized strategy name.

    """
    name = val.strip().lower()
    if name not in CHILD_LOOKUP_STRATEGIES:
        raise ConfigValueError(
            f"Invalid value '{val}' for key 'child_lookup'. Expected one "
            f"of: {', '.join(sorted(CHILD_LOOKUP_STRATEGIES))}.",
        )
    return name


def load_config_file(config_file_path: Path) -> TrieConfig:
    """Load and parse the configuration file.

    Args:
        config_file_path (Path): Path to the config file.

    Raises:
        ConfigNotFoundError: If required settings are missing.
        ConfigValueError: If the child lookup strategy is unknown.
        FileNotFoundError: If the config file does not exist.

    Returns:
        TrieConfig: Parsed config object.

    """
    if not config_file_path.exists():
        raise FileNotFoundError(
            f"Missing required configuration file: '{config_file_path}'. "
            "Please ensure the file exists and the path is correct.",
        )

    child_lookup = log_details = None
    log_file: Optional[Path] = None

    with config_file_path.open("r", encoding="utf-8") as file:
        for line in file:
            # Drop trailing comments, then surrounding whitespace
            line = line.split("#", 1)[0].strip()
            if not line:
                continue

            key, sep, value = line.partition("=")
            if sep != "=":
                continue

            key = key.strip().lower()
            value = value.strip()

            if key == "child_lookup":
                child_lookup = parse_child_lookup(value)
            elif key == "log_details":
                log_details = parse_bool("log_details", value)
            elif key == "log_file" and value:
                log_file = Path(value)

    required = {
        "child_lookup": child_lookup,
        "log_details": log_details,
    }

    for key, val in required.items():
        if val is None:
            raise ConfigNotFoundError(
                f"Missing required configuration: '{key}'. "
                f"Please ensure the config file includes a valid line "
                f"for '{key}'.",
            )

    return TrieConfig(
        cast("str", child_lookup),
        cast("bool", log_details),
        log_file,
    )
