from pathlib import Path

import pytest

from src.string_trie.config import (
    ConfigBoolParsingError,
    ConfigNotFoundError,
    ConfigValueError,
    TrieConfig,
    load_config_file,
    parse_bool,
    parse_child_lookup,
)

# Test data for valid configurations
VALID_CONFIG = """
# Trie configuration
child_lookup = keyed
log_details = true
log_file = {log_file}
"""

MISSING_KEY_CONFIG = """
child_lookup = linear
"""

INVALID_BOOL_CONFIG = """
child_lookup = linear
log_details = maybe
"""

INVALID_LOOKUP_CONFIG = """
child_lookup = sorted
log_details = no
"""


# Test parse_bool function
@pytest.mark.parametrize(
    "value, expected",
    [
        ("true", True),
        ("True", True),
        ("TRUE", True),
        ("1", True),
        ("yes", True),
        ("false", False),
        ("False", False),
        ("FALSE", False),
        ("0", False),
        ("no", False),
    ],
)
def test_parse_bool_valid(value, expected):
    """Test valid boolean values."""
    assert parse_bool("test_key", value) == expected


@pytest.mark.parametrize("value", ["maybe", "2", "yess", "tru", "invalid"])
def test_parse_bool_invalid(value):
    """Test invalid boolean values."""
    with pytest.raises(ConfigBoolParsingError) as excinfo:
        parse_bool("test_key", value)
    assert "Invalid boolean value for key 'test_key'" in str(excinfo.value)


@pytest.mark.parametrize(
    "value, expected",
    [("linear", "linear"), (" Keyed ", "keyed"), ("LINEAR", "linear")],
)
def test_parse_child_lookup_valid(value, expected):
    assert parse_child_lookup(value) == expected


def test_parse_child_lookup_invalid():
    with pytest.raises(ConfigValueError) as excinfo:
        parse_child_lookup("hash")
    assert "Expected one of: keyed, linear" in str(excinfo.value)


# Test TrieConfig class
def test_trie_config_initialization(tmp_path):
    """Test TrieConfig initialization and properties."""
    config = TrieConfig(
        child_lookup="linear",
        log_details=True,
        log_file=tmp_path / "trie.log",
    )

    assert config.child_lookup == "linear"
    assert config.log_details is True
    assert config.log_file == tmp_path / "trie.log"


def test_trie_config_repr():
    """Test the string representation of TrieConfig."""
    config = TrieConfig(child_lookup="keyed", log_details=False)

    repr_str = repr(config)
    assert "Trie configuration settings" in repr_str
    assert "Child lookup: keyed" in repr_str
    assert "Log details: NO" in repr_str
    assert "Log file: default" in repr_str


# Test load_config_file function
def test_load_valid_config(tmp_path):
    """Test loading a valid configuration file."""
    log_file = tmp_path / "logs" / "trie.log"
    config_path = tmp_path / "config.txt"
    config_path.write_text(VALID_CONFIG.format(log_file=log_file))

    config = load_config_file(config_path)

    assert config.child_lookup == "keyed"
    assert config.log_details is True
    assert config.log_file == log_file


def test_load_config_without_log_file(tmp_path):
    config_path = tmp_path / "config.txt"
    config_path.write_text("child_lookup = linear\nlog_details = 0\n")

    config = load_config_file(config_path)

    assert config.child_lookup == "linear"
    assert config.log_details is False
    assert config.log_file is None


def test_load_config_missing_file():
    """Test loading a configuration from a non-existent file."""
    with pytest.raises(FileNotFoundError) as excinfo:
        load_config_file(Path("/non/existent/path"))
    assert "Missing required configuration file" in str(excinfo.value)


def test_load_config_missing_key(tmp_path):
    """Test configuration with a missing required key."""
    config_path = tmp_path / "config.txt"
    config_path.write_text(MISSING_KEY_CONFIG)

    with pytest.raises(ConfigNotFoundError) as excinfo:
        load_config_file(config_path)
    assert (
        "Missing required configuration: 'log_details'" in str(excinfo.value)
    )


def test_load_config_invalid_bool(tmp_path):
    """Test configuration with an invalid boolean value."""
    config_path = tmp_path / "config.txt"
    config_path.write_text(INVALID_BOOL_CONFIG)

    with pytest.raises(ConfigBoolParsingError) as excinfo:
        load_config_file(config_path)
    assert "Invalid boolean value for key 'log_details'" in str(excinfo.value)


def test_load_config_invalid_child_lookup(tmp_path):
    config_path = tmp_path / "config.txt"
    config_path.write_text(INVALID_LOOKUP_CONFIG)

    with pytest.raises(ConfigValueError) as excinfo:
        load_config_file(config_path)
    assert "Invalid value 'sorted' for key 'child_lookup'" in str(excinfo.value)


def test_load_config_comments_and_whitespace(tmp_path):
    """Test that comments, blank lines and indentation are handled."""
    config_content = """
    # A comment

    child_lookup   =   keyed    # trailing comment
        # Another comment
    log_details = yes
    """
    config_path = tmp_path / "config.txt"
    config_path.write_text(config_content)

    config = load_config_file(config_path)

    assert config.child_lookup == "keyed"
    assert config.log_details is True


def test_load_config_case_insensitivity(tmp_path):
    """Test that keys are case-insensitive."""
    config_path = tmp_path / "config.txt"
    config_path.write_text("CHILD_LOOKUP = Linear\nLOG_DETAILS = FALSE\n")

    config = load_config_file(config_path)

    assert config.child_lookup == "linear"
    assert config.log_details is False


def test_load_config_invalid_line_format(tmp_path):
    """Test that malformed lines are ignored."""
    config_content = """
    child_lookup = linear
    invalid_line_without_equals
    log_details = true
    another_invalid line
    """
    config_path = tmp_path / "config.txt"
    config_path.write_text(config_content)

    config = load_config_file(config_path)

    assert config.child_lookup == "linear"
    assert config.log_details is True


def test_repository_config_file():
    """Test that the sample configuration shipped with the project loads."""
    config = load_config_file(Path(__file__).parent.parent / "config.txt")

    assert config.child_lookup == "linear"
    assert config.log_details is False
    assert config.log_file is None
