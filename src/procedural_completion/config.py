"""TOML config loader and validation."""

import tomllib
from pathlib import Path

CONFIG_FILENAME = "pcomp.toml"

# key -> expected type(s) for the [provider] table
_PROVIDER_KEYS: dict[str, type | tuple[type, ...]] = {
    "source": str,
    "data_types": list,
    "data_type_color": str,
    "colorize_header": bool,
    "case_sensitive": bool,
}


def load_config(path: Path) -> dict | None:
    """Load a config file. ``path`` may be the file or its directory.

    Returns None if the file doesn't exist.
    """
    config_file = path / CONFIG_FILENAME if path.is_dir() else path
    if not config_file.exists():
        return None
    with open(config_file, "rb") as f:
        return tomllib.load(f)


def require_config_section(config: dict | None, section: str) -> dict:
    """Extract a required config section or raise a hard error."""
    if config is None:
        raise RuntimeError(
            f"No config file found. Run 'pcomp init' to create {CONFIG_FILENAME}"
        )
    value = config.get(section)
    if value is None:
        raise RuntimeError(
            f"Missing [{section}] section in {CONFIG_FILENAME}. "
            f"Run 'pcomp init' to create a default config."
        )
    if not isinstance(value, dict):
        raise RuntimeError(
            f"[{section}] in {CONFIG_FILENAME} must be a table, got {type(value).__name__}"
        )
    return value


def require_provider_config(config: dict | None) -> dict:
    """Extract and validate the [provider] section.

    Unknown keys and wrongly typed values are hard errors.
    """
    section = require_config_section(config, "provider")
    unknown = sorted(set(section) - set(_PROVIDER_KEYS))
    if unknown:
        raise ValueError(
            f"Unknown key(s) in [provider]: {', '.join(unknown)}. "
            f"Valid keys: {', '.join(sorted(_PROVIDER_KEYS))}"
        )
    for key, value in section.items():
        expected = _PROVIDER_KEYS[key]
        if not isinstance(value, expected):
            raise ValueError(
                f"[provider].{key} must be {expected.__name__}, got {type(value).__name__}"
            )
    types = section.get("data_types", [])
    if not all(isinstance(t, str) for t in types):
        raise ValueError("[provider].data_types must be a list of strings")
    return section


def create_default_config(directory: Path) -> Path:
    """Create a default pcomp.toml in ``directory``. Returns the path."""
    directory.mkdir(parents=True, exist_ok=True)
    config_path = directory / CONFIG_FILENAME
    if config_path.exists():
        raise FileExistsError(f"Config already exists: {config_path}")
    config_path.write_text(
        '[provider]\n'
        '# File path, or the name of a bundled resource\n'
        'source = "c.xml"\n'
        '\n'
        '# Identifiers highlighted as data types in description headers\n'
        'data_types = ["char", "double", "float", "int", "long", "short", "signed", "unsigned", "void"]\n'
        'data_type_color = "#0000ff"\n'
        'colorize_header = false\n'
        '\n'
        '# Catalog ordering: false sorts names case-insensitively\n'
        'case_sensitive = false\n'
    )
    return config_path
