# Kodebase Configuration Loader
# Load, save, and check the project settings file

from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from kodebase_config.defaults import generate_config_yaml, get_default_config
from kodebase_config.schema import KodebaseConfig
from kodebase_config.utils.paths import atomic_write, resolve_project_path
from kodebase_config.validation import ConfigValidationError, format_issues, validate_config

DEFAULT_CONFIG_PATH = ".kodebase/config/settings.yml"


class ConfigLoadError(Exception):
    """Raised when the settings file exists but cannot be loaded.

    Attributes:
        path: Resolved settings file path.
        cause: The underlying exception, if any.
    """

    def __init__(self, message: str, *, path: Optional[Path] = None, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.path = path
        self.cause = cause


def get_config_path(project_root: Union[str, Path], config_path: Union[str, Path] = DEFAULT_CONFIG_PATH) -> Path:
    """Get the absolute settings file path for a project."""
    return resolve_project_path(project_root, config_path)


def read_config_document(path: Path) -> Any:
    """Read and parse the settings file. An empty document parses to None."""
    text = path.read_text(encoding="utf-8")
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigLoadError(
            f"Failed to parse YAML configuration file at {path}: {e}", path=path, cause=e
        ) from e


def load_config(
    project_root: Union[str, Path],
    config_path: Union[str, Path] = DEFAULT_CONFIG_PATH,
) -> KodebaseConfig:
    """
    Load configuration from the project's settings file.

    Args:
        project_root: Project root directory.
        config_path: Settings file path relative to the project root.

    Returns:
        KodebaseConfig: Validated configuration, or the defaults if the file
        does not exist.

    Raises:
        ConfigLoadError: If the file cannot be read, parsed, or validated.
    """
    path = get_config_path(project_root, config_path)

    try:
        if not path.exists():
            return get_default_config()

        data = read_config_document(path)

        try:
            return validate_config(data)
        except ConfigValidationError as e:
            raise ConfigLoadError(
                f"Configuration validation failed for {path}:\n{format_issues(e.issues)}", path=path, cause=e
            ) from e
    except ConfigLoadError:
        raise
    except Exception as e:
        raise ConfigLoadError(f"Failed to load configuration from {path}: {e}", path=path, cause=e) from e


def save_config(
    config: Union[KodebaseConfig, Mapping[str, Any]],
    project_root: Union[str, Path],
    config_path: Union[str, Path] = DEFAULT_CONFIG_PATH,
) -> Path:
    """
    Save configuration to the project's settings file.

    Args:
        config: Configuration object, or a raw document which is validated first.
        project_root: Project root directory.
        config_path: Settings file path relative to the project root.

    Returns:
        Path: Path where config was saved.

    Raises:
        ConfigValidationError: If a raw document does not match the schema.
    """
    if not isinstance(config, KodebaseConfig):
        config = validate_config(config)

    path = get_config_path(project_root, config_path)
    content = yaml.dump(config.to_dict(), default_flow_style=False, sort_keys=False, allow_unicode=True)
    atomic_write(path, content)
    return path


def init_config(
    project_root: Union[str, Path],
    preset: str = "default",
    *,
    config_path: Union[str, Path] = DEFAULT_CONFIG_PATH,
    force: bool = False,
) -> Path:
    """
    Write a preset as the project's settings file.

    Args:
        project_root: Project root directory.
        preset: Preset name to write.
        config_path: Settings file path relative to the project root.
        force: Overwrite an existing settings file.

    Returns:
        Path: Path of the written settings file.

    Raises:
        KeyError: If the preset doesn't exist.
        FileExistsError: If the file exists and force is not set.
    """
    content = generate_config_yaml(preset)
    path = get_config_path(project_root, config_path)

    if path.exists() and not force:
        raise FileExistsError(f"Configuration file already exists: {path}\nUse --force to overwrite it.")

    atomic_write(path, content)
    return path


def validate_config_file(path: Path) -> tuple[bool, list[str]]:
    """
    Validate a settings file without raising.

    Args:
        path: Path to the settings file.

    Returns:
        Tuple of (is_valid, error_messages).
    """
    if not path.is_file():
        return False, [f"Configuration file not found: {path}"]

    try:
        data = read_config_document(path)
    except ConfigLoadError as e:
        return False, [f"Invalid YAML syntax: {e.cause}"]
    except (OSError, UnicodeDecodeError) as e:
        return False, [f"Cannot read configuration file: {e}"]

    try:
        validate_config(data)
    except ConfigValidationError as e:
        return False, [str(issue) for issue in e.issues]

    return True, []
