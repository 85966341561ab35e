# Kodebase Configuration Validation
# Schema validation with default filling and aggregated field errors

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from kodebase_config.schema import KodebaseConfig
from kodebase_config.utils.frozen import thaw

ROOT_PATH = "root"

_ENUM_ERROR_TYPES = frozenset({"enum", "literal_error"})


@dataclass(frozen=True)
class ConfigValidationIssue:
    """A single field-level violation."""

    path: str
    message: str

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"


class ConfigValidationError(ValueError):
    """Raised when a configuration document does not match the schema.

    Carries every violation found in one pass, in document order.
    """

    def __init__(self, issues: Sequence[ConfigValidationIssue]) -> None:
        self.issues = list(issues)
        super().__init__("Invalid configuration:\n" + format_issues(self.issues))


def format_issues(issues: Sequence[ConfigValidationIssue]) -> str:
    """Render issues as an indented bullet list, one per line."""
    return "\n".join(f"  - {issue}" for issue in issues)


def _issue_path(loc: Sequence[Any]) -> str:
    if not loc:
        return ROOT_PATH
    return ".".join(str(part) for part in loc)


def _issue_message(error: dict[str, Any]) -> str:
    message = error["msg"]
    if error["type"] in _ENUM_ERROR_TYPES:
        message = f"{message}, received {error['input']!r}"
    return message


def issues_from_pydantic(exc: ValidationError) -> list[ConfigValidationIssue]:
    """Convert a pydantic ValidationError into dotted-path issues."""
    return [
        ConfigValidationIssue(path=_issue_path(error["loc"]), message=_issue_message(error))
        for error in exc.errors()
    ]


def validate_config(data: Any) -> KodebaseConfig:
    """
    Validate a raw configuration document and apply defaults.

    Args:
        data: Untyped input, typically the result of parsing YAML.

    Returns:
        KodebaseConfig: A new configuration object with defaults applied.

    Raises:
        ConfigValidationError: If any field violates the schema.
    """
    if isinstance(data, KodebaseConfig):
        data = data.to_dict()
    elif isinstance(data, Mapping):
        data = thaw(data)
    try:
        return KodebaseConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(issues_from_pydantic(e)) from e
