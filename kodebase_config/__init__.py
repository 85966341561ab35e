"""kodebase-config - Configuration system for Kodebase git operations.

Schema, validation, loading and version migration for the
``.kodebase/config/settings.yml`` project settings file, plus named presets
for solo developers, small teams and enterprises.
"""

__version__ = "1.0.0"

from kodebase_config.defaults import generate_config_yaml, get_default_config
from kodebase_config.loader import (
    DEFAULT_CONFIG_PATH,
    ConfigLoadError,
    get_config_path,
    init_config,
    load_config,
    save_config,
    validate_config_file,
)
from kodebase_config.migration import (
    DEFAULT_VERSION,
    LATEST_VERSION,
    SUPPORTED_VERSIONS,
    ConfigDeprecationWarning,
    ConfigMigrator,
    DowngradeError,
    MigrationError,
    MigrationResult,
    UnsupportedVersionError,
    create_deprecation_warning,
    detect_version,
    migrate_config,
)
from kodebase_config.presets import (
    DEFAULT_PRESET,
    ENTERPRISE_PRESET,
    PRESETS,
    SMALL_TEAM_PRESET,
    SOLO_PRESET,
    get_preset,
    list_presets,
)
from kodebase_config.schema import (
    AuthStrategy,
    BitbucketConfig,
    BranchesConfig,
    CascadeMode,
    CascadePRConfig,
    CascadesConfig,
    CommitFormat,
    CommitsConfig,
    ConventionalCommitsConfig,
    DirectCommitConfig,
    GitHubConfig,
    GitLabConfig,
    GitOpsConfig,
    HookConfig,
    HooksConfig,
    KodebaseConfig,
    LogLevel,
    PlatformConfig,
    PlatformType,
    PostCheckoutConfig,
    PostMergeConfig,
    PostMergeStrategy,
    PRCreationConfig,
    PreCommitConfig,
    PrePushConfig,
    ValidationConfig,
)
from kodebase_config.validation import ConfigValidationError, ConfigValidationIssue, validate_config

__all__ = [
    "__version__",
    # Schema
    "KodebaseConfig",
    "GitOpsConfig",
    "PostMergeConfig",
    "CascadePRConfig",
    "DirectCommitConfig",
    "PostCheckoutConfig",
    "HookConfig",
    "PreCommitConfig",
    "PrePushConfig",
    "HooksConfig",
    "GitHubConfig",
    "GitLabConfig",
    "BitbucketConfig",
    "PlatformConfig",
    "PRCreationConfig",
    "CascadesConfig",
    "ValidationConfig",
    "BranchesConfig",
    "ConventionalCommitsConfig",
    "CommitsConfig",
    "PostMergeStrategy",
    "PlatformType",
    "AuthStrategy",
    "CascadeMode",
    "CommitFormat",
    "LogLevel",
    # Validation
    "validate_config",
    "ConfigValidationError",
    "ConfigValidationIssue",
    # Defaults and presets
    "get_default_config",
    "generate_config_yaml",
    "PRESETS",
    "DEFAULT_PRESET",
    "SOLO_PRESET",
    "SMALL_TEAM_PRESET",
    "ENTERPRISE_PRESET",
    "get_preset",
    "list_presets",
    # Loader
    "DEFAULT_CONFIG_PATH",
    "ConfigLoadError",
    "load_config",
    "save_config",
    "init_config",
    "get_config_path",
    "validate_config_file",
    # Migration
    "SUPPORTED_VERSIONS",
    "DEFAULT_VERSION",
    "LATEST_VERSION",
    "ConfigDeprecationWarning",
    "MigrationResult",
    "ConfigMigrator",
    "MigrationError",
    "UnsupportedVersionError",
    "DowngradeError",
    "detect_version",
    "migrate_config",
    "create_deprecation_warning",
]
