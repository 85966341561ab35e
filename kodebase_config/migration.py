# Kodebase Configuration Migration
# Version detection and stepwise upgrades between configuration versions

from collections.abc import Callable, Mapping, MutableMapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Optional

SUPPORTED_VERSIONS: tuple[str, ...] = ("1.0",)
DEFAULT_VERSION = "1.0"
LATEST_VERSION = SUPPORTED_VERSIONS[-1]


@dataclass(frozen=True)
class ConfigDeprecationWarning:
    """A deprecated field found while migrating. Informational only."""

    field: str
    message: str
    version: str

    def __str__(self) -> str:
        return f"[Deprecated in v{self.version}] {self.field}: {self.message}"


@dataclass
class MigrationResult:
    """Result of a migration operation."""

    config: Any
    warnings: list[ConfigDeprecationWarning] = field(default_factory=list)


# A step upgrades a document by exactly one version and may append warnings.
MigrationStep = Callable[[Any, list[ConfigDeprecationWarning]], Any]

# Registered steps, keyed by (from_version, to_version) of consecutive versions.
MIGRATIONS: dict[tuple[str, str], MigrationStep] = {}


class MigrationError(ValueError):
    """Base error for configuration migration failures."""


class UnsupportedVersionError(MigrationError):
    """Raised when a migration names a version that is not supported.

    Attributes:
        version: The rejected version value.
        supported: The versions that would have been accepted.
    """

    def __init__(self, version: object, supported: Sequence[str]) -> None:
        self.version = version
        self.supported = tuple(supported)
        super().__init__(
            f"Unsupported configuration version: {version}. Supported versions: {', '.join(self.supported)}"
        )


class DowngradeError(MigrationError):
    """Raised when asked to migrate to an older version."""

    def __init__(self, from_version: str, to_version: str) -> None:
        self.from_version = from_version
        self.to_version = to_version
        super().__init__(f"Downgrade from {from_version} to {to_version} is not supported")


class ConfigMigrator:
    """
    Upgrades configuration documents along an ordered list of versions.

    Versions are ordered oldest first. Migrating from version ``a`` to ``c``
    applies the registered steps ``(a, b)`` then ``(b, c)``, collecting any
    deprecation warnings they report. Migrating to the same version is a
    no-op that returns the input unchanged.
    """

    def __init__(
        self,
        versions: Sequence[str],
        steps: Optional[MutableMapping[tuple[str, str], MigrationStep]] = None,
        default_version: Optional[str] = None,
    ):
        """
        Initialize migrator.

        Args:
            versions: Supported versions, oldest first.
            steps: Step registry keyed by consecutive version pairs.
            default_version: Version assumed when a document declares none.
        """
        if not versions:
            raise ValueError("At least one configuration version is required")
        self.versions = tuple(versions)
        self.steps = steps if steps is not None else {}
        self.default_version = default_version if default_version is not None else self.versions[0]

    @property
    def latest_version(self) -> str:
        return self.versions[-1]

    def detect_version(self, config: Any) -> str:
        """Return the declared version if it is supported, else the default version."""
        if isinstance(config, Mapping):
            version = config.get("version")
        else:
            version = getattr(config, "version", None)

        if isinstance(version, str) and version in self.versions:
            return version
        return self.default_version

    def check_version(self, version: Any) -> str:
        """Return *version* unchanged, or raise if it is not supported."""
        if not isinstance(version, str) or version not in self.versions:
            raise UnsupportedVersionError(version, self.versions)
        return version

    def migrate(
        self,
        config: Any,
        *,
        from_version: Optional[str] = None,
        to_version: Optional[str] = None,
    ) -> MigrationResult:
        """
        Migrate a configuration document between versions.

        Args:
            config: The configuration document to migrate.
            from_version: Source version (auto-detected if omitted).
            to_version: Target version (latest if omitted).

        Returns:
            MigrationResult with the migrated config and deprecation warnings.

        Raises:
            UnsupportedVersionError: If either version is not supported.
            DowngradeError: If the target version is older than the source.
            MigrationError: If a step between two versions is missing.
        """
        source = self.check_version(from_version if from_version is not None else self.detect_version(config))
        target = self.check_version(to_version if to_version is not None else self.latest_version)

        start = self.versions.index(source)
        end = self.versions.index(target)
        if start > end:
            raise DowngradeError(source, target)

        warnings: list[ConfigDeprecationWarning] = []
        migrated = config
        for current, following in zip(self.versions[start:end], self.versions[start + 1 : end + 1]):
            step = self.steps.get((current, following))
            if step is None:
                raise MigrationError(f"No migration registered from {current} to {following}")
            migrated = step(migrated, warnings)

        return MigrationResult(config=migrated, warnings=warnings)


_migrator = ConfigMigrator(SUPPORTED_VERSIONS, MIGRATIONS, DEFAULT_VERSION)


def detect_version(config: Any) -> str:
    """
    Detect the version of a configuration document.

    Never raises: non-mappings, missing or non-string versions and unknown
    version strings all yield DEFAULT_VERSION.
    """
    return _migrator.detect_version(config)


def migrate_config(
    config: Any,
    *,
    from_version: Optional[str] = None,
    to_version: Optional[str] = None,
) -> MigrationResult:
    """Migrate a configuration document using the registered migrations.

    Running it again on its own output with the same bounds yields the same
    result.
    """
    return _migrator.migrate(config, from_version=from_version, to_version=to_version)


def create_deprecation_warning(field: str, message: str, version: str) -> ConfigDeprecationWarning:
    """Create a deprecation warning."""
    return ConfigDeprecationWarning(field=field, message=message, version=version)
