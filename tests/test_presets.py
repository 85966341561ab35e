# Kodebase Preset Tests
# Tests for the preset catalog and default configuration

import pytest
import yaml

from kodebase_config.defaults import generate_config_yaml, get_default_config
from kodebase_config.migration import detect_version
from kodebase_config.presets import (
    DEFAULT_PRESET,
    ENTERPRISE_PRESET,
    PRESET_DESCRIPTIONS,
    PRESETS,
    SMALL_TEAM_PRESET,
    SOLO_PRESET,
    get_preset,
    list_presets,
)
from kodebase_config.schema import CascadeMode, CommitFormat, PostMergeStrategy
from kodebase_config.validation import validate_config


def _assert_subset(expected, actual, path="root"):
    """Every key/value in *expected* appears unchanged in *actual*."""
    if isinstance(expected, dict):
        assert isinstance(actual, dict), path
        for key, value in expected.items():
            assert key in actual, f"{path}.{key} missing"
            _assert_subset(value, actual[key], f"{path}.{key}")
    else:
        assert actual == expected, path


class TestPresetCatalog:
    """Tests for the preset registry."""

    def test_preset_names(self):
        assert set(PRESETS) == {"solo", "small_team", "enterprise", "default"}
        assert list_presets() == list(PRESETS)

    def test_every_preset_described(self):
        assert set(PRESET_DESCRIPTIONS) == set(PRESETS)

    def test_registry_holds_constants(self):
        assert PRESETS["solo"] is SOLO_PRESET
        assert PRESETS["small_team"] is SMALL_TEAM_PRESET
        assert PRESETS["enterprise"] is ENTERPRISE_PRESET
        assert PRESETS["default"] is DEFAULT_PRESET

    @pytest.mark.parametrize("name", ["solo", "small_team", "enterprise", "default"])
    def test_preset_validates(self, name: str):
        """Each preset passes validation and survives it unchanged."""
        config = validate_config(PRESETS[name])
        _assert_subset(get_preset(name), config.to_dict())

    @pytest.mark.parametrize("name", ["solo", "small_team", "enterprise", "default"])
    def test_preset_version(self, name: str):
        assert detect_version(PRESETS[name]) == "1.0"

    def test_get_preset_returns_copy(self):
        preset = get_preset("solo")
        preset["gitOps"]["post_merge"]["strategy"] = "manual"

        assert get_preset("solo")["gitOps"]["post_merge"]["strategy"] == "direct_commit"
        assert SOLO_PRESET["gitOps"]["post_merge"]["strategy"] == "direct_commit"
        assert get_preset("solo") is not SOLO_PRESET

    def test_get_preset_is_plain_data(self):
        preset = get_preset("enterprise")

        assert type(preset) is dict
        assert type(preset["gitOps"]["cascades"]) is dict
        assert preset["gitOps"]["post_merge"]["cascade_pr"]["labels"] == ["cascade", "automated", "requires-review"]

    def test_unknown_preset(self):
        with pytest.raises(KeyError, match="Available presets"):
            get_preset("huge_team")


class TestPresetsReadOnly:
    """Tests that shared preset data cannot be changed in place."""

    def test_registry(self):
        with pytest.raises(TypeError):
            PRESETS["custom"] = {}

    def test_top_level_keys(self):
        with pytest.raises(TypeError):
            DEFAULT_PRESET["artifactsDir"] = "elsewhere"

    def test_nested_blocks(self):
        with pytest.raises(TypeError):
            DEFAULT_PRESET["gitOps"]["hooks"]["enabled"] = False

    def test_lists(self):
        labels = ENTERPRISE_PRESET["gitOps"]["post_merge"]["cascade_pr"]["labels"]
        assert not hasattr(labels, "append")

    def test_defaults_unaffected_by_callers(self):
        preset = get_preset("default")
        preset["gitOps"]["hooks"]["enabled"] = False

        assert get_default_config().git_ops.hooks.enabled is True


class TestPresetCharacteristics:
    """Tests for what distinguishes each preset."""

    def test_solo(self):
        git_ops = validate_config(SOLO_PRESET).git_ops

        assert git_ops.post_merge.strategy == PostMergeStrategy.DIRECT_COMMIT
        assert git_ops.post_merge.direct_commit.push_immediately is True
        assert git_ops.post_checkout.create_draft_pr is False
        assert git_ops.hooks.non_blocking is True
        assert git_ops.validation.enforce_dependencies is False
        assert git_ops.branches.require_pr_for_main is False
        assert git_ops.commits.format == CommitFormat.SIMPLE

    def test_small_team(self):
        git_ops = validate_config(SMALL_TEAM_PRESET).git_ops

        assert git_ops.post_merge.strategy == PostMergeStrategy.CASCADE_PR
        assert git_ops.post_merge.cascade_pr.auto_merge is True
        assert git_ops.post_checkout.create_draft_pr is True
        assert git_ops.hooks.pre_commit.validate_state_machine is True
        assert git_ops.hooks.pre_commit.validate_dependencies is False
        assert git_ops.cascades.max_parallelism == 3

    def test_enterprise(self):
        git_ops = validate_config(ENTERPRISE_PRESET).git_ops

        assert git_ops.post_merge.cascade_pr.auto_merge is False
        assert "requires-review" in git_ops.post_merge.cascade_pr.labels
        assert git_ops.hooks.non_blocking is False
        assert git_ops.hooks.pre_push.warn_non_artifact_branches is True
        assert git_ops.validation.error_on_warnings is True
        assert git_ops.validation.allow_wip_commits is False
        assert git_ops.cascades.mode == CascadeMode.BATCHED
        assert git_ops.cascades.parallel_execution is False
        assert git_ops.cascades.require_confirmation is True


class TestDefaultConfig:
    """Tests for get_default_config and YAML generation."""

    def test_matches_default_preset(self):
        config = get_default_config()
        _assert_subset(get_preset("default"), config.to_dict())

    def test_nested_defaults_filled(self):
        git_ops = get_default_config().git_ops

        assert git_ops.post_merge.strategy == PostMergeStrategy.CASCADE_PR
        assert git_ops.post_checkout.pr_template == "default"
        assert git_ops.hooks.log_level.value == "info"
        assert git_ops.cascades is None

    def test_fresh_instance_per_call(self):
        first = get_default_config()
        second = get_default_config()

        assert first == second
        assert first is not second

        first.git_ops.hooks.enabled = False
        first.artifacts_dir = "elsewhere"
        assert second.git_ops.hooks.enabled is True
        assert get_default_config().artifacts_dir == ".kodebase/artifacts"

    def test_generate_yaml_round_trip(self):
        text = generate_config_yaml("enterprise")

        assert text.startswith("# Kodebase Configuration")
        assert "# Preset: enterprise" in text
        assert yaml.safe_load(text) == get_preset("enterprise")

    def test_generate_yaml_unknown_preset(self):
        with pytest.raises(KeyError):
            generate_config_yaml("nope")
