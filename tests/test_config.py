"""Tests for tagweave.yaml loading and project scaffolding."""

import pytest
import yaml

from tagweave.lib.config import EngineConfig, save_config
from tagweave.lib.errors import AlreadyInitializedError, ConfigError
from tagweave.lib.workspace import (
    check_already_initialized,
    create_config_file,
    find_workspace,
    load_engine_config,
    scaffold,
)


class TestEngineConfig:
    def test_defaults(self):
        config = EngineConfig()
        assert config.tag == "Component"
        assert config.encoding == "utf-8"
        assert config.max_depth is None
        assert config.detect_cycles is False
        assert config.loop_separator == "\n"

    def test_load_missing_file_gives_defaults(self, tmp_path):
        assert EngineConfig.load(tmp_path / "tagweave.yaml") == EngineConfig()

    def test_load_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "tagweave.yaml"
        path.write_text("")
        assert EngineConfig.load(path) == EngineConfig()

    def test_load_values(self, tmp_path):
        path = tmp_path / "tagweave.yaml"
        path.write_text("tag: Include\nmax_depth: 5\ndetect_cycles: true\n")
        config = EngineConfig.load(path)
        assert config.tag == "Include"
        assert config.max_depth == 5
        assert config.detect_cycles is True

    def test_unknown_key_is_rejected(self, tmp_path):
        path = tmp_path / "tagweave.yaml"
        path.write_text("tags: Include\n")
        with pytest.raises(ConfigError, match="tagweave.yaml"):
            EngineConfig.load(path)

    def test_non_mapping_is_rejected(self, tmp_path):
        path = tmp_path / "tagweave.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="mapping"):
            EngineConfig.load(path)

    def test_invalid_yaml_is_rejected(self, tmp_path):
        path = tmp_path / "tagweave.yaml"
        path.write_text("tag: [unclosed\n")
        with pytest.raises(ConfigError):
            EngineConfig.load(path)

    def test_negative_depth_is_rejected(self, tmp_path):
        path = tmp_path / "tagweave.yaml"
        path.write_text("max_depth: -1\n")
        with pytest.raises(ConfigError):
            EngineConfig.load(path)

    def test_unknown_encoding_is_rejected(self):
        with pytest.raises(ValueError, match="unknown encoding"):
            EngineConfig(encoding="no-such-codec")

    def test_bad_tag_is_rejected(self):
        with pytest.raises(ValueError, match="invalid tag"):
            EngineConfig(tag="<Component")

    def test_overrides_skip_none(self):
        config = EngineConfig(max_depth=3)
        updated = config.with_overrides(max_depth=None, detect_cycles=True)
        assert updated.max_depth == 3
        assert updated.detect_cycles is True
        assert config.with_overrides(max_depth=None) is config

    def test_save_writes_only_explicit_fields(self, tmp_path):
        path = tmp_path / "tagweave.yaml"
        save_config(EngineConfig(tag="Include"), path)
        with open(path) as f:
            data = yaml.safe_load(f)
        assert data == {"tag": "Include"}


class TestWorkspace:
    def test_find_workspace_walks_up(self, tmp_path):
        config_file = tmp_path / "tagweave.yaml"
        config_file.write_text("tag: Include\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)

        ws = find_workspace(nested)
        assert ws is not None
        assert ws.root == tmp_path.resolve()
        assert ws.config_file == tmp_path.resolve() / "tagweave.yaml"

    def test_find_workspace_accepts_yml(self, tmp_path):
        (tmp_path / "tagweave.yml").write_text("tag: Include\n")
        ws = find_workspace(tmp_path)
        assert ws is not None
        assert ws.config_file.name == "tagweave.yml"

    def test_load_engine_config_prefers_explicit_path(self, tmp_path):
        (tmp_path / "tagweave.yaml").write_text("tag: Found\n")
        explicit = tmp_path / "other.yaml"
        explicit.write_text("tag: Explicit\n")

        assert load_engine_config(start=tmp_path).tag == "Found"
        assert load_engine_config(explicit, start=tmp_path).tag == "Explicit"

    def test_scaffold_creates_config(self, tmp_path):
        out = scaffold(tmp_path)
        assert out == tmp_path / "tagweave.yaml"
        with open(out) as f:
            data = yaml.safe_load(f)
        assert data == {"tag": "Component", "encoding": "utf-8"}

    def test_scaffold_twice_raises(self, tmp_path):
        scaffold(tmp_path)
        with pytest.raises(AlreadyInitializedError):
            scaffold(tmp_path)

    def test_scaffold_force_overwrites(self, tmp_path):
        scaffold(tmp_path)
        scaffold(tmp_path, tag="Include", force=True)
        assert EngineConfig.load(tmp_path / "tagweave.yaml").tag == "Include"

    def test_check_already_initialized_passes_when_not_initialized(self, tmp_path):
        check_already_initialized(tmp_path / "tagweave.yaml")

    def test_create_config_file_round_trip(self, tmp_path):
        path = create_config_file(tmp_path / "conf" / "tagweave.yaml", tag="Part")
        assert EngineConfig.load(path).tag == "Part"


def test_create_config_file_invalid_tag_is_config_error(tmp_path):
    path = tmp_path / "tagweave.yaml"
    with pytest.raises(ConfigError, match="invalid tag"):
        create_config_file(path, tag="<bad")
    assert not path.exists()
