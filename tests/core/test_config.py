"""Tests for Config Layer."""

import tempfile
from pathlib import Path

from citegraph.config import (
    DEFAULT_CONFIG,
    ConfigLoader,
    find_config_file,
    find_git_root,
    get_config,
    load_config,
    merge_configs,
    parse_toml,
)
from citegraph.config.loader import _apply_env_overrides, _try_parse_env_value


class TestConfigLoader:
    """Tests for ConfigLoader class."""

    def test_load_from_dict(self):
        loader = ConfigLoader.from_dict({"loader": {"max_records": 5}})

        assert loader.get("loader.max_records") == 5

    def test_get_with_default(self):
        loader = ConfigLoader.from_dict({})

        assert loader.get("nonexistent.key", default="fallback") == "fallback"

    def test_get_through_non_dict(self):
        loader = ConfigLoader.from_dict({"loader": 3})

        assert loader.get("loader.max_records", default=0) == 0


class TestParseToml:
    """Tests for tomlkit-based parsing."""

    def test_multiline_array(self):
        result = parse_toml('[section]\nvalues = [\n    "a, b",\n    "c",\n]\n')

        assert result["section"]["values"] == ["a, b", "c"]

    def test_plain_types(self):
        result = parse_toml("[loader]\nmax_records = 10 # inline comment\n")

        assert result == {"loader": {"max_records": 10}}
        assert type(result["loader"]) is dict


class TestMergeConfigs:
    """Tests for deep merging."""

    def test_nested_merge_keeps_siblings(self):
        merged = merge_configs(DEFAULT_CONFIG, {"loader": {"max_records": 3}})

        assert merged["loader"]["max_records"] == 3
        assert merged["loader"]["progress_every"] == 10000

    def test_base_not_mutated(self):
        merge_configs(DEFAULT_CONFIG, {"parser": {"on_malformed": "raise"}})

        assert DEFAULT_CONFIG["parser"]["on_malformed"] == "skip"


class TestLoadConfig:
    """Tests for load_config function."""

    def test_load_applies_defaults(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / ".citegraph.toml"
            path.write_text('[parser]\non_malformed = "raise"\n')

            config = load_config(path)

            assert config.get("parser.on_malformed") == "raise"
            assert config.get("loader.progress_every") == 10000

    def test_local_toml_overrides_base_values(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            base = Path(tmpdir) / ".citegraph.toml"
            base.write_text("[loader]\nmax_records = 10\nprogress_every = 5\n")
            (Path(tmpdir) / ".citegraph.local.toml").write_text("[loader]\nmax_records = 2\n")

            config = load_config(base)

            assert config.get("loader.max_records") == 2
            assert config.get("loader.progress_every") == 5

    def test_env_override_wins(self, monkeypatch):
        monkeypatch.setenv("CITEGRAPH_LOADER_MAX_RECORDS", "7")
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / ".citegraph.toml"
            path.write_text("[loader]\nmax_records = 10\n")

            config = load_config(path)

            assert config.get("loader.max_records") == 7


class TestEnvOverrides:
    """Tests for environment variable parsing."""

    def test_typed_values(self):
        assert _try_parse_env_value("true") is True
        assert _try_parse_env_value("FALSE") is False
        assert _try_parse_env_value("42") == 42
        assert _try_parse_env_value('["a", "b"]') == ["a", "b"]
        assert _try_parse_env_value("skip") == "skip"

    def test_signed_integers(self):
        assert _try_parse_env_value("-1") == -1
        assert _try_parse_env_value(" +5 ") == 5
        assert _try_parse_env_value("1.5") == "1.5"

    def test_malformed_json_returns_string(self):
        assert _try_parse_env_value("[not json") == "[not json"

    def test_negative_int_override(self, monkeypatch):
        monkeypatch.setenv("CITEGRAPH_LOADER_MAX_RECORDS", "-1")

        result = _apply_env_overrides({"loader": {}})

        assert result["loader"]["max_records"] == -1

    def test_key_with_underscores(self, monkeypatch):
        monkeypatch.setenv("CITEGRAPH_PARSER_ON_MALFORMED", "raise")

        result = _apply_env_overrides({"parser": {}})

        assert result["parser"]["on_malformed"] == "raise"

    def test_boolean_override(self, monkeypatch):
        monkeypatch.setenv("CITEGRAPH_GRAPH_MERGE_EQUAL_SATELLITES", "true")

        result = _apply_env_overrides({})

        assert result["graph"]["merge_equal_satellites"] is True


class TestFindConfigFile:
    """Tests for config discovery."""

    def test_finds_config_in_parent(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            config_path = Path(tmpdir) / ".citegraph.toml"
            config_path.write_text("")
            nested = Path(tmpdir) / "data" / "dblp"
            nested.mkdir(parents=True)

            found = find_config_file(nested)

            assert found.resolve() == config_path.resolve()

    def test_stops_at_git_root(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            (Path(tmpdir) / ".git").mkdir()

            assert find_config_file(Path(tmpdir)) is None

    def test_find_git_root_from_subdirectory(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            (Path(tmpdir) / ".git").mkdir()
            subdir = Path(tmpdir) / "a" / "b"
            subdir.mkdir(parents=True)

            assert find_git_root(subdir).resolve() == Path(tmpdir).resolve()

    def test_get_config_without_file_uses_defaults(self, monkeypatch):
        with tempfile.TemporaryDirectory() as tmpdir:
            (Path(tmpdir) / ".git").mkdir()
            monkeypatch.delenv("CITEGRAPH_LOADER_MAX_RECORDS", raising=False)

            config = get_config(start_path=Path(tmpdir))

            assert config["loader"]["max_records"] == 0
