"""Unit tests for snapdiff.api.config.SnapdiffConfig module."""

import pytest

from snapdiff.api.config.SnapdiffConfig import SnapdiffConfig

pytestmark = pytest.mark.unit


class TestSnapdiffConfigLoad:
    def test_config_path_under_home(self, snapdiff_home):
        assert SnapdiffConfig.get_config_path() == snapdiff_home.resolve() / "config.json"

    def test_missing_file_gives_defaults(self):
        config = SnapdiffConfig.load()

        assert config.source.type == "httm"
        assert config.diff.engine == "auto"
        assert config.diff.context_lines == 3
        assert config.log.level == "INFO"

    def test_load_full_config(self, write_config, minimal_config_dict):
        minimal_config_dict["source"] = {"type": "snapshot_dir", "datasets": ["/tank/home"]}
        minimal_config_dict["diff"]["context_lines"] = 7
        write_config(minimal_config_dict)

        config = SnapdiffConfig.load()

        assert config.source.type == "snapshot_dir"
        assert config.source.datasets == ["/tank/home"]
        assert config.source.snapshot_subdir == ".zfs/snapshot"
        assert config.diff.context_lines == 7
        assert config.log.level == "DEBUG"

    def test_partial_config(self, write_config):
        write_config({"diff": {"engine": "myers"}})

        config = SnapdiffConfig.load()

        assert config.diff.engine == "myers"
        assert config.source.type == "httm"

    def test_invalid_json(self, snapdiff_home):
        (snapdiff_home / "config.json").write_text("{not json")

        with pytest.raises(ValueError, match="Invalid JSON"):
            SnapdiffConfig.load()

    def test_non_object_json(self, snapdiff_home):
        (snapdiff_home / "config.json").write_text("[]")

        with pytest.raises(ValueError, match="must contain a JSON object"):
            SnapdiffConfig.load()

    def test_validation_error_names_field(self, write_config):
        write_config({"diff": {"context_lines": -2}})

        with pytest.raises(ValueError, match="diff.context_lines"):
            SnapdiffConfig.load()

    def test_unknown_section_rejected(self, write_config, minimal_config_dict):
        minimal_config_dict["mongo"] = {}
        write_config(minimal_config_dict)

        with pytest.raises(ValueError, match="Configuration validation error: mongo"):
            SnapdiffConfig.load()

    def test_to_dict_round_trips(self, minimal_config_dict):
        config = SnapdiffConfig(**minimal_config_dict)

        assert config.to_dict() == minimal_config_dict
