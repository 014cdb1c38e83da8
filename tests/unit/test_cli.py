"""Tests for the command line entry point."""

import pytest

from spkmeans.cli import (
    EXIT_CONFIG_ERROR,
    EXIT_MISSING_INPUT,
    EXIT_OK,
    build_settings,
    main,
    parse_args,
)
from spkmeans.core.config import Config

RECORDS = (
    "a1\tx\t1.0\ty\t1.0\n"
    "a2\tx\t1.1\ty\t0.9\n"
    "b1\tx\t10.0\ty\t10.0\n"
    "broken\tx\n"
    "b2\tx\t10.2\ty\t9.8\n"
)


@pytest.fixture
def data_file(tmp_path):
    path = tmp_path / "records.tsv"
    path.write_text(RECORDS)
    return path


@pytest.fixture(autouse=True)
def reset_config():
    Config.reset()
    yield
    Config.reset()


class TestCli:
    """Tests for spkmeans.cli."""

    def test_clusters_file(self, data_file, capsys):
        """Should print one label/cluster line per valid record."""
        # Act
        code = main(["2", str(data_file), "--seed", "3", "--workers", "2"])

        # Assert
        out, err = capsys.readouterr()
        assert code == EXIT_OK
        rows = [line.split("\t") for line in out.splitlines()]
        assert [label for label, _ in rows] == ["a1", "a2", "b1", "b2"]
        clusters = {label: cluster for label, cluster in rows}
        assert clusters["a1"] == clusters["a2"]
        assert clusters["b1"] == clusters["b2"]
        assert clusters["a1"] != clusters["b1"]
        assert "format error" in err

    def test_random_initializer(self, data_file, capsys):
        code = main(["2", str(data_file), "--init", "random", "--seed", "1"])
        out, _ = capsys.readouterr()
        assert code == EXIT_OK
        assert len(out.splitlines()) == 4

    def test_too_many_clusters(self, data_file, capsys):
        """K above the record count is a configuration error."""
        code = main(["9", str(data_file)])
        out, err = capsys.readouterr()
        assert code == EXIT_CONFIG_ERROR
        assert out == ""
        assert "exceeds dataset size" in err

    def test_missing_data_file(self, tmp_path, capsys):
        code = main(["2", str(tmp_path / "missing.tsv")])
        _, err = capsys.readouterr()
        assert code == EXIT_MISSING_INPUT
        assert "not found" in err

    def test_show_vectors(self, data_file, capsys):
        code = main(["2", str(data_file), "--show-vectors"])
        out, _ = capsys.readouterr()
        assert code == EXIT_OK
        assert out.splitlines()[0] == "a1\tx\t1.000\ty\t1.000"

    def test_unknown_init_rejected(self, data_file):
        with pytest.raises(SystemExit):
            parse_args(["2", str(data_file), "--init", "bogus"])

    def test_flags_override_config(self, tmp_path, data_file):
        # Arrange
        config_file = tmp_path / "kmeans.yaml"
        config_file.write_text("""
clustering:
  num_clusters: 8
  initializer: random
  max_iterations: 4
loader:
  dedupe_labels: false
""")
        args = parse_args(["2", str(data_file), "--config", str(config_file), "--max-iter", "7"])

        # Act
        settings = build_settings(args)

        # Assert
        assert settings["num_clusters"] == 2
        assert settings["initializer"] == "random"
        assert settings["max_iterations"] == 7
        assert settings["loader"] == {"dedupe_labels": False}

    def test_negative_seed_is_config_error(self, data_file, capsys):
        code = main(["1", str(data_file), "--seed", "-1"])
        out, err = capsys.readouterr()
        assert code == EXIT_CONFIG_ERROR
        assert out == ""
        assert "seed" in err

    def test_empty_loader_section(self, tmp_path, data_file, capsys):
        """A bare ``loader:`` key falls back to the loader defaults."""
        config_file = tmp_path / "kmeans.yaml"
        config_file.write_text("clustering:\n  max_iterations: 5\nloader:\n")

        code = main(["2", str(data_file), "--config", str(config_file), "--seed", "3"])

        out, _ = capsys.readouterr()
        assert code == EXIT_OK
        assert len(out.splitlines()) == 4

    def test_malformed_config_is_config_error(self, tmp_path, data_file, capsys):
        config_file = tmp_path / "kmeans.yaml"
        config_file.write_text("loader: tabs\n")

        code = main(["2", str(data_file), "--config", str(config_file)])

        _, err = capsys.readouterr()
        assert code == EXIT_CONFIG_ERROR
        assert "loader" in err

    def test_unknown_log_level_rejected(self, data_file):
        with pytest.raises(SystemExit):
            parse_args(["2", str(data_file), "--log-level", "bogus"])

    def test_log_level_case_insensitive(self, data_file):
        args = parse_args(["2", str(data_file), "--log-level", "debug"])
        assert args.log_level == "DEBUG"
