"""
Unit tests for the nvhosts command line.
"""

import tomllib
from unittest.mock import patch

from nvhosts import __version__
from nvhosts.config import Settings
from nvhosts.main import build_parser, main


class TestMain:
    """Tests for main()."""

    def test_version(self, capsys):
        """--version prints the version to stderr."""
        assert main(["--version"]) == 0
        assert __version__ in capsys.readouterr().err

    def test_example(self, capsys):
        """--example prints a TOML description."""
        assert main(["--example"]) == 0

        data = tomllib.loads(capsys.readouterr().out)
        assert data["sites"][0]["domain"] == "example.com"

    def test_generate(self, tmp_path, output_dir):
        """A valid description is generated into the output directory."""
        config_path = tmp_path / "nvhosts.toml"
        config_path.write_text('[[sites]]\ndomain = "a.com"\n\n[[sites]]\ndomain = "b.com"\n')

        assert main(["-c", str(config_path), "-o", str(output_dir)]) == 0

        assert sorted(p.name for p in output_dir.iterdir()) == ["a.com.conf", "b.com.conf"]

    def test_generate_with_check(self, tmp_path, output_dir, capsys):
        """--check passes for generated files."""
        config_path = tmp_path / "nvhosts.toml"
        main(["--example"])
        config_path.write_text(capsys.readouterr().out)

        assert main(["-c", str(config_path), "-o", str(output_dir), "--check"]) == 0
        assert (output_dir / "example.com.conf").exists()

    def test_check_failure(self, tmp_path, output_dir, capsys):
        """--check reports syntax errors and fails."""
        config_path = tmp_path / "nvhosts.toml"
        config_path.write_text('[[sites]]\ndomain = "a.com"\n')

        with patch("nvhosts.main.check_rendered", return_value={output_dir / "a.com.conf": ["boom"]}):
            assert main(["-c", str(config_path), "-o", str(output_dir), "--check"]) == 1

        assert "a.com.conf: boom" in capsys.readouterr().err

    def test_missing_config(self, tmp_path, capsys):
        """A missing description exits 1."""
        missing = tmp_path / "missing.toml"

        assert main(["-c", str(missing)]) == 1
        assert f"failed to load file {missing}" in capsys.readouterr().err

    def test_invalid_sites(self, tmp_path, output_dir, capsys):
        """Validation errors exit 1 before anything is written."""
        config_path = tmp_path / "nvhosts.toml"
        config_path.write_text(
            '[[sites]]\ndomain = "UPPER.COM"\n\n'
            '[[sites]]\ndomain = "ok.com"\n\n'
            '[[sites.headers]]\nfor = "/"\nvalues = { "Cache-Control" = "public" }\n'
        )

        assert main(["-c", str(config_path), "-o", str(output_dir)]) == 1

        err = capsys.readouterr().err
        assert "failed to run:" in err
        assert "UPPER.COM" in err
        assert "Cache-Control" in err
        assert not output_dir.exists()

    def test_generation_error(self, tmp_path, output_dir, capsys):
        """Generation errors exit 1."""
        config_path = tmp_path / "nvhosts.toml"
        config_path.write_text('[[sites]]\ndomain = "a.com"\n')
        output_dir.write_text("not a directory")

        assert main(["-c", str(config_path), "-o", str(output_dir)]) == 1
        assert "failed to run:" in capsys.readouterr().err


class TestLogLevel:
    """Tests for LOG_LEVEL handling."""

    def test_invalid_log_level(self, capsys):
        """An unknown LOG_LEVEL exits 1 with a message."""
        with patch("nvhosts.main.settings", Settings(_env_file=None, LOG_LEVEL="loud")):
            assert main(["--version"]) == 1

        assert "invalid LOG_LEVEL: 'loud'" in capsys.readouterr().err

    def test_lowercase_log_level(self, capsys):
        """Level names are case-insensitive."""
        with patch("nvhosts.main.settings", Settings(_env_file=None, LOG_LEVEL="debug")):
            assert main(["--version"]) == 0


class TestParser:
    """Tests for argument defaults."""

    def test_defaults(self):
        """Defaults come from settings."""
        args = build_parser().parse_args([])
        assert args.config == "./nvhosts.toml"
        assert args.output_dir == "./sites-available"
        assert args.example is False
        assert args.check is False
        assert args.verbose is False
