"""Smoke tests for CLI commands.

Uses Click's CliRunner; MIDI discovery is patched so no hardware is needed.
"""

import logging
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from launchgrid.cli.main import cli, setup_logging
from launchgrid.models import AppConfig


@pytest.fixture
def runner():
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def log_args(tmp_path):
    """Keep log files out of the home directory."""
    return ["--log-file", str(tmp_path / "test.log")]


@pytest.mark.integration
class TestCLIHelp:
    """Test that all commands have working help text."""

    def test_main_help(self, runner):
        result = runner.invoke(cli, ['--help'])
        assert result.exit_code == 0
        assert 'launchgrid' in result.output
        assert 'midi' in result.output
        assert 'paint' in result.output

    def test_version_flag(self, runner):
        result = runner.invoke(cli, ['--version'])
        assert result.exit_code == 0
        assert '0.1.0' in result.output

    def test_midi_help(self, runner):
        result = runner.invoke(cli, ['midi', '--help'])
        assert result.exit_code == 0
        assert 'list' in result.output
        assert 'monitor' in result.output

    def test_paint_help(self, runner):
        result = runner.invoke(cli, ['paint', '--help'])
        assert result.exit_code == 0
        assert '--color' in result.output


@pytest.mark.integration
class TestMidiCommands:
    """Test MIDI commands without hardware."""

    @patch('launchgrid.midi.manager.mido.get_output_names')
    @patch('launchgrid.midi.manager.mido.get_input_names')
    def test_list(self, mock_inputs, mock_outputs, runner, log_args):
        mock_inputs.return_value = ["Launchpad In"]
        mock_outputs.return_value = []

        result = runner.invoke(cli, log_args + ['midi', 'list'])

        assert result.exit_code == 0
        assert '[0] Launchpad In' in result.output
        assert 'No MIDI output ports found.' in result.output

    @patch('launchgrid.midi.manager.mido.get_output_names')
    @patch('launchgrid.midi.manager.mido.get_input_names')
    def test_monitor_without_device(self, mock_inputs, mock_outputs, runner, log_args, tmp_path):
        mock_inputs.return_value = []
        mock_outputs.return_value = []
        config_args = ['--config', str(tmp_path / "missing.json")]

        result = runner.invoke(cli, log_args + config_args + ['midi', 'monitor'])

        assert result.exit_code == 1
        assert "No MIDI input device matching 'Launchpad'" in result.output

    @patch('launchgrid.midi.manager.mido.get_output_names')
    @patch('launchgrid.midi.manager.mido.get_input_names')
    def test_paint_without_device(self, mock_inputs, mock_outputs, runner, log_args, tmp_path):
        mock_inputs.return_value = ["Launchpad"]
        mock_outputs.return_value = ["Keyboard"]
        config_args = ['--config', str(tmp_path / "missing.json")]

        result = runner.invoke(cli, log_args + config_args + ['paint'])

        assert result.exit_code == 1
        assert "No MIDI output device matching 'Launchpad'" in result.output

    def test_paint_rejects_unknown_color(self, runner, log_args):
        result = runner.invoke(cli, log_args + ['paint', '--color', 'Purple'])
        assert result.exit_code != 0


@pytest.mark.integration
class TestConfigCommands:
    """Test config commands against a temporary file."""

    def test_init_and_show(self, runner, log_args, tmp_path):
        path = tmp_path / "config.json"

        result = runner.invoke(cli, log_args + ['--config', str(path), 'config', 'init'])
        assert result.exit_code == 0
        assert path.exists()

        result = runner.invoke(cli, log_args + ['--config', str(path), 'config', 'show'])
        assert result.exit_code == 0
        assert '"device_pattern": "Launchpad"' in result.output

    def test_path(self, runner, log_args, tmp_path):
        path = tmp_path / "config.json"
        result = runner.invoke(cli, log_args + ['--config', str(path), 'config', 'path'])
        assert result.exit_code == 0
        assert str(path) in result.output

    def test_show_invalid_config(self, runner, log_args, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json")

        result = runner.invoke(cli, log_args + ['--config', str(path), 'config', 'show'])

        assert result.exit_code == 1
        assert "invalid syntax" in result.output
        assert "Suggestion:" in result.output

    def test_invalid_config_does_not_block_path(self, runner, log_args, tmp_path):
        """Commands that do not need the config still run."""
        path = tmp_path / "config.json"
        path.write_text("{not json")

        result = runner.invoke(cli, log_args + ['--config', str(path), 'config', 'path'])
        assert result.exit_code == 0
        assert str(path) in result.output


@pytest.mark.integration
class TestLogging:
    """Test where log files are written."""

    @pytest.fixture(autouse=True)
    def restore_root_handlers(self):
        root_logger = logging.getLogger()
        handlers = list(root_logger.handlers)
        yield
        for handler in root_logger.handlers[:]:
            if handler not in handlers:
                root_logger.removeHandler(handler)
                handler.close()

    def test_setup_logging_uses_log_dir(self, tmp_path):
        log_dir = tmp_path / "logs"
        log_path = setup_logging(0, False, None, "INFO", log_dir)

        assert log_path == log_dir / "launchgrid.log"
        assert log_path.exists()

    def test_setup_logging_log_file_wins(self, tmp_path):
        log_file = tmp_path / "custom.log"
        log_path = setup_logging(0, False, log_file, "INFO", tmp_path / "logs")

        assert log_path == log_file
        assert not (tmp_path / "logs").exists()

    def test_config_log_dir(self, runner, tmp_path):
        """The log directory comes from the loaded config."""
        log_dir = tmp_path / "grid-logs"
        path = tmp_path / "config.json"
        AppConfig(log_dir=log_dir).save(path)

        result = runner.invoke(cli, ['--config', str(path), 'config', 'path'])

        assert result.exit_code == 0
        assert (log_dir / "launchgrid.log").exists()
