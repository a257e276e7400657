"""Tests for main entry point"""

import pytest
from unittest.mock import patch

from seidl.config.settings import Settings
from seidl.exceptions import ConfigurationError
from seidl.main import load_settings, main


class TestMainEntryPoint:
    """Tests for main() entry point function"""

    @patch('seidl.main.run_cli')
    @patch('seidl.main.setup_logging')
    @patch('seidl.main.load_settings')
    def test_exit_code_from_run_cli(self, mock_load_settings, mock_setup_logging, mock_run_cli):
        """main exits with the code returned by run_cli"""
        settings = Settings(log_level="INFO")
        mock_load_settings.return_value = settings
        mock_run_cli.return_value = 0

        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])

        assert exc_info.value.code == 0
        mock_setup_logging.assert_called_once_with(level="INFO", log_file=None)
        mock_run_cli.assert_called_once_with(["--version"], settings)

    @patch('seidl.main.run_cli')
    @patch('seidl.main.setup_logging')
    @patch('seidl.main.enable_debug')
    @patch('seidl.main.load_settings')
    def test_debug_setting(self, mock_load_settings, mock_enable_debug, mock_setup_logging, mock_run_cli):
        """debug = true enables debug logging"""
        mock_load_settings.return_value = Settings(debug=True)
        mock_run_cli.return_value = 1

        with pytest.raises(SystemExit) as exc_info:
            main(["gce"])

        assert exc_info.value.code == 1
        mock_enable_debug.assert_called_once()

    @patch('seidl.main.run_cli')
    @patch('seidl.main.setup_logging')
    @patch('seidl.main.load_settings')
    def test_uses_sys_argv(self, mock_load_settings, mock_setup_logging, mock_run_cli):
        """Without argv, arguments come from sys.argv"""
        mock_load_settings.return_value = Settings()
        mock_run_cli.return_value = 0

        with patch('sys.argv', ['seidl', '-f', 'sles', 'gce']):
            with pytest.raises(SystemExit):
                main()

        assert mock_run_cli.call_args[0][0] == ['-f', 'sles', 'gce']

    @patch('seidl.main.run_cli')
    @patch('seidl.main.setup_logging')
    @patch('seidl.main.load_settings')
    def test_keyboard_interrupt(self, mock_load_settings, mock_setup_logging, mock_run_cli):
        """Ctrl+C exits with failure"""
        mock_load_settings.return_value = Settings()
        mock_run_cli.side_effect = KeyboardInterrupt()

        with pytest.raises(SystemExit) as exc_info:
            main(["gce"])

        assert exc_info.value.code == 1

    @patch('seidl.main.load_settings')
    def test_invalid_configuration(self, mock_load_settings, capsys):
        """Configuration errors are reported and exit 1"""
        mock_load_settings.side_effect = ConfigurationError("invalid configuration: bad")

        with pytest.raises(SystemExit) as exc_info:
            main(["gce"])

        assert exc_info.value.code == 1
        assert "invalid configuration: bad" in capsys.readouterr().err

    @patch('seidl.main.run_cli')
    @patch('seidl.main.load_settings')
    def test_unwritable_log_file(self, mock_load_settings, mock_run_cli, capsys, tmp_path):
        """A log file that cannot be opened is reported and exits 1"""
        log_file = tmp_path / "missing" / "seidl.log"
        mock_load_settings.return_value = Settings(log_file=str(log_file))

        with pytest.raises(SystemExit) as exc_info:
            main(["gce"])

        assert exc_info.value.code == 1
        assert f"error: cannot open log file {log_file}" in capsys.readouterr().err
        mock_run_cli.assert_not_called()

    def test_no_arguments_end_to_end(self, capsys, monkeypatch, tmp_path):
        """No arguments prints usage and exits 1 without patches"""
        monkeypatch.setattr('seidl.config.settings.get_config_path', lambda: tmp_path / "none.toml")
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 1
        assert "Usage:" in capsys.readouterr().out


class TestLoadSettings:
    """Tests for load_settings()"""

    def test_invalid_environment_value(self, monkeypatch):
        """Invalid values become ConfigurationError"""
        monkeypatch.setenv("SEIDL_API_URL", "ftp://example.test")
        with pytest.raises(ConfigurationError, match="invalid configuration"):
            load_settings()

    def test_valid(self, monkeypatch):
        monkeypatch.setenv("SEIDL_HTTP_TIMEOUT", "12.5")
        assert load_settings().http_timeout == 12.5
