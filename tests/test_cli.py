from pathlib import Path
from unittest.mock import patch

import pytest

from p2pool_exporter import settings
from p2pool_exporter.__main__ import build_parser, main
from p2pool_exporter.utils.exceptions import ConfigurationError


def test_parser_defaults_come_from_settings():
    args = build_parser().parse_args([])

    assert args.data_dir == settings.DATA_DIR
    assert args.host == settings.EXPORTER_HOST


def test_main_starts_server(tmp_path):
    with patch("p2pool_exporter.__main__.start_server") as start_server:
        main(["--data-dir", str(tmp_path), "--port", "9101", "--log-level", "debug"])

    start_server.assert_called_once_with(data_dir=Path(tmp_path), host=settings.EXPORTER_HOST, port=9101)


def test_main_rejects_bad_port():
    with patch("p2pool_exporter.__main__.start_server") as start_server:
        with pytest.raises(SystemExit):
            main(["--port", "http"])
    start_server.assert_not_called()


@pytest.mark.parametrize("value", ["0", "65536", "-1"])
def test_parse_port_range(value):
    with pytest.raises(ConfigurationError):
        settings.parse_port(value)


def test_parse_log_level():
    assert settings.parse_log_level("warning") == "WARNING"
    with pytest.raises(ConfigurationError):
        settings.parse_log_level("loud")
