import json

import pytest
from typer.testing import CliRunner

import milight.console.application as application
import milight.console.commands._utils as cli_utils
from milight.bridge.commands import COLORS, COMMANDS
from milight.common.app_config import AppSettings
from milight.console.application import app, repl_args

runner = CliRunner()


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    settings = AppSettings()
    monkeypatch.setattr(application, "app_settings", settings)
    monkeypatch.setattr(cli_utils, "app_settings", settings)

    return settings


def bridge_options(receiver):
    host, port = receiver.getsockname()

    return ["--host", host, "--port", str(port)]


def test_command_list_json():
    result = runner.invoke(app, ["command", "list", "--json"])

    assert result.exit_code == 0
    assert json.loads(result.output) == dict(COMMANDS)


def test_command_list_colors():
    result = runner.invoke(app, ["command", "list", "--colors"])

    assert result.exit_code == 0
    lines = result.output.strip().splitlines()
    assert len(lines) == len(COLORS)
    assert any(line.split() == ["red", "0xB0"] for line in lines)


def test_command_list_exclusive_options():
    result = runner.invoke(app, ["command", "list", "--colors", "--operations"])

    assert result.exit_code == 1


def test_send_by_name(udp_receiver, sleeps):
    result = runner.invoke(
        app, bridge_options(udp_receiver) + ["command", "send", "rgbw", "red"]
    )

    assert result.exit_code == 0, result.output
    assert udp_receiver.recvfrom(16)[0] == b"\x40\xb0\x55"


def test_send_by_number(udp_receiver, sleeps):
    result = runner.invoke(
        app, bridge_options(udp_receiver) + ["command", "send", "0x4E", "27"]
    )

    assert result.exit_code == 0, result.output
    assert udp_receiver.recvfrom(16)[0] == b"\x4e\x1b\x55"


def test_send_unknown_command(udp_receiver):
    result = runner.invoke(
        app, bridge_options(udp_receiver) + ["command", "send", "sparkle"]
    )

    assert result.exit_code != 0


def test_send_out_of_range_value(udp_receiver):
    result = runner.invoke(
        app, bridge_options(udp_receiver) + ["command", "send", "rgbw", "300"]
    )

    assert result.exit_code != 0


def test_send_without_host():
    result = runner.invoke(app, ["command", "send", "all_on"])

    assert result.exit_code == 1


def test_send_failure(sleeps):
    result = runner.invoke(app, ["--host", "bridge.invalid", "command", "send", "all_on"])

    assert result.exit_code == 1


def test_zone_brightness(udp_receiver, sleeps):
    result = runner.invoke(
        app, bridge_options(udp_receiver) + ["zone", "brightness", "2", "10"]
    )

    assert result.exit_code == 0, result.output
    assert udp_receiver.recvfrom(16)[0] == b"\x47\x00\x55"
    assert udp_receiver.recvfrom(16)[0] == b"\x4e\x0c\x55"


def test_zone_color_by_name(udp_receiver, sleeps):
    result = runner.invoke(
        app, bridge_options(udp_receiver) + ["zone", "color", "0", "aqua"]
    )

    assert result.exit_code == 0, result.output
    assert udp_receiver.recvfrom(16)[0] == b"\x42\x00\x55"
    assert udp_receiver.recvfrom(16)[0] == b"\x40\x30\x55"


def test_zone_out_of_range(udp_receiver):
    result = runner.invoke(app, bridge_options(udp_receiver) + ["zone", "on", "5"])

    assert result.exit_code != 0


@pytest.mark.parametrize(
    "line, expected",
    [
        ("", ["--help"]),
        ("help", ["--help"]),
        ("help zone", ["zone", "--help"]),
        ("zone on 1", ["zone", "on", "1"]),
        ("command send rgbw 'red'", ["command", "send", "rgbw", "red"]),
    ],
)
def test_repl_args(line, expected):
    assert repl_args(line) == expected
