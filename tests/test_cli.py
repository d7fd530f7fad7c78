import pytest

from dasel.cli import build_parser, change_default_command, main

SUBCOMMANDS = ["select", "put", "delete", "update", "validate"]


@pytest.mark.parametrize(
    "given, expected, blacklisted",
    [
        (
            ["dasel", "-p", "json", ".name"],
            ["dasel", "select", "-p", "json", ".name"],
            [],
        ),
        (
            ["dasel", "select", "-p", "json", ".name"],
            ["dasel", "select", "-p", "json", ".name"],
            [],
        ),
        (
            ["dasel", "put", "-p", "json", "-t", "string", "name=Tom"],
            ["dasel", "put", "-p", "json", "-t", "string", "name=Tom"],
            [],
        ),
        (["dasel", "-v"], ["dasel", "-v"], ["-v"]),
        (["dasel", "select", "-v"], ["dasel", "select", "-v"], ["-v"]),
    ],
)
def test_change_default_command(given, expected, blacklisted):
    assert change_default_command(given, "select", SUBCOMMANDS, blacklisted) == expected


def test_change_default_command_program_name_only():
    assert change_default_command(["dasel"], "select", SUBCOMMANDS, []) == ["dasel"]


def test_change_default_command_does_not_modify_input():
    given = ["dasel", ".name"]
    result = change_default_command(given, "select", SUBCOMMANDS, [])
    assert given == ["dasel", ".name"]
    assert result == ["dasel", "select", ".name"]


def test_build_parser_registers_update():
    parser = build_parser()
    assert "update" in parser.get_default("command_names")
    args = parser.parse_args(["update", "--dev"])
    assert args.dev is True


def test_version_flag(capsys):
    with pytest.raises(SystemExit) as info:
        main(["--version"])
    assert info.value.code == 0
    assert capsys.readouterr().out.startswith("dasel version development")


def test_no_command_prints_help(capsys):
    assert main([]) == 0
    assert "update" in capsys.readouterr().out


def test_update_rejects_arguments():
    with pytest.raises(SystemExit) as info:
        main(["update", "extra"])
    assert info.value.code == 2


def test_update_without_owner(monkeypatch, capsys):
    monkeypatch.delenv("DASEL_UPDATE_OWNER", raising=False)
    assert main(["update"]) == 1
    assert capsys.readouterr().err.startswith("Error: release owner is not configured")


def test_update_development_is_ignored(monkeypatch, capsys):
    monkeypatch.setenv("DASEL_UPDATE_OWNER", "example")
    assert main(["update"]) == 1
    captured = capsys.readouterr()
    assert "Error: ignoring update for development version" in captured.err
    assert captured.out.startswith("Updating...\nCurrent version: development")