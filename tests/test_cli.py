from pathlib import Path

import pytest

from vidconvert.appconfig import AppConfiguration
from vidconvert.cli import (
    Action,
    CliError,
    SelfTest,
    main,
    parse_arguments,
    resolve_configuration,
)
from vidconvert.task import Status


def _folders(tmp_path):
    for name in ("input", "output", "work"):
        (tmp_path / name).mkdir()


def _argv(tmp_path):
    _folders(tmp_path)
    return [
        "-db", str(tmp_path / "films.db"),
        "-i", str(tmp_path / "input"),
        "-o", str(tmp_path / "output"),
        "-w", str(tmp_path / "work"),
        "-l", str(tmp_path / "run.log"),
        "-ll", "0",
    ]


def test_test_action():
    assert parse_arguments(["-t"]).action is Action.TEST
    assert parse_arguments(["--daemon"]).action is Action.DAEMON


def test_last_action_wins():
    assert parse_arguments(["-d", "-t"]).action is Action.TEST


def test_no_action_is_error():
    with pytest.raises(CliError, match="No action specified"):
        parse_arguments([])


def test_unknown_argument():
    with pytest.raises(CliError, match="Unknown argument: -x"):
        parse_arguments(["-t", "-x"])


def test_missing_value():
    with pytest.raises(CliError, match="Config specified without argument"):
        parse_arguments(["-c"])


def test_loglevel_range():
    assert parse_arguments(["-ll", "3", "-t"]).config.log_level == 3
    with pytest.raises(CliError, match="Loglevel"):
        parse_arguments(["-ll", "9", "-t"])


def test_negative_sleep_rejected():
    with pytest.raises(CliError, match="Sleep time"):
        parse_arguments(["-s", "-1", "-t"])


def test_onfinish_values():
    assert parse_arguments(["-of", "copy", "-t"]).config.onfinish == "copy"
    with pytest.raises(CliError, match="Onfinish"):
        parse_arguments(["-of", "delete", "-t"])


def test_add_removes_backslashes():
    command = parse_arguments(["-a", "my\\ film.mkv"])
    assert command.action is Action.ADD
    assert command.config.interactive_parameter == Path("my film.mkv")


def test_help_stops_parsing():
    assert parse_arguments(["-h", "-x"]).action is Action.HELP
    assert parse_arguments(["-v"]).action is Action.VERSION


def test_resolve_with_command_line_values(tmp_path):
    command = parse_arguments(_argv(tmp_path) + ["-t"])
    config = resolve_configuration(command.config)
    assert config.database_file == tmp_path / "films.db"
    assert config.errors == {}


def test_resolve_reports_missing_folder(tmp_path):
    argv = _argv(tmp_path)
    (tmp_path / "input").rmdir()
    command = parse_arguments(argv + ["-t"])
    with pytest.raises(CliError) as info:
        resolve_configuration(command.config)
    assert "input" in info.value.errors


def test_resolve_reads_config_file(tmp_path):
    _folders(tmp_path)
    conf = tmp_path / "app.conf"
    conf.write_text(
        "\n".join(
            [
                f'database = "{(tmp_path / "films.db").as_posix()}";',
                f'input = "{(tmp_path / "input").as_posix()}";',
                f'output = "{(tmp_path / "output").as_posix()}";',
                f'work = "{(tmp_path / "work").as_posix()}";',
                f'logfile = "{(tmp_path / "run.log").as_posix()}";',
                "loglevel = 2;",
                "sleep = 10;",
            ]
        ),
        encoding="utf-8",
    )
    command = parse_arguments(["-c", str(conf), "-t"])
    config = resolve_configuration(command.config)
    assert config.log_level == 2
    assert config.sleep_time == 10
    assert config.work_folder == Path((tmp_path / "work").as_posix())


def test_resolve_missing_config_file(tmp_path):
    command = parse_arguments(["-c", str(tmp_path / "missing.conf"), "-t"])
    with pytest.raises(CliError) as info:
        resolve_configuration(command.config)
    assert "read error" in info.value.errors


def test_self_test_succeeds(tmp_path, capsys):
    config = resolve_configuration(parse_arguments(_argv(tmp_path) + ["-t"]).config)
    assert SelfTest(config).run() == Status.HALT_OK
    assert "Test is successful" in capsys.readouterr().out
    assert (tmp_path / "run.log").exists()


def test_self_test_fails_on_bad_database(tmp_path):
    _folders(tmp_path)
    config = AppConfiguration()
    config.database_file = tmp_path
    config.log_file = tmp_path / "run.log"
    config.log_level = 0
    assert SelfTest(config).run() == Status.HALT_ERROR


def test_main_help_and_version(capsys):
    assert main(["-h"]) == 0
    assert "--help" in capsys.readouterr().out
    assert main(["-v"]) == 0


def test_main_without_action_fails(capsys):
    assert main([]) == 1
    assert "No action specified" in capsys.readouterr().err


def test_main_runs_self_test(tmp_path, capsys):
    assert main(_argv(tmp_path) + ["-t"]) == 0
    assert "Test is successful" in capsys.readouterr().out


def test_main_invalid_configuration(tmp_path):
    argv = _argv(tmp_path)
    (tmp_path / "output").rmdir()
    assert main(argv + ["-t"]) == 1