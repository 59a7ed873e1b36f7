import io

import pytest

from minish import Shell
from minish.shell import core
from minish.shell.process import SpawnFailed


def make_shell(path: str, **env: str) -> Shell:
    return Shell(env={"PATH": path, **env}, stderr=io.StringIO())


def test_external_command_exit_code(tmp_path, make_executable):
    make_executable(tmp_path, "fails", "exit 3")
    shell = make_shell(str(tmp_path))
    assert shell.execute_line("fails") == 3
    assert shell.last_status == 3
    assert shell.prepare(["$?"]) == ["3"]


def test_external_command_output_and_arguments(tmp_path, capfd, make_executable):
    make_executable(tmp_path, "show", 'printf "%s|" "$@"; echo')
    shell = make_shell(str(tmp_path))
    assert shell.execute_line("show a b") == 0
    out, _ = capfd.readouterr()
    assert out == "a|b|\n"


def test_external_command_signal_status(tmp_path, make_executable):
    make_executable(tmp_path, "suicide", "kill -TERM $$")
    shell = make_shell(str(tmp_path))
    assert shell.execute_line("suicide") == 128 + 15


def test_child_receives_shell_environment(tmp_path, capfd, make_executable):
    make_executable(tmp_path, "greet", 'echo "$GREETING"')
    shell = make_shell(str(tmp_path))
    shell.execute_line("setenv GREETING hello")
    shell.execute_line("greet")
    out, _ = capfd.readouterr()
    assert out == "hello\n"


def test_command_not_found_never_spawns(tmp_path, monkeypatch):
    def forbidden(*args, **kwargs):
        raise AssertionError("no process may be created")

    monkeypatch.setattr(core, "run_child", forbidden)
    shell = make_shell(str(tmp_path))
    assert shell.execute_line("no-such-command arg") == 127
    assert shell.stderr.getvalue() == "minish: 1: no-such-command: not found\n"


def test_missing_slash_path_is_not_found(tmp_path):
    shell = make_shell("/usr/bin:/bin")
    assert shell.execute_line(f"{tmp_path}/missing") == 127


def test_not_executable_is_126(tmp_path, make_executable):
    script = make_executable(tmp_path, "plain", "exit 0", mode=0o644)
    shell = make_shell("/usr/bin:/bin")
    assert shell.execute_line(str(script)) == 126
    assert shell.stderr.getvalue() == f"minish: 1: {script}: Permission denied\n"
    assert shell.execute_line(str(tmp_path)) == 126


def test_spawn_failure_is_reported_and_loop_continues(tmp_path, monkeypatch, make_executable):
    make_executable(tmp_path, "tool", "exit 0")
    monkeypatch.setattr(
        core, "run_child", lambda *args, **kwargs: SpawnFailed("Resource temporarily unavailable")
    )
    shell = make_shell(str(tmp_path))
    assert shell.execute_line("tool") == 1
    assert shell.stderr.getvalue() == "minish: 1: tool: Resource temporarily unavailable\n"
    assert shell.execute_line("setenv A 1") == 0


def test_path_absent_uses_current_directory(tmp_path, monkeypatch, make_executable):
    monkeypatch.chdir(tmp_path)
    make_executable(tmp_path, "local", "exit 6")
    shell = Shell(env={}, stderr=io.StringIO())
    assert shell.execute_line("local") == 6
    assert shell.execute_line("ls") == 127


def test_path_change_takes_effect_immediately(tmp_path, make_executable):
    bins = tmp_path / "bins"
    bins.mkdir()
    make_executable(bins, "tool", "exit 9")
    shell = make_shell(str(tmp_path))
    assert shell.execute_line("tool") == 127
    shell.execute_line(f"setenv PATH {bins}")
    assert shell.execute_line("tool") == 9


def test_alias_to_external_command(tmp_path, capfd, make_executable):
    make_executable(tmp_path, "show", 'echo "$@"')
    shell = make_shell(str(tmp_path))
    shell.execute_line("alias sh1='show -l'")
    shell.execute_line("sh1 /tmp")
    out, _ = capfd.readouterr()
    assert out == "-l /tmp\n"


def test_status_variables(shell):
    shell.execute_line("setenv A")
    assert shell.prepare(["$?"]) == ["2"]
    assert shell.prepare(["$$"]) == [str(shell.session.pid)]


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("setenv A 1 ; setenv B 2", {"A": "1", "B": "2"}),
        ("setenv A ; setenv B 2", {"B": "2"}),
        ("setenv A 1 && setenv B 2", {"A": "1", "B": "2"}),
        ("setenv A && setenv B 2", {}),
        ("setenv A 1 || setenv B 2", {"A": "1"}),
        ("setenv A || setenv B 2", {"B": "2"}),
        ("setenv A && setenv B 1 || setenv C 1", {"C": "1"}),
    ],
)
def test_command_list_operators(shell, line, expected):
    shell.execute_line(line)
    assert {name: shell.env.get(name) for name in "ABC" if name in shell.env} == expected


def test_syntax_error_abandons_line(shell):
    assert shell.execute_line("setenv A 1 ;; setenv B 2") == 2
    assert "A" not in shell.env
    assert shell.stderr.getvalue() == 'minish: 1: Syntax error: ";;" unexpected\n'


def test_blank_and_comment_lines_keep_status(shell):
    shell.execute_line("setenv A")
    assert shell.execute_line("   ") == 2
    assert shell.execute_line("# nothing") == 2


def test_line_numbers_count_every_line(shell):
    shell.exec("setenv A 1\n\nnope")
    assert shell.stderr.getvalue() == "minish: 3: nope: not found\n"


def test_unexpected_builtin_failure(shell, monkeypatch):
    def broken(*args):
        raise RuntimeError("boom")

    monkeypatch.setattr(shell.env, "lines", broken)
    assert shell.execute_line("env") == 1
    assert shell.stderr.getvalue() == "minish: 1: env failed: boom\n"


def test_run_stream_and_script(tmp_path, shell):
    script = tmp_path / "script.sh"
    script.write_text("setenv A 1\nexit 5\nsetenv B 2\n")
    assert shell.run_script(str(script)) == 5
    assert "B" not in shell.env

    assert shell.run_stream(io.StringIO("setenv C 3\nnope\n")) == 127
    assert shell.env.get("C") == "3"


def test_run_script_unreadable(tmp_path, shell):
    missing = tmp_path / "missing.sh"
    assert shell.run_script(str(missing)) == 127
    assert shell.stderr.getvalue() == f"minish: 0: Can't open {missing}\n"


def test_nul_byte_in_command_word_is_not_found(shell):
    assert shell.execute_line("ab\0cd") == 127
    assert shell.stderr.getvalue() == "minish: 1: ab\0cd: not found\n"
    assert shell.execute_line("setenv A 1") == 0
    assert shell.env.get("A") == "1"


def test_nul_byte_in_slash_command_is_not_found(shell, tmp_path):
    assert shell.execute_line(f"{tmp_path}/x\0y") == 127
    assert shell.execute_line("setenv A 1") == 0


def test_nul_byte_in_argument_fails_exec(tmp_path, make_executable):
    make_executable(tmp_path, "tool", "exit 0")
    shell = make_shell(str(tmp_path))
    assert shell.execute_line("tool a\0b") == 126
    assert shell.stderr.getvalue().startswith("minish: 1: tool: ")
    assert shell.execute_line("tool") == 0


def test_nul_byte_in_cd_target(shell):
    assert shell.execute_line("cd a\0b") == 2
    assert shell.stderr.getvalue() == "minish: 1: cd: can't cd to a\0b\n"


def test_empty_command_word_keeps_command_field(shell):
    assert shell.execute_line("$UNSET_COMMAND_WORD arg") == 127
    assert shell.stderr.getvalue() == "minish: 1: : not found\n"
