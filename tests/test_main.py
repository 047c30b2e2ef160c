import io
import os

import pytest

from tabshell.commands import Command, default_registry
from tabshell.completion import CommandCompleter
from tabshell.line_editor import LineEditor
from tabshell.main import run


class FailingCommand(Command):
    def execute(self, args, stdout=None, stderr=None):
        raise RuntimeError("boom")


def run_shell(scripted, data, registry=None):
    out, err = io.StringIO(), io.StringIO()
    editor = LineEditor(scripted(data), out, completer=CommandCompleter(lookup=lambda prefix: []))
    run(editor, registry or default_registry(), stdout=out, stderr=err)
    return out.getvalue(), err.getvalue()


def test_prompt_echo_and_output(scripted):
    out, err = run_shell(scripted, "echo 'a  b' c\n")
    assert out == "$ echo 'a  b' c\na  b c\n$ "
    assert err == ""


def test_exit_zero_stops_loop(scripted):
    out, _ = run_shell(scripted, "exit 0\necho never\n")
    assert out == "$ exit 0\n"


def test_exit_with_code_raises(scripted):
    with pytest.raises(SystemExit) as e:
        run_shell(scripted, "exit 2\n")
    assert e.value.code == 2


def test_blank_lines_reprompt(scripted):
    out, _ = run_shell(scripted, "\n   \n")
    assert out == "$ \n$    \n$ "


def test_unknown_command_keeps_looping(scripted, monkeypatch):
    monkeypatch.setenv("PATH", "")
    out, err = run_shell(scripted, "nope\necho ok\n")
    assert err == "nope: command not found\n"
    assert out.endswith("ok\n$ ")


def test_command_errors_do_not_stop_loop(scripted):
    registry = default_registry()
    registry.register("fail", FailingCommand())
    out, err = run_shell(scripted, "fail\necho after\n", registry)
    assert err == "Error: boom\n"
    assert "after\n" in out


def test_undecodable_executable_does_not_stop_loop(scripted, monkeypatch, tmp_path):
    raw = os.path.join(os.fsencode(str(tmp_path)), b"zq\xff")
    with open(raw, "wb") as f:
        f.write(b"#!/bin/sh\n")
    os.chmod(raw, 0o755)
    monkeypatch.setenv("PATH", str(tmp_path))

    out = io.TextIOWrapper(io.BytesIO(), encoding="utf-8")
    err = io.StringIO()
    editor = LineEditor(scripted("zq\t\necho after\n"), out)
    run(editor, default_registry(), stdout=out, stderr=err)
    out.flush()
    text = out.buffer.getvalue().decode("utf-8")
    assert "$ zq\a\n" in text
    assert "after\n" in text
