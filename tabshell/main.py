import sys

from tabshell.commands import default_registry
from tabshell.completion import CommandCompleter
from tabshell.line_editor import LineEditor
from tabshell.terminal import RawMode, TerminalByteSource
from tabshell.tokenizer import tokenize

PROMPT = "$ "


def run(editor, registry, stdout=sys.stdout, stderr=sys.stderr):
    """Read, tokenize and dispatch lines until exit or end of input."""
    while True:
        stdout.write(PROMPT)
        stdout.flush()
        try:
            command_input = editor.read_line()
        except EOFError:
            break

        if command_input == "exit 0":
            break

        parts = tokenize(command_input)
        if not parts:
            continue

        try:
            registry.dispatch(parts, stdout=stdout, stderr=stderr)
        except Exception as e:
            print(f"Error: {e}", file=stderr)


# Main Shell Loop
def main():
    registry = default_registry()
    editor = LineEditor(
        TerminalByteSource(sys.stdin.fileno()),
        sys.stdout,
        completer=CommandCompleter(prompt=PROMPT),
        raw_mode=RawMode(sys.stdin.fileno()),
    )
    run(editor, registry)


if __name__ == "__main__":
    main()
