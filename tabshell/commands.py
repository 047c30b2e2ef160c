import os
import subprocess
import sys
from abc import ABC, abstractmethod

from tabshell.executables import find_executable


class Command(ABC):
    """A shell builtin; it writes only to the streams it is handed."""

    @abstractmethod
    def execute(self, args, stdout=sys.stdout, stderr=sys.stderr):
        pass


class EchoCommand(Command):
    def execute(self, args, stdout=sys.stdout, stderr=sys.stderr):
        stdout.write(" ".join(args) + "\n")


class ExitCommand(Command):
    def execute(self, args, stdout=sys.stdout, stderr=sys.stderr):
        """Leaves the shell with the status given as the first argument."""
        status = 0
        if args:
            try:
                status = int(args[0])
            except ValueError:
                status = 0
        raise SystemExit(status)


class TypeCommand(Command):
    def __init__(self, registry):
        self.registry = registry

    def execute(self, args, stdout=sys.stdout, stderr=sys.stderr):
        """Reports whether a name is a builtin or where it lives on PATH."""
        if not args:
            print("type: missing argument", file=stderr)
            return

        name = args[0]
        if name in self.registry.commands:
            print(f"{name} is a shell builtin", file=stdout)
            return

        location = find_executable(name)
        if location is None:
            print(f"{name}: not found", file=stderr)
        else:
            print(f"{name} is {location}", file=stdout)


class PwdCommand(Command):
    def execute(self, args, stdout=sys.stdout, stderr=sys.stderr):
        stdout.write(os.getcwd() + "\n")


class CdCommand(Command):
    def execute(self, args, stdout=sys.stdout, stderr=sys.stderr):
        """Changes the current working directory."""
        if len(args) > 1:
            print("cd: too many arguments", file=stderr)
            return

        path_arg = args[0] if args else "~"
        target_directory = path_arg

        # Only `~` and `~/...` expand; `~user` forms are taken literally
        if path_arg == "~" or path_arg.startswith("~/"):
            home = os.getenv("HOME")
            if not home:
                print(f"cd: {path_arg}: No such file or directory", file=stderr)
                return
            target_directory = home + path_arg[1:]

        # Check if the directory exists and is accessible
        if os.path.isdir(target_directory):
            try:
                os.chdir(target_directory)
            except PermissionError:
                print(f"cd: {path_arg}: Permission denied", file=stderr)
        else:
            print(f"cd: {path_arg}: No such file or directory", file=stderr)


class CommandRegistry:
    def __init__(self):
        self.commands = {}

    def register(self, name, command):
        self.commands[name] = command

    def dispatch(self, parts, stdout=sys.stdout, stderr=sys.stderr):
        """Run a tokenized command line as a builtin or external program."""
        if not parts:
            return

        command_name = parts[0]
        args = parts[1:]

        if command_name in self.commands:
            self.commands[command_name].execute(args, stdout=stdout, stderr=stderr)
        else:
            self.run_external_command(command_name, args, stdout=stdout, stderr=stderr)

    def run_external_command(self, name, args, stdout=sys.stdout, stderr=sys.stderr):
        executable_path = find_executable(name)
        if executable_path is None and os.path.isfile(name):
            executable_path = name
        if executable_path is None:
            print(f"{name}: command not found", file=stderr)
            return

        # Python-level buffers must reach the terminal before the child writes.
        stdout.flush()
        stderr.flush()
        try:
            subprocess.run([name] + args, executable=executable_path, stdout=stdout, stderr=stderr)
        except OSError as e:
            print(f"Error running {name}: {e}", file=stderr)


def default_registry():
    registry = CommandRegistry()
    registry.register("echo", EchoCommand())
    registry.register("exit", ExitCommand())
    registry.register("type", TypeCommand(registry))
    registry.register("pwd", PwdCommand())
    registry.register("cd", CdCommand())
    return registry
