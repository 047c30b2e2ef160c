from collections import namedtuple

from tabshell.executables import executables_with_prefix

BELL = "\a"

CompletionState = namedtuple("CompletionState", ["last_token", "repeat_count"], defaults=("", 0))

CompletionResult = namedtuple("CompletionResult", ["line", "output", "state"])

EMPTY_STATE = CompletionState()


def split_first_token(line):
    """Split line at its first space or tab into (command, remainder)."""
    for index, char in enumerate(line):
        if char in (" ", "\t"):
            return line[:index], line[index:]
    return line, ""


def longest_common_prefix(words):
    """Find the longest common prefix of a list of words."""
    if not words:
        return ""
    prefix = words[0]
    for word in words[1:]:
        while not word.startswith(prefix):
            prefix = prefix[:-1]
            if not prefix:
                return ""
    return prefix


class CommandCompleter:
    """Completes the command name at the start of a line against PATH.

    The completer keeps no state of its own: the caller passes the
    CompletionState from the previous tab press and stores the one returned.
    """

    def __init__(self, lookup=executables_with_prefix, prompt="$ "):
        self.lookup = lookup
        self.prompt = prompt

    def complete(self, line, state=EMPTY_STATE):
        """Handle one tab press and return a CompletionResult."""
        first_token, remainder = split_first_token(line)

        if first_token == state.last_token:
            state = CompletionState(first_token, state.repeat_count + 1)
        else:
            state = CompletionState(first_token, 1)

        if not first_token:
            return CompletionResult(line, BELL, state)

        candidates = sorted(set(self.lookup(first_token)))
        if not candidates:
            return CompletionResult(line, BELL, EMPTY_STATE)

        common_prefix = longest_common_prefix(candidates)

        if len(common_prefix) > len(first_token):
            missing = common_prefix[len(first_token):]
            if len(candidates) == 1 and not remainder:
                missing += " "
                common_prefix += " "
            return CompletionResult(common_prefix + remainder, missing, EMPTY_STATE)

        if state.repeat_count == 1:
            return CompletionResult(line, BELL, state)

        listing = "\n" + "  ".join(candidates) + "\n" + self.prompt + line
        return CompletionResult(line, listing, EMPTY_STATE)
