import os


def search_path(path=None):
    """Return the directories listed in PATH, in order."""
    if path is None:
        path = os.getenv("PATH", "")
    return [directory for directory in path.split(os.pathsep) if directory]


def is_executable_file(full_path):
    return os.path.isfile(full_path) and os.access(full_path, os.X_OK)


def is_printable_name(name):
    # Undecodable bytes come back from the filesystem as lone surrogates.
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def find_executable(command_name, path=None):
    """Search for an executable in the system PATH."""
    for directory in search_path(path):
        full_path = os.path.join(directory, command_name)
        if is_executable_file(full_path):
            return full_path
    return None


def executables_with_prefix(prefix, path=None):
    """Retrieve the sorted names of executables in PATH starting with prefix."""
    executables = set()
    for directory in search_path(path):
        try:
            with os.scandir(directory) as entries:
                for entry in entries:
                    if not entry.name.startswith(prefix) or not is_printable_name(entry.name):
                        continue
                    if entry.is_file() and os.access(entry.path, os.X_OK):
                        executables.add(entry.name)
        except OSError:
            continue  # Ignore directories we can't open
    return sorted(executables)
