"""Exceptions raised while building a fake filesystem or running an environment."""


class FakeFilesystemError(Exception):
    """Base class for every niosfs error"""
    def __init__(self, message):
        super().__init__(message)
        self.message = message


class DuplicateEntryError(FakeFilesystemError, ValueError):
    """A sibling with the same key already exists in the directory.

    Files collide on `(name, extension)`, directories on `name`.
    """
    def __init__(self, name, kind='file'):
        super().__init__(f"A {kind} with the name '{name}' already exists.")
        self.name = name
        self.kind = kind


class InvalidPathError(FakeFilesystemError, ValueError):
    """Path produced no segments to build directories from"""
    def __init__(self, path):
        super().__init__(f"Invalid path: {path!r}")
        self.path = path


class NoRunContextError(FakeFilesystemError):
    """Script config does not select any running context"""
    def __init__(self, message="No running environment was specified."):
        super().__init__(message)
