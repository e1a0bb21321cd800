"""
niosfs - Fake filesystem and script environment for testing Scriptable-style scripts.

Example usage:

    from niosfs import Environment, ScriptArgs, ScriptConfig, FilesystemWrapper, FakeDirectory, FakeFile

    fs = FilesystemWrapper.basic_filesystem()
    docs = fs.root.subdirectories[0].add_subdirectory(FakeDirectory("docs"))
    note = FakeFile("note", "txt")
    note.add_tag("work")
    docs.add_file(note)

    env = Environment(ScriptArgs(), ScriptConfig(runs_in_app=True), fs)
    env.run(main)
"""

from .core import FakeFile, FakeDirectory, FilesystemWrapper
from .environment import Environment, ScriptArgs, ScriptConfig
from .errors import FakeFilesystemError, DuplicateEntryError, InvalidPathError, NoRunContextError

__all__ = ["Environment", "ScriptArgs", "ScriptConfig", "FilesystemWrapper", "FakeDirectory", "FakeFile",
           "FakeFilesystemError", "DuplicateEntryError", "InvalidPathError", "NoRunContextError"]
__version__ = "0.1.0"
