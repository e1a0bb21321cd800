import logging
from fnmatch import fnmatch
from fastcore.basics import patch
from fastcore.foundation import L

from .errors import DuplicateEntryError, InvalidPathError

logger = logging.getLogger(__name__)


class FakeFile:
    """A file made of metadata only: tags, extended attributes and a UTI"""
    def __init__(self, name, extension):
        self._name = name
        self._extension = extension
        self._tags = {}  # tag -> None, used as an insertion ordered set
        self._extattrs = {}  # attr name -> value
        self._uti = ''

    @property
    def name(self): return self._name

    @property
    def extension(self): return self._extension

    @property
    def filename(self):
        """Name and extension joined the way a real listing would show them"""
        return f"{self._name}.{self._extension}" if self._extension else self._name

    def add_tag(self, tag):
        """Add a tag (idempotent)"""
        self._tags.setdefault(tag)

    def remove_tag(self, tag):
        """Remove a tag (idempotent)"""
        self._tags.pop(tag, None)

    def all_tags(self):
        """Copy of the tags, in the order they were added"""
        return L(list(self._tags))

    def write_extended_attribute(self, value, name):
        """Set attribute `name` to `value`, replacing any previous value.

        Note the order: value first, then name.
        """
        self._extattrs[name] = value

    def read_extended_attribute(self, name):
        """Value of attribute `name`, or None if it was never written"""
        return self._extattrs.get(name)

    def all_extended_attributes(self):
        """Copy of the attribute names (values not included)"""
        return L(list(self._extattrs))

    def get_uti(self):
        """Uniform Type Identifier of the file, empty if unknown"""
        return self._uti


class FakeDirectory:
    """A directory holding fake files, subdirectories and bookmarks.

    Names are unique per kind among direct children: files on
    `(name, extension)`, subdirectories on `name`. A file and a
    subdirectory may share a name.
    """
    def __init__(self, name, files=None, bookmarks=None, subdirectories=None):
        self._name = name
        self._files = []
        self._subdirectories = []
        self._bookmarks = list(bookmarks or [])
        self.add_files(files or [])
        self.add_subdirectories(subdirectories or [])

    @property
    def name(self): return self._name

    @property
    def files(self): return self._files

    @property
    def subdirectories(self): return self._subdirectories

    @property
    def bookmarks(self): return self._bookmarks

    def add_file(self, file):
        """Append `file`, raising `DuplicateEntryError` if its name and extension are taken"""
        if any(f.name == file.name and f.extension == file.extension for f in self._files):
            logger.warning("Duplicate file %r in directory %r", file.filename, self._name)
            raise DuplicateEntryError(file.name, 'file')
        self._files.append(file)
        logger.debug("Added file %r to %r", file.filename, self._name)

    def add_files(self, files):
        """Add each file in order. Files added before a duplicate stay added."""
        for f in files: self.add_file(f)

    def add_subdirectory(self, directory):
        """Append `directory` and return it so children can be chained onto it"""
        if any(d.name == directory.name for d in self._subdirectories):
            logger.warning("Duplicate directory %r in directory %r", directory.name, self._name)
            raise DuplicateEntryError(directory.name, 'directory')
        self._subdirectories.append(directory)
        logger.debug("Added directory %r to %r", directory.name, self._name)
        return directory

    def add_subdirectories(self, dirs):
        """Add each directory in order. Directories added before a duplicate stay added."""
        for d in dirs: self.add_subdirectory(d)

    def list_contents(self):
        """Names of subdirectories, then names of files (without extension)"""
        return L([d.name for d in self._subdirectories] + [f.name for f in self._files])


class FilesystemWrapper:
    """Handle on the root of a fake filesystem"""
    def __init__(self, root):
        self._root = root

    @property
    def root(self): return self._root

    @classmethod
    def basic_filesystem(cls):
        """Filesystem with a `root` holding the `local` and `iCloud` storage folders"""
        root = FakeDirectory('root')
        root.add_subdirectory(FakeDirectory('local'))
        root.add_subdirectory(FakeDirectory('iCloud'))
        logger.debug("Built basic filesystem")
        return cls(root)

    @classmethod
    def directories_from_path(cls, path):
        """Basic filesystem root with one extra directory per `/`-separated segment of `path`.

        Segments become siblings directly under root, not a nested chain:
        `"a/b"` gives `root/a` and `root/b`. Returns the root directory.
        """
        tokens = path.split('/') if isinstance(path, str) else []
        if len(tokens) == 0: raise InvalidPathError(path)
        root = cls.basic_filesystem().root
        for token in tokens: root.add_subdirectory(FakeDirectory(token))
        logger.debug("Built filesystem from path %r", path)
        return root

    def __repr__(self): return f"FilesystemWrapper({self._root!r})"


@patch
def walk(self:FakeDirectory, path=None):
    """Depth-first `(path, directory)` pairs for this directory and everything below it"""
    path = self.name if path is None else f"{path}/{self.name}"
    yield path, self
    for d in self.subdirectories:
        yield from d.walk(path)

@patch
def find(self:FakeDirectory, pattern):
    """Files anywhere below this directory whose filename matches glob `pattern`"""
    return L(f for _, d in self.walk() for f in d.files if fnmatch(f.filename, pattern))

@patch
def show(self:FakeDirectory, indent=0):
    """Print the tree, directories before files"""
    print('    ' * indent + self.name)
    for d in self.subdirectories: d.show(indent+1)
    for f in self.files: print('    ' * (indent+1) + f.filename)

@patch
def __repr__(self:FakeDirectory):
    return f"FakeDirectory(📁 {self.name!r}, {len(self.subdirectories)} dirs, {len(self.files)} files)"

@patch
def __repr__(self:FakeFile):
    n_tags = len(self.all_tags())
    return f"FakeFile(📄 {self.filename!r}, 🏷️  {n_tags} tags)"
