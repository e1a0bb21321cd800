import pytest

from niosfs import FilesystemWrapper, FakeDirectory, FakeFile

# Sample tree under the basic root: path -> file metadata
filesystem = {
    # Regular files in on-device storage
    "local/README.md": {"tags": ["docs"]},
    "local/config.json": {"uti": "public.json"},
    "local/.gitignore": {},
    "local/requirements.txt": {"xattrs": {"com.apple.quarantine": "0081;00000000"}},

    # Script sources
    "local/scripts/main.js": {"tags": ["script", "entry"]},
    "local/scripts/utils.js": {"tags": ["script"]},
    "local/scripts/lib/date.js": {},

    # Cloud storage with various file types
    "iCloud/photos/photo1.jpg": {"tags": ["Red"]},
    "iCloud/photos/photo2.png": {"tags": ["Red", "Blue"]},
    "iCloud/photos/thumbnails/thumb1.jpg": {},
    "iCloud/docs/notes.txt": {"xattrs": {"author": "me", "lang": "en"}},
    "iCloud/docs/notes.md": {},

    # Edge cases
    "iCloud/special/file@2024.txt": {},
    "iCloud/special/multiple.dots.in.name.txt": {},
    "iCloud/special/Makefile": {},
    "iCloud/a/b/c/d/e/deep_file.txt": {},
}


def _split_filename(filename):
    name, _, ext = filename.rpartition('.')
    return (name, ext) if name else (filename, '')


def _dir_at(root, parts):
    d = root
    for part in parts:
        d = next((s for s in d.subdirectories if s.name == part), None) or d.add_subdirectory(FakeDirectory(part))
    return d


def build_filesystem(tree):
    fs = FilesystemWrapper.basic_filesystem()
    for path, meta in tree.items():
        *parts, filename = path.split('/')
        f = FakeFile(*_split_filename(filename))
        for tag in meta.get('tags', []): f.add_tag(tag)
        for k, v in meta.get('xattrs', {}).items(): f.write_extended_attribute(v, k)
        if 'uti' in meta: f._uti = meta['uti']  # no public setter
        _dir_at(fs.root, parts).add_file(f)
    return fs


@pytest.fixture
def sample_fs():
    return build_filesystem(filesystem)
