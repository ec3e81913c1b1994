"""Read the operations text out of a plain file or a compressed archive."""
from pathlib import Path
import tarfile
from typing import Callable, Dict, List, Optional
import zipfile

import py7zr


# Reads the first .txt member of an archive, None when there is no such member
MemberReader = Callable[[Path], Optional[bytes]]


def _first_txt(names: List[str]) -> Optional[str]:
    """Return the first name ending in .txt, in archive order."""
    return next((name for name in names if name.endswith(".txt")), None)


def _read_zip(path: Path) -> Optional[bytes]:
    with zipfile.ZipFile(path, "r") as zf:
        name = _first_txt([info.filename for info in zf.infolist() if not info.is_dir()])
        return None if name is None else zf.read(name)


def _read_tar_xz(path: Path) -> Optional[bytes]:
    with tarfile.open(path, "r:xz") as tf:
        members = {member.name: member for member in tf.getmembers() if member.isfile()}
        name = _first_txt(list(members))
        if name is None:
            return None
        # extractfile never writes to disk, so member paths need no sanitizing
        with tf.extractfile(members[name]) as member_file:
            return member_file.read()


def _read_7z(path: Path) -> Optional[bytes]:
    with py7zr.SevenZipFile(path, mode="r") as archive:
        name = _first_txt([info.filename for info in archive.list() if not info.is_directory])
        if name is None:
            return None
        return archive.read(targets=[name])[name].read()


# Archive formats keyed by their (possibly compound) extension
ARCHIVE_READERS: Dict[str, MemberReader] = {
    ".zip": _read_zip,
    ".tar.xz": _read_tar_xz,
    ".7z": _read_7z,
}


def archive_format(path: Path) -> Optional[str]:
    """
    Return the key of ARCHIVE_READERS matching the path, if any.

    Compound extensions are tried before single ones, so ``ops.tar.xz``
    is ``.tar.xz`` and not ``.xz``.
    """
    suffixes: str = "".join(path.suffixes[-2:]).lower()
    for extension in ARCHIVE_READERS:
        if suffixes.endswith(extension):
            return extension
    return None


def read_operations_text(path: Path) -> str:
    """
    Return the operations text held by ``path``.

    A ``.txt`` file is read as is. For an archive, the first ``.txt`` member
    is decoded as UTF-8 without extracting anything to disk.

    :param Path path: Plain text file or .zip, .tar.xz or .7z archive

    :return: Text of the operations file
    :rtype: str
    :raises ValueError: If the format is unsupported or the archive holds no .txt member
    """
    if path.suffix.lower() == ".txt":
        return path.read_text(encoding="utf-8")

    extension = archive_format(path)
    if extension is None:
        raise ValueError(f"📦❌ Unsupported input format: {''.join(path.suffixes) or path.name}")

    payload = ARCHIVE_READERS[extension](path)
    if payload is None:
        raise ValueError(f"📦❌ {path.name} contains no .txt member")
    return payload.decode("utf-8")
