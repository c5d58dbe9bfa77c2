"""Unpack the application archive and move it to the requested directory."""

import os
import shutil
import tarfile

from magento_installer.errors import ExtractionError


def archive_basename(members):
    """Return the single top-level directory name shared by all *members*.

    Raises:
        ExtractionError: If the archive is empty or has several top-level entries
    """
    roots = set()
    for member in members:
        name = member.name
        while name.startswith("./"):
            name = name[2:]
        name = name.lstrip("/")
        if not name or name == ".":
            continue
        roots.add(name.split("/", 1)[0])
    if len(roots) != 1:
        raise ExtractionError(
            f"Expected a single top-level directory in the archive, found {len(roots)}",
            context={"roots": sorted(roots)},
        )
    return roots.pop()


def _extract_all(archive, destination):
    if hasattr(tarfile, "data_filter"):
        archive.extractall(destination, filter="data")
    else:
        archive.extractall(destination)


def extract(archive_file, directory, cwd):
    """Extract *archive_file* into *cwd* and rename its root to *directory*.

    When *directory* is *cwd* itself, the extracted files are moved into
    *cwd* and the extracted root is removed.

    Returns:
        Absolute path of the application directory

    Raises:
        ExtractionError: On a malformed archive or a conflicting target
    """
    try:
        with tarfile.open(archive_file, "r:*") as archive:
            basename = archive_basename(archive.getmembers())
            _extract_all(archive, cwd)
    except (tarfile.TarError, OSError, EOFError) as e:
        raise ExtractionError(
            f"Could not extract {archive_file}: {e}",
            context={"archive": archive_file},
        ) from e

    extracted = os.path.join(cwd, basename)
    target = os.path.abspath(os.path.join(cwd, directory))

    if target == os.path.abspath(cwd):
        _merge_into(extracted, target)
        return target

    if os.path.abspath(extracted) == target:
        return target

    if os.path.exists(target):
        raise ExtractionError(
            f"Cannot move {basename} to {directory}: target already exists",
            context={"source": extracted, "target": target},
        )
    try:
        os.rename(extracted, target)
    except OSError as e:
        raise ExtractionError(
            f"Cannot move {basename} to {directory}: {e}",
            context={"source": extracted, "target": target},
        ) from e
    return target


def _merge_into(extracted, target):
    """Move every entry of *extracted* into *target*, then drop *extracted*."""
    for entry in os.listdir(extracted):
        destination = os.path.join(target, entry)
        if os.path.lexists(destination):
            raise ExtractionError(
                f"Cannot move {entry} into {target}: already exists",
                context={"source": extracted, "target": target},
            )
        try:
            shutil.move(os.path.join(extracted, entry), destination)
        except OSError as e:
            raise ExtractionError(f"Cannot move {entry} into {target}: {e}") from e
    try:
        os.rmdir(extracted)
    except OSError as e:
        raise ExtractionError(f"Cannot remove {extracted}: {e}") from e
