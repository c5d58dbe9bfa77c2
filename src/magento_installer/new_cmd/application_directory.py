"""Filesystem steps around the application directory."""

import os

from magento_installer.errors import AlreadyExistsError

WRITABLE_DIRECTORIES = ("pub/static", "generated", "var")
WRITABLE_WARNING = (
    'You should verify that the "var", "pub/static" & "generated" '
    "directories are writable."
)


def verify_application_doesnt_exist(directory, cwd):
    """Raise AlreadyExistsError if *directory* exists and is not *cwd*."""
    target = os.path.abspath(os.path.join(cwd, directory))
    if os.path.lexists(target) and target != os.path.abspath(cwd):
        raise AlreadyExistsError(
            "Magento Application already exists!",
            context={"directory": target},
        )


def _raise_walk_error(error):
    raise error


def _chmod_recursive(path, mode):
    if not os.path.isdir(path):
        raise FileNotFoundError(f"Directory not found: {path}")
    os.chmod(path, mode)
    for root, dirs, files in os.walk(path, onerror=_raise_walk_error):
        for name in dirs + files:
            entry = os.path.join(root, name)
            if not os.path.islink(entry):
                os.chmod(entry, mode)


def prepare_writable_directories(app_directory, mode, warn):
    """Apply *mode* recursively to the directories Magento writes into.

    Failures are reported once through *warn* and never raised.

    Returns:
        List of relative directories that could not be updated
    """
    failed = []
    for relative in WRITABLE_DIRECTORIES:
        try:
            _chmod_recursive(os.path.join(app_directory, relative), mode)
        except OSError:
            failed.append(relative)
    if failed:
        warn(WRITABLE_WARNING)
    return failed


def clean_up(archive_file, warn):
    """Remove the temporary archive. Never raises.

    Returns:
        True if the archive is gone afterwards
    """
    try:
        os.chmod(archive_file, 0o777)
    except OSError:
        pass
    try:
        os.unlink(archive_file)
    except FileNotFoundError:
        return True
    except OSError as e:
        warn(f"Could not remove temporary archive {archive_file}: {e}")
        return False
    return True
