"""Composer invocation: locate the executable and build the install pipeline."""

import os

INSTALL_COMMANDS = [
    "install --no-scripts",
    "run-script post-root-package-install",
    "run-script post-create-project-cmd",
    "run-script post-autoload-dump",
]


def find_composer(cwd, php_binary, composer_phar="composer.phar"):
    """Get the composer command for the environment.

    A composer.phar in *cwd* wins over a composer on PATH.
    """
    composer_path = os.path.join(cwd, composer_phar)
    if os.path.isfile(composer_path):
        return f'"{php_binary}" {composer_path}'
    return "composer"


def build_install_commands(composer, no_ansi=False, quiet=False):
    """Build the install and lifecycle hook commands, in execution order."""
    commands = [f"{composer} {command}" for command in INSTALL_COMMANDS]
    if no_ansi:
        commands = [f"{command} --no-ansi" for command in commands]
    if quiet:
        commands = [f"{command} --quiet" for command in commands]
    return commands


def join_commands(commands):
    """Chain *commands* so the first failure stops the rest."""
    return " && ".join(commands)
