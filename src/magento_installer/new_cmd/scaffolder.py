"""Scaffolder: download, unpack and install a new Magento application."""

import sys

from magento_installer.errors import UnsupportedRuntimeError
from magento_installer.new_cmd import application_directory
from magento_installer.new_cmd import archive_extractor
from magento_installer.new_cmd.archive_downloader import (
    ProgressPrinter,
    make_archive_filename,
)
from magento_installer.new_cmd.composer import (
    build_install_commands,
    find_composer,
    join_commands,
)

MINIMUM_PYTHON = (3, 10)
SUCCESS_MESSAGE = "Your Magento Application ready! Make your shop awesome."
POURING_MESSAGE = "Application's files are pouring..."


def verify_runtime(version_info=None):
    """Raise UnsupportedRuntimeError on interpreters older than MINIMUM_PYTHON."""
    if version_info is None:
        version_info = sys.version_info
    if tuple(version_info[:2]) < MINIMUM_PYTHON:
        required = ".".join(str(part) for part in MINIMUM_PYTHON)
        raise UnsupportedRuntimeError(
            f"The Magento installer requires Python {required} or greater. "
            'Please use "composer create-project ...." command instead.'
        )


class Scaffolder:
    """Runs the new-application workflow with injected collaborators.

    Steps run strictly in order and any fatal error aborts the rest:
    runtime check, existence check, download, extract, permission repair,
    cleanup, Composer install.
    """

    def __init__(self, config, downloader, process_runner, output, cwd, version_info=None):
        self.config = config
        self.downloader = downloader
        self.process_runner = process_runner
        self.output = output
        self.cwd = cwd
        self._version_info = version_info

    def run(self, request):
        """Scaffold the application described by *request*.

        Returns:
            Process exit code: 0, or the install chain's status in strict mode
        """
        verify_runtime(self._version_info)

        if not request.force:
            application_directory.verify_application_doesnt_exist(request.name, self.cwd)

        version = request.resolved_version(self.config.default_version)

        self.output.info(POURING_MESSAGE)

        archive_file = make_archive_filename(self.cwd)
        self.downloader.download(
            self.config.archive_url(version),
            archive_file,
            on_progress=ProgressPrinter(self.output.progress),
        )
        self.output.progress("\n")

        app_directory = archive_extractor.extract(archive_file, request.name, self.cwd)
        application_directory.prepare_writable_directories(
            app_directory, self.config.directory_mode, self.output.warn,
        )
        application_directory.clean_up(archive_file, self.output.warn)

        composer = find_composer(self.cwd, self.config.php_binary, self.config.composer_phar)
        commands = build_install_commands(
            composer, no_ansi=request.no_ansi, quiet=request.quiet,
        )

        result = self.process_runner.run(
            join_commands(commands),
            cwd=app_directory,
            output=self.output.write,
            warn=self.output.warn,
        )

        if result.successful:
            self.output.comment(SUCCESS_MESSAGE)
            return 0

        if self.config.fail_on_install_error:
            return result.returncode
        return 0
