"""User-facing output of the new command, written through click."""

import click


class InstallerOutput:
    """Writes progress, relayed process output and status lines.

    quiet drops informational lines and progress; warnings and relayed
    process output are always written. no_ansi disables colour.
    """

    def __init__(self, quiet=False, no_ansi=False):
        self.quiet = quiet
        self.no_ansi = no_ansi

    @property
    def _color(self):
        return False if self.no_ansi else None

    def write(self, text):
        click.echo(text, nl=False, color=self._color)

    def info(self, message):
        if not self.quiet:
            click.secho(message, fg="green", color=self._color)

    def comment(self, message):
        if not self.quiet:
            click.secho(message, fg="yellow", color=self._color)

    def warn(self, message):
        click.secho(message, fg="yellow", color=self._color)

    def progress(self, text):
        if not self.quiet:
            self.write(text)
