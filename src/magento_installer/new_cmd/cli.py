"""Click command for creating a new Magento application."""

import os
import sys

import click

from magento_installer.errors import InstallerError
from magento_installer.new_cmd.archive_downloader import ArchiveDownloader
from magento_installer.new_cmd.installer_config import load_installer_config
from magento_installer.new_cmd.installer_output import InstallerOutput
from magento_installer.new_cmd.process_runner import ProcessRunner
from magento_installer.new_cmd.scaffold_opts import ScaffoldRequest
from magento_installer.new_cmd.scaffolder import Scaffolder


@click.command("new")
@click.argument("name")
@click.argument("version", required=False, default="")
@click.option("--sample-data", "-s", "sample_data", is_flag=True,
              help="Installs the Magento with sample data")
@click.option("--force", "-f", is_flag=True,
              help="Forces install even if the directory already exists")
@click.pass_context
def new_cmd(ctx, name, version, sample_data, force):
    """Create a new Magento application."""
    global_opts = ctx.obj or {}
    try:
        request = ScaffoldRequest(
            name=name,
            version=version,
            force=force,
            sample_data=sample_data,
            quiet=global_opts.get("quiet", False),
            no_ansi=global_opts.get("no_ansi", False),
        )
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="NAME") from exc

    output = InstallerOutput(quiet=request.quiet, no_ansi=request.no_ansi)
    scaffolder = Scaffolder(
        config=load_installer_config(),
        downloader=ArchiveDownloader(),
        process_runner=ProcessRunner(),
        output=output,
        cwd=os.getcwd(),
    )
    try:
        exit_code = scaffolder.run(request)
    except InstallerError as exc:
        click.echo(str(exc), err=True)
        sys.exit(1)
    sys.exit(exit_code)
