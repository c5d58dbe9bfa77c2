"""Top-level Click group for the magento CLI."""

import click

from magento_installer.new_cmd.cli import new_cmd


@click.group()
@click.version_option(package_name="magento-installer", prog_name="Magento Installer")
@click.option("--quiet", "-q", is_flag=True, help="Do not output any message")
@click.option("--no-ansi", "no_ansi", is_flag=True, help="Disable ANSI output")
@click.pass_context
def main(ctx, quiet, no_ansi):
    """magento - Magento application installer."""
    ctx.ensure_object(dict)
    ctx.obj["quiet"] = quiet
    ctx.obj["no_ansi"] = no_ansi
    if no_ansi:
        ctx.color = False


main.add_command(new_cmd)
