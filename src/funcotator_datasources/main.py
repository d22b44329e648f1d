import click

from funcotator_datasources import __version__
from funcotator_datasources.commands.download import download
from funcotator_datasources.tools.common import setup_logger


@click.group()
@click.version_option(__version__)
@click.option('--verbose', is_flag=True, help='Enable debug logging')
@click.option('--log-file', default=None, type=click.Path(dir_okay=False), help='Also write the log to this file')
def cli(verbose, log_file):
    """Data source downloader for Funcotator."""
    setup_logger(log_file, verbose)


cli.add_command(download)

if __name__ == '__main__':
    cli()
