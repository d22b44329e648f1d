import logging
import sys

import click

from funcotator_datasources.errors import DataSourceError
from funcotator_datasources.tools.catalogue import load_default_catalogue
from funcotator_datasources.tools.common import report_error
from funcotator_datasources.tools.downloader import DataSourceFetcher

logger = logging.getLogger(__name__)


@click.command()
@click.option('--somatic', is_flag=True,
              help='Download the latest pre-packaged datasources for somatic functional annotation.')
@click.option('--germline', is_flag=True,
              help='Download the latest pre-packaged datasources for germline functional annotation.')
@click.option('--validate-integrity', is_flag=True,
              help='Validate the integrity of the data sources after downloading them using sha256.')
def download(somatic, germline, validate_integrity):
    """
    Download the pre-packaged data sources for the somatic or germline use case
    into the current directory.
    """
    if somatic and germline:
        raise click.UsageError('--somatic and --germline are mutually exclusive.')

    fetcher = DataSourceFetcher(load_default_catalogue())
    try:
        fetcher.fetch(somatic=somatic, germline=germline, validate_integrity=validate_integrity)
    except DataSourceError as e:
        report_error(str(e), logger)
        if e.__cause__ is not None:
            logger.debug(f'Caused by: {e.__cause__!r}')
        sys.exit(1)
