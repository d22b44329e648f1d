import hashlib
import logging
import shutil
from pathlib import Path
from urllib.parse import unquote, urlparse

import requests
from google.auth import exceptions as auth_exceptions
from google.cloud import exceptions as gcs_exceptions
from google.cloud import storage

from funcotator_datasources.errors import (
    ConfigurationError,
    IntegrityError,
    NotSupportedError,
    ReadError,
    TransferError,
)
from funcotator_datasources.tools.catalogue import GERMLINE, SOMATIC

logger = logging.getLogger(__name__)

CHUNK_SIZE = 8192
REQUEST_TIMEOUT = 60

TRANSFER_ERRORS = (requests.RequestException, gcs_exceptions.GoogleCloudError, OSError, ValueError)


def sha256sum(file_path):
    h = hashlib.sha256()
    with open(file_path, 'rb') as f:
        for chunk in iter(lambda: f.read(CHUNK_SIZE), b''):
            h.update(chunk)
    return h.hexdigest()


def split_gcs_path(remote):
    """Split gs://bucket/key into (bucket, key)."""
    parsed = urlparse(remote)
    return parsed.netloc, parsed.path.lstrip('/')


def gcs_client():
    """Storage client with default credentials, or an anonymous one for public buckets."""
    try:
        return storage.Client()
    except auth_exceptions.DefaultCredentialsError:
        logger.debug('No Google Cloud credentials found, using an anonymous storage client')
        return storage.Client.create_anonymous_client()


def local_name(remote):
    """Final path segment of a remote location."""
    path = urlparse(remote).path if '://' in remote else remote
    name = Path(unquote(path)).name
    if not name:
        raise ValueError(f'No file name in remote location: {remote}')
    return name


def copy_remote(source, dest):
    """
    Fetch the whole object at ``source`` into the local file ``dest``.

    gs:// objects are read with the Cloud Storage client, http:// and https://
    locations are streamed with requests, and file:// URLs and bare paths are
    copied from the local filesystem. An existing ``dest`` is overwritten.
    """
    scheme = urlparse(source).scheme
    if scheme == 'gs':
        bucket_name, key = split_gcs_path(source)
        blob = gcs_client().bucket(bucket_name).blob(key)
        blob.download_to_filename(str(dest))
    elif scheme in ('http', 'https'):
        logger.debug(f'GET {source}')
        with requests.get(source, stream=True, timeout=REQUEST_TIMEOUT) as response:
            response.raise_for_status()
            with open(dest, 'wb') as f:
                for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                    f.write(chunk)
    elif scheme == 'file':
        shutil.copyfile(unquote(urlparse(source).path), dest)
    elif scheme and len(scheme) > 1:
        raise ValueError(f'Unsupported location scheme: {scheme}')
    else:
        shutil.copyfile(source, dest)
    return Path(dest)


class DataSourceFetcher:
    """Downloads a category's pre-packaged data sources into ``dest_dir``."""

    def __init__(self, catalogue, dest_dir=None):
        self.catalogue = catalogue
        self.dest_dir = Path(dest_dir) if dest_dir is not None else None

    def local_path(self, remote):
        dest_dir = self.dest_dir if self.dest_dir is not None else Path.cwd()
        try:
            return dest_dir / local_name(remote)
        except ValueError as e:
            raise TransferError(f'Could not resolve a local file name for: {remote}', remote) from e

    @staticmethod
    def check_selection(somatic, germline):
        if not somatic and not germline:
            raise ConfigurationError('Must select either somatic or germline datasources.')
        if somatic and germline:
            raise ConfigurationError('Somatic and germline datasources are mutually exclusive; select only one.')

    def fetch(self, somatic=False, germline=False, validate_integrity=False):
        self.check_selection(somatic, germline)

        category = SOMATIC if somatic else GERMLINE
        logger.info(f'{category.capitalize()} data sources selected.')
        return self._fetch_category(category, validate_integrity)

    def _fetch_category(self, category, validate_integrity):
        reference = self.catalogue.get(category)
        if reference is None:
            raise NotSupportedError(f'{category.capitalize()} data sources are not yet supported.')

        archive = self.download(reference.archive_url)

        if validate_integrity:
            logger.info('Integrity validation selected.')
            self.validate_integrity(archive, reference.checksum_url)
        return archive

    def download(self, remote):
        dest = self.local_path(remote)
        try:
            logger.info(f'Initiating download of datasources from {remote} to {dest}')
            logger.info('Please wait.  This will take a while...')
            copy_remote(remote, dest)
            logger.info('Download Complete!')
        except TRANSFER_ERRORS as e:
            raise TransferError(f'Could not copy data sources file: {remote} -> {dest}', remote, dest) from e
        return dest

    def validate_integrity(self, local_archive, remote_checksum):
        local_checksum = self.local_path(remote_checksum)
        try:
            logger.info('Retrieving expected checksum file...')
            copy_remote(remote_checksum, local_checksum)
            logger.info('File transfer complete!')
        except TRANSFER_ERRORS as e:
            raise TransferError(
                f'Could not copy sha256 sum from server: {remote_checksum} -> {local_checksum}',
                remote_checksum,
                local_checksum,
            ) from e

        # compared verbatim, a trailing newline in the checksum file is a mismatch
        try:
            logger.info('Collecting expected checksum...')
            with open(local_checksum, newline='') as f:
                expected = f.read()
            logger.info('Collection complete!')
        except (OSError, UnicodeDecodeError) as e:
            raise ReadError(f'Could not read in sha256sum from file: {local_checksum}', local_checksum) from e

        try:
            logger.info('Calculating sha256sum...')
            actual = sha256sum(local_archive)
            logger.info('Calculation complete!')
        except OSError as e:
            raise ReadError(
                f'Could not read downloaded data sources file to calculate hash: {local_archive}', local_archive
            ) from e

        if expected != actual:
            raise IntegrityError(
                f'Downloaded data sources are corrupt!  Unexpected checksum: {actual} != {expected}',
                expected,
                actual,
            )
        logger.info('Data sources are valid.')
        return actual
