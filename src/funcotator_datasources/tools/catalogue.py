import configparser
from importlib import resources
from typing import Dict, NamedTuple, Optional

SOMATIC = 'somatic'
GERMLINE = 'germline'
CATEGORIES = (SOMATIC, GERMLINE)

DEFAULT_CATALOGUE = 'default.ini'


class DataSourceReference(NamedTuple):
    category: str
    archive_url: str
    checksum_url: str


Catalogue = Dict[str, Optional[DataSourceReference]]


def parse_catalogue(text: str) -> Catalogue:
    """
    Build a catalogue from ini text.

    Each section names a category. A section with both ``archive`` and
    ``checksum`` keys becomes a DataSourceReference; an empty section declares
    the category without a downloadable archive and maps to None.
    """
    parser = configparser.ConfigParser()
    parser.read_string(text)

    catalogue = {}
    for category in parser.sections():
        section = parser[category]
        archive = section.get('archive', '').strip()
        checksum = section.get('checksum', '').strip()
        if not archive and not checksum:
            catalogue[category] = None
            continue
        if not archive or not checksum:
            raise ValueError(f"Catalogue entry '{category}' needs both 'archive' and 'checksum'")
        catalogue[category] = DataSourceReference(category, archive, checksum)
    return catalogue


def load_default_catalogue() -> Catalogue:
    text = resources.files('funcotator_datasources.data').joinpath(DEFAULT_CATALOGUE).read_text(encoding='utf-8')
    return parse_catalogue(text)
