import os
import sys

import pytest

# Add the lib directory to the path so the tests run from a source checkout
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'lib'))

import ttl2jsonld.convert as convert  # noqa: E402

DATA_DIR = os.path.join(os.path.abspath(os.path.dirname(__file__)), 'data')


def pytest_addoption(parser):
    parser.addoption(
        '--network', action='store_true', default=False,
        help='Run tests that need network access'
    )


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "network: marks tests as requiring network access (may be slow)"
    )


def pytest_collection_modifyitems(config, items):
    if config.getoption('network'):
        return
    skip_network = pytest.mark.skip(reason='needs --network to run')
    for item in items:
        if 'network' in item.keywords:
            item.add_marker(skip_network)


@pytest.fixture
def data_dir():
    return DATA_DIR


@pytest.fixture
def data_path():
    def path(name):
        return os.path.join(DATA_DIR, name)
    return path


@pytest.fixture
def offline_loader():
    """
    Installs a default document loader that fails on every URL, restoring
    the previous one afterwards.
    """
    calls = []

    def loader(url, options=None):
        calls.append(url)
        raise convert.ConversionError(
            'Offline.', 'ttl2jsonld.LoadDocumentError', {'url': url})

    loader.calls = calls
    previous = convert._default_document_loader
    convert.set_document_loader(loader)
    yield loader
    convert.set_document_loader(previous)
