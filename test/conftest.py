import logging

import pytest

from finitetop.logger import topo_logger


def pytest_configure(config):
    """Set up test environment before tests run."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    config.addinivalue_line("markers", "slow: enumeration over n >= 5")


@pytest.fixture(autouse=True)
def quiet_topo_logger():
    """Keep the shared algorithm logger disabled and empty between tests."""
    topo_logger.disabled = True
    topo_logger.echo = True
    topo_logger.clear()
    yield
    topo_logger.disabled = True
    topo_logger.echo = True
    topo_logger.clear()
