import pytest
from dependency_injector import containers

from lazyinject import default_context


@pytest.fixture(autouse=True)
def store():
    """Give every test its own active container so registrations never leak."""
    with default_context.using(containers.DynamicContainer()) as fresh:
        yield fresh
