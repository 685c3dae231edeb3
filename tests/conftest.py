"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

import numpy as np

from histostore import storage_adaptor
from histostore.config import reset_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    """Reload settings around every test so configure() does not leak."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def dense_cls():
    return storage_adaptor(list, float)


@pytest.fixture
def sparse_cls():
    return storage_adaptor(dict[int, float])


@pytest.fixture
def array_cls():
    return storage_adaptor(np.ndarray, float)


@pytest.fixture(params=[list, dict, np.ndarray], ids=["vector", "map", "array"])
def storage_cls(request):
    """Float storage class for each container category."""
    return storage_adaptor(request.param, float)
