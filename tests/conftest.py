import pytest

from glslport import DiagnosticCollector, Preprocessor


@pytest.fixture
def collector():
    return DiagnosticCollector()


@pytest.fixture
def preprocessor():
    return Preprocessor()
