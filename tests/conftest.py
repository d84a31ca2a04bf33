import pytest

from matrixcalc.model.matrix import Matrix
from matrixcalc.model.state import Session


@pytest.fixture(scope="session")
def qt_core_app():
    from PySide6.QtCore import QCoreApplication

    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


@pytest.fixture
def session() -> Session:
    return Session()


@pytest.fixture
def identity() -> Matrix:
    return Matrix.from_rows([[1.0, 0.0], [0.0, 1.0]])
