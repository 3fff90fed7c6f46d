# Headless Qt for dialog tests. Provides a fallback 'qtbot' fixture when
# pytest-qt is not installed; if pytest-qt is present its fixture wins.

import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from langprefs.services.service_locator import services  # noqa: E402

try:
    import pytestqt  # type: ignore  # noqa: F401
except ImportError:  # pragma: no cover
    try:
        from PyQt6.QtWidgets import QApplication
    except ImportError:  # pragma: no cover
        QApplication = None  # type: ignore

    @pytest.fixture
    def qtbot():  # type: ignore
        if QApplication is None:
            pytest.skip("PyQt6 not available")
        QApplication.instance() or QApplication(sys.argv)
        widgets = []

        class Bot:
            def addWidget(self, w):  # mimic pytest-qt API subset
                widgets.append(w)

        yield Bot()
        for w in widgets:
            w.close()


@pytest.fixture(autouse=True)
def _isolate_services():
    """Keep registrations made by one test out of the next."""
    before = set(services.list_keys())
    yield
    for key in set(services.list_keys()) - before:
        services.unregister(key)


@pytest.fixture
def letters():
    from langprefs.editing.selection_reorder import Row

    return tuple(Row(c, c.lower()) for c in "ABCDE")
