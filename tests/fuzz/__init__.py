"""Intensive property tests for twlocale.

Every module here sets ``pytestmark = pytest.mark.fuzz`` and is skipped
unless selected with ``pytest -m fuzz``.

Python 3.13+.
"""
