from __future__ import annotations

from pathlib import Path

import pytest

from sqlchain import QueryFactory

here = Path(__file__).parent
root_path = here.parent


@pytest.fixture
def sql() -> QueryFactory:
    """A factory with its own pool, so tests never share recycled queries."""
    return QueryFactory()
