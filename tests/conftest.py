import os
import sys

import pytest

# Ensure tests can import the top-level modules when pytest changes CWD.
REPO_ROOT = os.path.dirname(os.path.dirname(__file__))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)


@pytest.fixture
def function_source() -> str:
    return "fn foo_bar(a, b) { ret a + b; }"
