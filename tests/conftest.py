"""
Pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path

import pytest

# Add the repository root to the path
sys.path.insert(0, str(Path(__file__).parent.parent))

from buildgraph.automation.build_graph_inspector import BuildGraphInspector


@pytest.fixture
def project_path():
    return Path("/workspace/App")


@pytest.fixture
def inspector():
    return BuildGraphInspector()
