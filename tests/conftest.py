"""Shared fixtures: a small documentation build and graphs over it."""

import copy
from typing import Any

import pytest

from docembed.doc_graph import DocGraph
from docembed.doc_type import RepoProfile
from docembed.load_docs import build_graph
from tests.sample_docs import DOCS_URL, REPO_URL, SAMPLE_DOCS


@pytest.fixture
def sample_docs() -> dict[str, Any]:
    """A fresh copy of the sample documentation build."""
    return copy.deepcopy(SAMPLE_DOCS)


@pytest.fixture
def graph(sample_docs: dict[str, Any]) -> DocGraph:
    """Graph using the scroll-to link convention, with a source repo."""
    return build_graph(sample_docs, base_docs_url=DOCS_URL, repo_url=REPO_URL)


@pytest.fixture
def fragment_graph(sample_docs: dict[str, Any]) -> DocGraph:
    """Graph using the fragment link convention."""
    return build_graph(
        sample_docs,
        base_docs_url=DOCS_URL,
        repo_profile=RepoProfile.FRAGMENT,
    )


@pytest.fixture
def bare_graph(sample_docs: dict[str, Any]) -> DocGraph:
    """Graph without any link configuration."""
    return build_graph(sample_docs)
