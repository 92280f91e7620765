"""Shared fixtures for ModelSearch tests."""

import copy

import pytest

from modelsearch_core import FuzzyScorer, MultiFieldSearchEngine, RelatednessEngine, ScoreCache
from tests.fixtures.content import MENTAL_MODELS, NARRATIVES


@pytest.fixture
def scorer():
    """Fresh scorer with its own cache."""
    return FuzzyScorer(cache=ScoreCache())


@pytest.fixture
def engine(scorer):
    return MultiFieldSearchEngine(scorer=scorer)


@pytest.fixture
def related_engine():
    return RelatednessEngine()


@pytest.fixture
def narratives():
    return copy.deepcopy(NARRATIVES)


@pytest.fixture
def mental_models():
    return copy.deepcopy(MENTAL_MODELS)
