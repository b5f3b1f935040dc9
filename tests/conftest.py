import logging

import pytest

from src.string_trie import logger
from src.string_trie.children import CHILD_LOOKUP_STRATEGIES
from src.string_trie.trie import StringTrie


@pytest.fixture(params=sorted(CHILD_LOOKUP_STRATEGIES))
def trie(request):
    """An empty trie, once for every child lookup strategy."""
    return StringTrie(child_lookup=request.param)


@pytest.fixture
def log_file(tmp_path):
    """Route the root logger to a temporary file for the test."""
    path = logger.setup_logging(tmp_path / "logs" / "trie.log", logging.DEBUG)
    yield path
    logger.stop_logging()
