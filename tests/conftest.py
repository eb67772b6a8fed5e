import logging
import os

import pytest

from patternkit.config.manager import reset_config_manager
from patternkit.infrastructure.patterns import SingletonRegistry
from patternkit.patterns.creational.factory import LogisticsFactory
from patternkit.patterns.creational.singleton import LazyJudgeAnalytics
from patternkit.patterns.structural.flyweight import TreeFactory


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Remove PATTERNKIT_* variables so the host environment cannot leak in."""
    for name in list(os.environ):
        if name.startswith("PATTERNKIT_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def reset_process_state():
    """Reset process-wide singletons and caches between tests."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level

    reset_config_manager()
    SingletonRegistry.get_instance().reset()
    LazyJudgeAnalytics.reset_instance()
    TreeFactory.clear()
    LogisticsFactory.reset()

    yield

    reset_config_manager()
    SingletonRegistry.get_instance().reset()
    LazyJudgeAnalytics.reset_instance()
    TreeFactory.clear()
    LogisticsFactory.reset()

    # setup_logging replaces root handlers; put pytest's back
    for handler in root_logger.handlers[:]:
        if handler not in handlers:
            root_logger.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root_logger.handlers:
            root_logger.addHandler(handler)
    root_logger.setLevel(level)


@pytest.fixture
def small_forest_config(tmp_path):
    """Configuration file that keeps the flyweight demo small."""
    config_path = tmp_path / "patternkit.yml"
    config_path.write_text("demos:\n  flyweight_tree_count: 25\n")
    return str(config_path)
