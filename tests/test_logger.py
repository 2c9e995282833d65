"""Tests for the logging wrapper and config merging."""

import logging

from jsonpp.logger import Logger
from jsonpp.utils import resolve_config


def test_resolve_config_ignores_unknown_keys():
    merged = resolve_config({"a": 2, "zzz": 3}, {"a": 1, "b": 1})
    assert merged == {"a": 2, "b": 1}

def test_resolve_config_does_not_mutate_defaults():
    defaults = {"a": 1}
    resolve_config({"a": 2}, defaults)
    assert defaults == {"a": 1}

def test_logger_attaches_one_handler():
    name = "jsonpp.test.handlers"
    logging.getLogger(name).handlers.clear()
    logging.getLogger(name).propagate = False
    Logger(config={"name": name})
    Logger(config={"name": name})
    assert len(logging.getLogger(name).handlers) == 1

def test_logger_can_be_enabled_again():
    name = "jsonpp.test.enable"
    Logger(config={"name": name, "is_enabled": False})
    assert logging.getLogger(name).disabled
    logger = Logger(config={"name": name, "level": logging.DEBUG}).logger
    assert not logger.disabled
    assert logger.level == logging.DEBUG
