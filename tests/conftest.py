"""Shared fixtures: a Polymer analysis document with two elements."""

from __future__ import annotations

import json
import logging

import pytest

from wc_reactor.analyzer import AnalysisResult
from wc_reactor.codegen import ReactGenerator, collect_components
from wc_reactor.logging_config import ROOT_LOGGER_NAME

from analysis_data import OTHER_ELEMENT, TEST_ELEMENT


@pytest.fixture
def analysis_document() -> dict:
    """Analysis with one top-level element and one inside a namespace."""
    return {
        "schema_version": "1.0.0",
        "elements": [json.loads(json.dumps(TEST_ELEMENT))],
        "namespaces": [
            {
                "name": "Demo",
                "elements": [json.loads(json.dumps(OTHER_ELEMENT))],
            }
        ],
    }


@pytest.fixture
def analysis(analysis_document) -> AnalysisResult:
    return AnalysisResult(analysis_document)


@pytest.fixture
def analysis_file(tmp_path, analysis_document):
    path = tmp_path / "analysis.json"
    path.write_text(json.dumps(analysis_document), encoding="utf-8")
    return path


@pytest.fixture
def test_component(analysis):
    return collect_components(analysis, ["test-element"])[0]


@pytest.fixture
def generator() -> ReactGenerator:
    return ReactGenerator()


@pytest.fixture
def quiet_logger() -> logging.Logger:
    logger = logging.getLogger("wc_reactor_tests")
    logger.addHandler(logging.NullHandler())
    logger.propagate = False
    return logger


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo handlers a test's build installed on the package logger."""
    yield
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
