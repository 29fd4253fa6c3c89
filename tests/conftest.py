# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Shared fixtures for schemakit tests."""

import pytest


@pytest.fixture
def registry():
    """Fresh copy of the default predicate registry."""
    from schemakit.testing import create_test_registry

    return create_test_registry()


@pytest.fixture
def evaluator(registry):
    from schemakit import Evaluator

    return Evaluator(registry)


@pytest.fixture
def synthesizer():
    from schemakit import ErrorSynthesizer

    return ErrorSynthesizer()


@pytest.fixture
def errors_for(evaluator, synthesizer):
    """Evaluate a rule and return its synthesized error tree."""

    def _errors_for(rule, value):
        return synthesizer.synthesize(evaluator.evaluate(rule, value))

    return _errors_for
