"""Shared fixtures for docassembly tests."""

from __future__ import annotations

import copy
import logging
from typing import Any

import pytest

from docassembly.domains.care_plan.exemplar import EXEMPLAR as CARE_PLAN_EXEMPLAR
from docassembly.domains.contract.exemplar import EXEMPLAR as CONTRACT_EXEMPLAR
from docassembly.domains.invoice.exemplar import EXEMPLAR as INVOICE_EXEMPLAR
from docassembly.domains.meal_plan.exemplar import EXEMPLAR as MEAL_PLAN_EXEMPLAR
from docassembly.domains.registry import DomainRegistry
from docassembly.domains.workout.exemplar import EXEMPLAR as WORKOUT_EXEMPLAR

EXEMPLARS: dict[str, dict[str, Any]] = {
    "care_plan": CARE_PLAN_EXEMPLAR,
    "contract": CONTRACT_EXEMPLAR,
    "invoice": INVOICE_EXEMPLAR,
    "meal_plan": MEAL_PLAN_EXEMPLAR,
    "workout": WORKOUT_EXEMPLAR,
}


@pytest.fixture
def registry() -> DomainRegistry:
    """A freshly discovered registry, independent of the global singleton."""
    reg = DomainRegistry()
    reg.auto_discover()
    return reg


@pytest.fixture
def exemplars() -> dict[str, dict[str, Any]]:
    """Deep copies of every adapter's reference record."""
    return copy.deepcopy(EXEMPLARS)


@pytest.fixture
def restore_root_logging():
    """Put the root logger back the way it was after a test reconfigures it."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    package_level = logging.getLogger("docassembly").level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("docassembly").setLevel(package_level)
