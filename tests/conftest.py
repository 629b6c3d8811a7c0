"""Shared pytest fixtures for tests."""

from enum import Enum

import pytest

from typeconv import EnumIndexConverter, EnumNameConverter


class Priority(Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Status(Enum):
    ACTIVE = 1
    ARCHIVED = 2


@pytest.fixture
def priority():
    """The Priority enum, in storage order."""
    return Priority


@pytest.fixture
def status():
    """The Status enum."""
    return Status


@pytest.fixture
def priority_converter():
    """Index converter over all Priority members."""
    return EnumIndexConverter.for_enum(Priority)


@pytest.fixture
def status_converter():
    """Name converter for Status (JSON-capable)."""
    return EnumNameConverter(Status)
