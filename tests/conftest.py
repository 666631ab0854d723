"""Pytest configuration and fixtures for builder tests."""

import pytest

from soqlbuilder import SoqlBuilder


@pytest.fixture
def account_builder():
    """Builder selecting Id and Name from Acc."""
    return SoqlBuilder.from_("Acc").add_select(["Id", "Name"])


@pytest.fixture
def androids_builder():
    """Builder selecting Id from Androids__c."""
    return SoqlBuilder.from_("Androids__c").add_select("Id")
