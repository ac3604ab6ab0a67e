"""Shared test fixtures."""

from __future__ import annotations

import pytest

from relay.service import RelayService
from tests.fakes import FakeChatModel, FakeModelFactory, FakeRelayService


@pytest.fixture
def fake_model() -> FakeChatModel:
    return FakeChatModel()


@pytest.fixture
def model_factory(fake_model) -> FakeModelFactory:
    return FakeModelFactory(fake_model)


@pytest.fixture
def relay_service(model_factory) -> RelayService:
    return RelayService(model_factory)


@pytest.fixture
def fake_relay() -> FakeRelayService:
    return FakeRelayService()
