"""Pytest configuration and fixtures shared across all test modules.

Environment variables are set before any application import so that the
global settings object is built with test values.
"""

import os

# CRITICAL: Set these before any imports that might load settings
os.environ["APP_ENV"] = "testing"
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("LOG_FORMAT", "json")

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from cheese_wizard.core.app_factory import create_app
from cheese_wizard.domain.models import User
from cheese_wizard.domain.registry import CheeseRegistry
from cheese_wizard.services.cheese_service import CheeseWizardService


@pytest.fixture
def registry() -> CheeseRegistry:
    """Empty cheese registry."""
    return CheeseRegistry()


@pytest.fixture
def user() -> User:
    return User(name="Jeffery Hugo", age=18)


@pytest.fixture
def service() -> CheeseWizardService:
    """Fresh service with no cheeses and no users."""
    return CheeseWizardService()


@pytest.fixture
def app(service: CheeseWizardService) -> FastAPI:
    """Application instance serving the ``service`` fixture."""
    return create_app(service=service)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create FastAPI test client."""
    return TestClient(app)
