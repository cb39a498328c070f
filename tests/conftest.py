"""Pytest fixtures for testing"""

import pytest
from fastapi.testclient import TestClient

from emi_calculator.api.main import create_app
from emi_calculator.domain.models import LoanInput


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    app = create_app()
    return TestClient(app)


@pytest.fixture
def sample_loan() -> LoanInput:
    """Typical home-loan style input: 5 lakh at 10.5% over 5 years"""
    return LoanInput(principal=500_000, annual_rate_percent=10.5, tenure_months=60)


@pytest.fixture
def valid_body() -> dict:
    """Raw form values as the page submits them"""
    return {"principal": "500000", "annual_rate": "10.5", "tenure_months": "60"}
