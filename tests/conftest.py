"""Pytest fixtures for OncoGuide tests."""

import json

import pytest

from oncoguide.model.catalogue import CancerCard
from oncoguide.results.costs import CostConfig


@pytest.fixture
def default_config() -> CostConfig:
    """Cost configuration with published calculator defaults."""
    return CostConfig()


@pytest.fixture
def sample_cards() -> list:
    """Small catalogue covering every gender tag and missing values."""
    return [
        CancerCard("Lung Cancer", "both", prevalence_rank=3, survival=18),
        CancerCard("Breast Cancer", "female", prevalence_rank=2, survival=90),
        CancerCard("Prostate Cancer", "male", prevalence_rank=4, survival=99),
        CancerCard("Rare Cancer", "both"),
    ]


@pytest.fixture
def profile_blob() -> str:
    """Saved profile as the assessment form writes it."""
    return json.dumps({
        "diabetes": "on",
        "hypertension": False,
        "copd": True,
        "smokingStatus": "current",
        "activityLevel": "low",
        "birthDate": "1970-03-01",
    })
