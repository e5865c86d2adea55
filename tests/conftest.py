from datetime import date

import pytest
from faker import Faker

from dashboard_data.generator.main import generate_dataset

REFERENCE_DATE = date(2026, 1, 15)


@pytest.fixture(scope="module")
def dataset():
    return generate_dataset(seed=42, today=REFERENCE_DATE)


@pytest.fixture
def fake():
    f = Faker()
    f.seed_instance(7)
    return f
