from pathlib import Path

import pytest

from address_tasks.models import Address


@pytest.fixture
def resources_dir():
    return Path(__file__).parent / "resources"


@pytest.fixture
def make_address():
    def _make(**overrides) -> Address:
        fields = dict(
            type="Residential",
            address_lines=("123 Main St",),
            city="Toronto",
            province_or_state=None,
            postal_code="12345",
            country="CA",
        )
        fields.update(overrides)
        return Address(**fields)

    return _make
