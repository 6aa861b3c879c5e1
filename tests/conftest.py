"""
Pytest configuration and fixtures for soulsreq tests.
"""

import sys
from pathlib import Path
import pytest

# Add src directory to Python path to allow importing soulsreq
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))


# Configure anyio to only use asyncio (not trio)
@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def weapon_factory():
    """Build a NormalizedWeapon with sensible defaults."""
    from soulsreq.models import NormalizedWeapon

    def make(requirements, two_hand_rule=None, name="Test Weapon", category="Weapon"):
        return NormalizedWeapon(
            id=name.lower().replace(" ", "-"),
            name=name,
            category=category,
            requirements=requirements,
            two_hand_rule=two_hand_rule,
        )

    return make
