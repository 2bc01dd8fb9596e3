import pytest

from double_slit.optics import OpticalParameters
from double_slit.storage import ConfigurationStore


@pytest.fixture
def params():
    # λ=500 nm, d=0.5 mm, L=100 cm -> 1 mm fringe period
    return OpticalParameters(wavelength_nm=500.0, separation_mm=0.5, distance_cm=100.0)


@pytest.fixture
def store():
    s = ConfigurationStore(":memory:")
    yield s
    s.close()
