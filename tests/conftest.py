import pytest

from skysphere.config import RenderSettings
from skysphere.sphere import Sphere
from skysphere.vec3 import vec3


@pytest.fixture
def quiet_settings():
    """Render settings with the progress bar turned off."""
    return RenderSettings(show_progress=False)


@pytest.fixture
def unit_sphere_ahead():
    """The fixed scene sphere: radius 0.5, one unit down the -z axis."""
    return Sphere(center=vec3(0.0, 0.0, -1.0), radius=0.5)
