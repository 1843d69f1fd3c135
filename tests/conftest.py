"""Shared pytest fixtures for the KML feature conversion test suite."""

from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Path fixtures
# ---------------------------------------------------------------------------

TESTS_DIR = Path(__file__).parent
DATA_DIR = TESTS_DIR / "data"
EDGE_CASES_DIR = DATA_DIR / "edge_cases"


@pytest.fixture()
def data_dir() -> Path:
    """Return the path to the test data directory."""
    return DATA_DIR


@pytest.fixture()
def edge_cases_dir() -> Path:
    """Return the path to the edge-cases test data directory."""
    return EDGE_CASES_DIR


# ---------------------------------------------------------------------------
# Sample KML file fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def single_point_kml(data_dir: Path) -> Path:
    """Path to a KML with one Point Placemark named "A" at (10, 20)."""
    return data_dir / "01_single_point.kml"


@pytest.fixture()
def trail_network_kml(data_dir: Path) -> Path:
    """Path to a KML with a line, a polygon in nested Folders, and an empty Placemark."""
    return data_dir / "02_trail_network.kml"


@pytest.fixture()
def multigeometry_kml(data_dir: Path) -> Path:
    """Path to a KML with one MultiGeometry mixing lines, a point and a polygon."""
    return data_dir / "03_multigeometry_mixed.kml"


@pytest.fixture()
def no_namespace_kml(data_dir: Path) -> Path:
    """Path to a KML document without the KML namespace declaration."""
    return data_dir / "04_no_namespace.kml"


# ---------------------------------------------------------------------------
# Edge-case KML file fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def not_xml_kml(edge_cases_dir: Path) -> Path:
    """Path to a file that is not valid XML."""
    return edge_cases_dir / "11_malformed_not_xml.kml"


@pytest.fixture()
def unclosed_tags_kml(edge_cases_dir: Path) -> Path:
    """Path to XML with an unclosed element."""
    return edge_cases_dir / "12_malformed_unclosed_tags.kml"


@pytest.fixture()
def empty_kml(edge_cases_dir: Path) -> Path:
    """Path to a valid KML with no Placemarks."""
    return edge_cases_dir / "13_empty_no_features.kml"


@pytest.fixture()
def bad_coordinates_kml(edge_cases_dir: Path) -> Path:
    """Path to a KML whose coordinate blocks are partly or wholly unreadable."""
    return edge_cases_dir / "14_bad_coordinates.kml"
