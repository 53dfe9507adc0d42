import pytest


@pytest.fixture
def write_catalog(tmp_path):
    """Write raw bytes to a DESCRIPT.ION file and return its path."""
    def _write(data: bytes, name: str = "DESCRIPT.ION"):
        path = tmp_path / name
        path.write_bytes(data)
        return path
    return _write
