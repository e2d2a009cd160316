"""Verify package imports work correctly."""


def test_import_prepis() -> None:
    """Test that prepis can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import prepis

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert prepis.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from prepis import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)
