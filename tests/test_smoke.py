"""Smoke test to verify the toolchain works."""


def test_import_wind_instrument():
    """Verify the wind_instrument package can be imported."""
    import wind_instrument

    assert wind_instrument.__version__ == "0.1.0"


def test_subpackages_importable():
    """Verify all subpackages can be imported."""
    import wind_instrument.display
    import wind_instrument.geometry
    import wind_instrument.rotation
    import wind_instrument.telemetry

    assert wind_instrument.geometry is not None
    assert wind_instrument.rotation is not None
    assert wind_instrument.telemetry is not None
    assert wind_instrument.display is not None
