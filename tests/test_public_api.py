import importlib

import pytest


def test_public_api_exports():
    import raycore

    assert set(raycore.__all__) == {"Color", "IndexOutOfRange", "Point3", "Ray", "Vector3"}
    for name in raycore.__all__:
        assert hasattr(raycore, name)


def test_no_pixel_output_helpers():
    import raycore

    assert not hasattr(raycore, "to_rgb8")
    assert not hasattr(raycore, "write_color")
    with pytest.raises(ImportError):
        importlib.import_module("raycore.color")
