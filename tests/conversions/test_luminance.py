from sitecolor.conversions.luminance import (
    linearize_channel,
    np_linearize_channels,
    relative_luminance,
    contrast_ratio,
)
import numpy as np
import pytest

def test_linearize_channel_branches():
    assert linearize_channel(0.0) == 0.0
    assert linearize_channel(1.0) == 1.0
    # at and below the threshold the curve is linear
    assert linearize_channel(0.03928) == pytest.approx(0.03928 / 12.92)
    assert linearize_channel(0.5) == pytest.approx(((0.5 + 0.055) / 1.055) ** 2.4)

def test_linearize_channel_numpy_matches_scalar():
    channels = np.arange(256)
    expected = np.array([linearize_channel(c / 255) for c in channels])
    assert np.allclose(np_linearize_channels(channels), expected)

def test_linearize_is_monotonic():
    result = np_linearize_channels(np.arange(256))
    assert np.all(np.diff(result) > 0)

def test_relative_luminance_weights():
    assert relative_luminance(255, 255, 255) == 1.0
    assert relative_luminance(255, 0, 0) == pytest.approx(0.2126)
    assert relative_luminance(0, 255, 0) == pytest.approx(0.7152)
    assert relative_luminance(0, 0, 255) == pytest.approx(0.0722)

def test_relative_luminance_reads_none_as_zero():
    assert relative_luminance(None, None, None) == 0.0
    assert relative_luminance(255, None, None) == relative_luminance(255, 0, 0)

def test_contrast_ratio_symmetric():
    assert contrast_ratio((255, 255, 255), (0, 0, 0)) == 21
    assert contrast_ratio((0, 0, 0), (255, 255, 255)) == 21
    assert contrast_ratio([119, 119, 119], [255, 255, 255]) == pytest.approx(4.478089453577214)
    assert contrast_ratio((10, 20, 30), (10, 20, 30)) == 1.0
