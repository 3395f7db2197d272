import numpy as np
import pytest
from chiptone.core.oscillators import WaveShape, oscillate, square, sawtooth, triangle, to_shape
from chiptone.core.dsp import pitch2freq

T = np.linspace(0.0, 0.05, 2401)
FREQS = [0.0, 1.0, 55.0, 440.0, 1234.5, 12000.0]

def test_square_is_exactly_plus_minus_one():
    for f in FREQS:
        y = square(T, f)
        assert set(np.unique(y)) <= {-1.0, 1.0}

def test_square_halves():
    assert square(0.0, 440.0) == 1.0
    assert square(0.2 / 440.0, 440.0) == 1.0
    assert square(0.7 / 440.0, 440.0) == -1.0

def test_sawtooth_range_and_origin():
    for f in FREQS:
        y = sawtooth(T, f)
        assert y.min() >= -1.0 and y.max() <= 1.0
    assert sawtooth(0.0, 440.0) == 0.0
    assert sawtooth(0.25, 1.0) == pytest.approx(0.5)
    assert sawtooth(0.75, 1.0) == pytest.approx(-0.5)

def test_triangle_range_and_shape():
    for f in FREQS:
        y = triangle(T, f)
        assert y.min() >= -1.0 and y.max() <= 1.0
    assert triangle(0.0, 440.0) == -1.0
    assert triangle(0.25, 1.0) == pytest.approx(0.0)
    assert triangle(0.5, 1.0) == pytest.approx(1.0)

def test_oscillate_dispatch_by_name():
    t = 0.3 / 440.0
    assert oscillate("square", t, 440.0) == square(t, 440.0)
    assert oscillate(WaveShape.SAWTOOTH, t, 440.0) == sawtooth(t, 440.0)
    assert oscillate(" Triangle ", t, 440.0) == triangle(t, 440.0)

def test_unknown_shape():
    with pytest.raises(ValueError):
        to_shape("sine")

def test_pitch2freq():
    assert pitch2freq(0) == pytest.approx(440.0)
    assert pitch2freq(12) == pytest.approx(880.0)
    assert pitch2freq(-12) == pytest.approx(220.0)
    assert pitch2freq(0.5) > pitch2freq(0) > pitch2freq(-0.5)
