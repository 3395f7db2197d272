import pytest
from chiptone.analysis.spectrogram import save_spectrogram
from chiptone.core.timeline import new_timeline

def test_spec(tmp_path):
    sr=48000
    tl=new_timeline()
    tl.append_event('sawtooth', 0.0, 0.1, 0)
    tl.append_event('square', 0.05, 0.1, 72)  # fundamental por encima de Nyquist
    png=tmp_path/'s.png'
    save_spectrogram(tl, sr, str(png), silence=0.05)
    assert png.exists() and png.stat().st_size > 0

def test_spec_with_buffer(tmp_path):
    tl=new_timeline()
    tl.append_event('triangle', 0.0, 0.01, -12)
    y=tl.render(8000, 0.0)
    png=tmp_path/'t.png'
    save_spectrogram(tl, 8000, str(png), y=y)
    assert png.exists()

def test_spec_empty(tmp_path):
    with pytest.raises(ValueError):
        save_spectrogram(new_timeline(), 8000, str(tmp_path/'e.png'))
