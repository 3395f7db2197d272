import math
from dataclasses import dataclass, field
from typing import List, Optional
import numpy as np

from ..constants import SR
from .audio_io import write_wav
from .dsp import MAX_PITCH, pitch2freq
from .oscillators import WaveShape, oscillate, to_shape


@dataclass(frozen=True)
class ScheduledEvent:
    shape: WaveShape
    start_time: float  # s
    duration: float    # s
    pitch: float       # semitonos respecto de A4


def compute_extent(events, trailing_silence: float = 0.0) -> float:
    t_end = max((e.start_time + e.duration for e in events), default=0.0)
    return t_end + trailing_silence


def lay_events_on_timeline(events, sr: int = SR, trailing_silence: float = 0.0) -> np.ndarray:
    """
    Suma cada evento sobre un buffer en cero de int(extent * sr) muestras.
    Las muestras que caen fuera del buffer se descartan.
    """
    if isinstance(sr, bool) or not isinstance(sr, (int, np.integer)) or sr <= 0:
        raise ValueError(f"sample_rate debe ser un entero positivo (recibido {sr!r})")
    if not math.isfinite(trailing_silence) or trailing_silence < 0:
        raise ValueError(f"trailing_silence debe ser finito y >= 0 (recibido {trailing_silence})")
    sr = int(sr)

    y = np.zeros(int(compute_extent(events, trailing_silence) * sr), dtype=np.float32)
    for ev in events:
        i0 = int(sr * ev.start_time)
        i1 = i0 + int(sr * ev.duration)
        # recorte al rango [0, len(y))
        a = max(i0, 0)
        b = min(i1, len(y))
        if b <= a:
            continue
        t = np.arange(a - i0, b - i0, dtype=np.float64) / sr
        sig = oscillate(ev.shape, t, pitch2freq(ev.pitch))
        y[a:b] += sig.astype(np.float32)
    return y


@dataclass
class Timeline:
    events: List[ScheduledEvent] = field(default_factory=list)

    def append_event(self, shape, start_time: float, duration: float, pitch: float = 0.0) -> ScheduledEvent:
        start_time, duration, pitch = float(start_time), float(duration), float(pitch)
        for name, v in (("start_time", start_time), ("duration", duration), ("pitch", pitch)):
            if not math.isfinite(v):
                raise ValueError(f"{name} debe ser finito (recibido {v})")
        if start_time < 0:
            raise ValueError(f"start_time no puede ser negativo (recibido {start_time})")
        if duration < 0:
            raise ValueError(f"duration no puede ser negativa (recibido {duration})")
        if abs(pitch) > MAX_PITCH:
            raise ValueError(f"pitch fuera de rango ±{MAX_PITCH} semitonos (recibido {pitch})")
        ev = ScheduledEvent(to_shape(shape), start_time, duration, pitch)
        self.events.append(ev)
        return ev

    def compute_extent(self, trailing_silence: float = 0.0) -> float:
        return compute_extent(self.events, trailing_silence)

    def render(self, sample_rate: int = SR, trailing_silence: float = 0.0,
               output_path: Optional[str] = None) -> np.ndarray:
        """
        Renderiza todos los eventos. Si se pasa `output_path`, el buffer
        (sin normalizar ni recortar) se escribe como WAV mono float32.
        """
        y = lay_events_on_timeline(self.events, sample_rate, trailing_silence)
        if output_path is not None:
            write_wav(output_path, y, sample_rate)
        return y

    def __len__(self):
        return len(self.events)


def new_timeline() -> Timeline:
    return Timeline()
