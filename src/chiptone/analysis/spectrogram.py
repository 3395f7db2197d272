import numpy as np
import matplotlib.pyplot as plt
from scipy.signal import stft

from ..core.dsp import pitch2freq


def save_spectrogram(timeline, sr, path_png, y=None, silence=0.0, nperseg=1024):
    """
    Guarda el espectrograma del render de `timeline` con cada evento marcado:
    líneas verticales en inicio/fin y un segmento sobre la fundamental,
    rotulado con forma de onda y pitch. Si no se pasa `y`, se renderiza.
    """
    if y is None:
        y = timeline.render(sr, silence)
    if y.size == 0:
        raise ValueError("Buffer vacío: no hay nada que analizar")

    win = min(nperseg, y.size)
    f, t, Z = stft(y, sr, nperseg=win, noverlap=win // 4)
    db = 20 * np.log10(np.abs(Z) + 1e-9)

    fig, ax = plt.subplots(figsize=(10, 4))
    mesh = ax.pcolormesh(t, f, db, shading="auto", cmap="magma")
    fig.colorbar(mesh, ax=ax, label="dB")

    for ev in timeline.events:
        t0, t1 = ev.start_time, ev.start_time + ev.duration
        f0 = pitch2freq(ev.pitch)
        ax.axvline(t0, color="cyan", lw=0.6, alpha=0.7)
        ax.axvline(t1, color="cyan", lw=0.6, alpha=0.4, ls="--")
        if f0 < sr / 2:
            ax.hlines(f0, t0, t1, colors="white", lw=1.0)
            ax.annotate(f"{ev.shape.value} {ev.pitch:+g}", (t0, f0),
                        xytext=(2, 4), textcoords="offset points",
                        color="white", fontsize=7)

    ax.set_xlabel("Tiempo [s]")
    ax.set_ylabel("Frecuencia [Hz]")
    ax.set_title(f"Espectrograma — {len(timeline.events)} eventos @ {sr} Hz")
    fig.tight_layout()
    fig.savefig(path_png, dpi=150)
    plt.close(fig)
