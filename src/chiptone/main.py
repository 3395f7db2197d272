import argparse
import numpy as np
import soundfile as sf

from .constants import SR
from .config import load_score
from .core.oscillators import WaveShape
from .core.timeline import Timeline, new_timeline


DEFAULT_OUT = "music.wav"


# =============================
# Tema de demo
# =============================
def demo_timeline() -> Timeline:
    """Cuatro notas cuadradas de 1 s: A4, D#4, A4, D#4 (con silencios entre medio)."""
    tl = new_timeline()
    tl.append_event(WaveShape.SQUARE, 0.0, 1.0, 0.0)
    tl.append_event(WaveShape.SQUARE, 1.0, 1.0, -6.0)
    tl.append_event(WaveShape.SQUARE, 3.0, 1.0, 0.0)
    tl.append_event(WaveShape.SQUARE, 5.0, 1.0, -6.0)
    return tl


# =============================
# Render
# =============================
def render_timeline(tl: Timeline, out=DEFAULT_OUT, sr=SR, silence=0.0, spectrogram=None):
    print(f"[INFO] Eventos: {len(tl.events)}  sr={sr}  silencio={silence}s")
    try:
        y = tl.render(sr, silence, out)
    except ValueError as e:
        raise SystemExit(f"[ERROR] Parámetros de render inválidos: {e}")
    except (sf.LibsndfileError, OSError) as e:
        raise SystemExit(f"[ERROR] No se pudo escribir {out}: {e}")

    peak = float(np.max(np.abs(y))) if y.size else 0.0
    print(f"[INFO] Muestras: {y.size} ({y.size / sr:.3f}s)  pico={peak:.3f}")
    if peak > 1.0:
        print("[WARN] El pico supera 1.0 (eventos superpuestos); el WAV float lo conserva tal cual.")

    if spectrogram:
        if y.size == 0:
            print("[WARN] Buffer vacío, no se genera espectrograma.")
        else:
            # import diferido: matplotlib es pesado y sólo hace falta acá
            from .analysis.spectrogram import save_spectrogram
            save_spectrogram(tl, sr, spectrogram, y=y)
            print(f"[OK] Espectrograma → {spectrogram}")

    print(f"[OK] Render → {out}")
    return y


# =============================
# CLI
# =============================
def main(argv=None):
    ap = argparse.ArgumentParser(description="chiptone — render de ondas cuadradas/sierra/triangulares a WAV")
    ap.add_argument("--score", type=str, default=None,
                    help="Partitura YAML (si no se indica, se renderiza el tema de demo)")
    ap.add_argument("--out", type=str, default=DEFAULT_OUT, help="Archivo WAV de salida")
    ap.add_argument("--sr", type=int, default=None, help="Frecuencia de muestreo (Hz)")
    ap.add_argument("--silence", type=float, default=None, help="Silencio final (s)")
    ap.add_argument("--spectrogram", type=str, default=None, help="Guardar espectrograma PNG")
    args = ap.parse_args(argv)

    if args.score:
        try:
            score = load_score(args.score)
        except (FileNotFoundError, ValueError) as e:
            raise SystemExit(f"[ERROR] {e}")
        tl, sr, silence = score.timeline, score.sample_rate, score.silence
    else:
        print("[INFO] Sin --score: renderizando tema de demo")
        tl, sr, silence = demo_timeline(), SR, 0.0

    if args.sr is not None:
        sr = args.sr
    if args.silence is not None:
        silence = args.silence

    return render_timeline(tl, out=args.out, sr=sr, silence=silence, spectrogram=args.spectrogram)


if __name__ == "__main__":
    main()
