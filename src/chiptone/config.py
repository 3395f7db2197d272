import math
import os
from dataclasses import dataclass
import yaml

from .constants import SR
from .core.timeline import Timeline


@dataclass
class Score:
    timeline: Timeline
    sample_rate: int = SR
    silence: float = 0.0


def _load_yaml(path):
    full = os.path.abspath(path)
    if not os.path.exists(full):
        raise FileNotFoundError(f"No se encontró el archivo de partitura: {full}")
    with open(full, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Error leyendo YAML {full}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"El YAML no tiene formato dict: {full}")
    return data


def load_score(path: str) -> Score:
    """
    Carga una partitura YAML y arma el Timeline correspondiente.

        sample_rate: 48000
        silence: 0.5
        events:
          - {shape: square, start: 0.0, duration: 1.0, pitch: 0}

    `pitch` es opcional (0 = A4). Cualquier evento mal formado levanta
    ValueError indicando su índice.
    """
    data = _load_yaml(path)
    events = data.get("events")
    if not isinstance(events, list):
        raise ValueError(f"La partitura {path} no tiene una lista 'events'")

    tl = Timeline()
    for i, ev in enumerate(events):
        if not isinstance(ev, dict):
            raise ValueError(f"Evento #{i} inválido: se esperaba un dict, llegó {ev!r}")
        missing = [k for k in ("shape", "start", "duration") if k not in ev]
        if missing:
            raise ValueError(f"Evento #{i} sin campos obligatorios: {missing}")
        try:
            tl.append_event(ev["shape"], float(ev["start"]), float(ev["duration"]),
                            float(ev.get("pitch", 0.0)))
        except (TypeError, ValueError) as e:
            raise ValueError(f"Evento #{i} inválido: {e}") from e

    sr = data.get("sample_rate", SR)
    # bool es subclase de int; 44100.7 no se trunca
    if isinstance(sr, bool) or not isinstance(sr, int) or sr <= 0:
        raise ValueError(f"sample_rate debe ser un entero positivo (recibido {sr!r})")
    try:
        silence = float(data.get("silence", 0.0))
    except (TypeError, ValueError) as e:
        raise ValueError(f"silence inválido: {e}") from e
    if not math.isfinite(silence) or silence < 0:
        raise ValueError(f"silence debe ser finito y >= 0 (recibido {silence})")

    score = Score(timeline=tl, sample_rate=sr, silence=silence)
    print(f"[OK] Partitura cargada: {len(events)} eventos desde {os.path.abspath(path)}")
    return score
