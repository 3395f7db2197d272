from enum import Enum
import numpy as np


class WaveShape(Enum):
    SQUARE = "square"
    SAWTOOTH = "sawtooth"
    TRIANGLE = "triangle"


def _phase(t, f):
    # fase centrada: 0 al inicio de cada período, en [-0.5, 0.5)
    return t * f - np.floor(0.5 + t * f)


def square(t, f):
    """Cuadrada 50%: +1 en la primera mitad del período, -1 en la segunda."""
    return 2.0 * (2.0 * np.floor(t * f) - np.floor(2.0 * t * f)) + 1.0


def sawtooth(t, f):
    return 2.0 * _phase(t, f)


def triangle(t, f):
    return 2.0 * np.abs(2.0 * _phase(t, f)) - 1.0


OSCILLATORS = {
    WaveShape.SQUARE: square,
    WaveShape.SAWTOOTH: sawtooth,
    WaveShape.TRIANGLE: triangle,
}


def to_shape(shape) -> WaveShape:
    """Acepta un WaveShape o su nombre ('square', 'sawtooth', 'triangle')."""
    if isinstance(shape, WaveShape):
        return shape
    try:
        return WaveShape(str(shape).strip().lower())
    except ValueError:
        raise ValueError(
            f"Forma de onda no soportada: {shape!r} "
            f"(disponibles: {[s.value for s in WaveShape]})"
        ) from None


def oscillate(shape, t, f):
    """
    Evalúa el oscilador `shape` en el tiempo t [s] para la frecuencia f [Hz].
    Sólo usa floor / parte fraccional (sin trigonometría), así que el
    resultado es determinista. `t` puede ser escalar o np.ndarray.
    """
    return OSCILLATORS[to_shape(shape)](t, f)
