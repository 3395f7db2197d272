import numpy as np
import soundfile as sf

from ..constants import CHANNELS, WAV_SUBTYPE

def write_wav(path: str, audio: np.ndarray, sr: int):
    # sin clip ni normalización: las superposiciones pueden pasar de ±1
    audio = np.asarray(audio, dtype=np.float32).reshape(-1, CHANNELS)
    sf.write(path, audio, sr, subtype=WAV_SUBTYPE, format="WAV")
