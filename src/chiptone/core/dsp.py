from ..constants import A4_HZ

# ±1200 semitonos (100 octavas) ya cae muy fuera de lo audible
MAX_PITCH = 1200.0

def pitch2freq(pitch: float) -> float:
    # pitch en semitonos respecto de A4 (admite microtonos)
    return A4_HZ * 2 ** (pitch / 12)
