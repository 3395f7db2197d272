# Parámetros globales de render
SR = 48000

# Afinación de referencia: pitch 0 = A4
A4_HZ = 440.0

# Formato de salida (mono, float 32 bits)
CHANNELS = 1
WAV_SUBTYPE = "FLOAT"
