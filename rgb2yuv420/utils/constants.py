"""Константы для преобразования RGB в YUV 4:2:0 (полный диапазон, 8 бит)."""

# Коэффициенты с фиксированной точкой (масштаб 256), близкие к BT.601
Y_COEFFS = (77, 150, 29)
U_COEFFS = (-43, -84, 127)
V_COEFFS = (127, -106, -21)

FIXED_POINT_SHIFT = 8
ROUNDING_BIAS = 1 << (FIXED_POINT_SHIFT - 1)

# Полный диапазон (full swing)
Y_BLACK = 0
Y_WHITE = 255
UV_NEUTRAL = 128
SAMPLE_MIN = 0
SAMPLE_MAX = 255

# Минимальный шаг пикселя: R, G, B
MIN_BYTES_PER_PIXEL = 3

# Раскладки выходного буфера
LAYOUT_PLANAR = "planar"
LAYOUT_NV12 = "nv12"
LAYOUTS = (LAYOUT_PLANAR, LAYOUT_NV12)

# Y4M
Y4M_COLORSPACE = "420jpeg"
Y4M_COLOR_RANGE = "FULL"
