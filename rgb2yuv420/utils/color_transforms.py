"""Функции для преобразования цветовых пространств."""

import numpy as np
from typing import Tuple

from .constants import (
    Y_COEFFS, U_COEFFS, V_COEFFS, FIXED_POINT_SHIFT, ROUNDING_BIAS,
    UV_NEUTRAL, SAMPLE_MIN, SAMPLE_MAX
)


def clamp_to_byte(values: np.ndarray) -> np.ndarray:
    """
    Ограничивает значения диапазоном [0, 255] (насыщение, без переполнения).
    
    Args:
        values: numpy.ndarray целых чисел
        
    Returns:
        numpy.ndarray: значения типа uint8
    """
    return np.clip(values, SAMPLE_MIN, SAMPLE_MAX).astype(np.uint8)


def _split_channels(rgb: np.ndarray) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    # int32 вмещает все промежуточные суммы без переполнения
    rgb = np.asarray(rgb).astype(np.int32)
    return rgb[..., 0], rgb[..., 1], rgb[..., 2]


def rgb_to_luma_fixed_point(rgb: np.ndarray) -> np.ndarray:
    """
    Вычисляет яркость Y с фиксированной точкой: (77R + 150G + 29B + 128) >> 8.
    
    Args:
        rgb: numpy.ndarray формы (..., 3) с RGB значениями [0-255]
        
    Returns:
        numpy.ndarray: Y компонента [0-255], uint8
    """
    r, g, b = _split_channels(rgb)
    kr, kg, kb = Y_COEFFS
    y = (kr * r + kg * g + kb * b + ROUNDING_BIAS) >> FIXED_POINT_SHIFT
    return clamp_to_byte(y)


def rgb_to_chroma_fixed_point(rgb: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """
    Вычисляет цветоразностные компоненты U и V с фиксированной точкой.
    
    Сдвиг вправо арифметический (округление к минус бесконечности),
    смещение +128 добавляется после сдвига.
    
    Args:
        rgb: numpy.ndarray формы (..., 3) с RGB значениями [0-255]
        
    Returns:
        Tuple[numpy.ndarray, numpy.ndarray]: U и V компоненты [0-255], uint8
    """
    r, g, b = _split_channels(rgb)
    ur, ug, ub = U_COEFFS
    vr, vg, vb = V_COEFFS
    u = ((ur * r + ug * g + ub * b + ROUNDING_BIAS) >> FIXED_POINT_SHIFT) + UV_NEUTRAL
    v = ((vr * r + vg * g + vb * b + ROUNDING_BIAS) >> FIXED_POINT_SHIFT) + UV_NEUTRAL
    return clamp_to_byte(u), clamp_to_byte(v)


def rgb_to_yuv_fixed_point(rgb: np.ndarray) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Преобразует массив RGB значений в YUV (полный диапазон) целочисленной арифметикой.
    
    Args:
        rgb: numpy.ndarray формы (..., 3) с RGB значениями [0-255]
        
    Returns:
        Tuple[numpy.ndarray, numpy.ndarray, numpy.ndarray]: Y, U, V компоненты [0-255]
    """
    y = rgb_to_luma_fixed_point(rgb)
    u, v = rgb_to_chroma_fixed_point(rgb)
    return y, u, v
