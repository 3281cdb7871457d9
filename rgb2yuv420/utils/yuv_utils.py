"""Утилиты для работы с YUV 4:2:0 буферами."""

import numpy as np
from typing import Dict, Tuple

from .constants import MIN_BYTES_PER_PIXEL, LAYOUT_PLANAR, LAYOUT_NV12


def frame_sizes(width: int, height: int) -> Tuple[int, int, int]:
    """
    Рассчитывает размеры областей буфера YUV 4:2:0.
    
    Args:
        width: Ширина кадра
        height: Высота кадра
        
    Returns:
        Tuple[int, int, int]: Размер Y-плоскости, размер одной цветовой плоскости,
            общий размер буфера (width * height * 3 // 2)
    """
    frame_size = width * height
    chroma_size = frame_size // 4
    return frame_size, chroma_size, frame_size * 3 // 2


def create_yuv_buffer(width: int, height: int) -> np.ndarray:
    """
    Создает обнуленный выходной буфер YUV 4:2:0.
    
    Args:
        width: Ширина кадра
        height: Высота кадра
        
    Returns:
        numpy.ndarray: Одномерный буфер uint8 длиной width * height * 3 // 2
    """
    _, _, total_size = frame_sizes(width, height)
    return np.zeros(total_size, dtype=np.uint8)


def as_pixel_array(pixels, width: int, height: int, bytes_per_pixel: int) -> np.ndarray:
    """
    Проверяет входной буфер и представляет его как массив пикселей.
    
    Args:
        pixels: bytes, bytearray, memoryview или массив 8-битных отсчетов
        width: Ширина изображения
        height: Высота изображения
        bytes_per_pixel: Шаг пикселя в байтах (3 для RGB, 4 для RGBA)
        
    Returns:
        numpy.ndarray: Массив формы (height, width, bytes_per_pixel)
    """
    if width < 0 or height < 0:
        raise ValueError(f"Размеры не могут быть отрицательными: {width}x{height}")
    if bytes_per_pixel < MIN_BYTES_PER_PIXEL:
        raise ValueError(
            f"bytes_per_pixel должен быть не меньше {MIN_BYTES_PER_PIXEL}, получено {bytes_per_pixel}")
    
    if isinstance(pixels, (bytes, bytearray, memoryview)):
        flat = np.frombuffer(pixels, dtype=np.uint8)
    else:
        flat = np.asarray(pixels, dtype=np.uint8).reshape(-1)
    
    required = width * height * bytes_per_pixel
    if flat.size < required:
        raise ValueError(
            f"Входной буфер слишком короткий: {flat.size} байт, требуется {required} "
            f"({width}x{height}, {bytes_per_pixel} байт на пиксель)")
    
    # Лишние байты в конце буфера игнорируются
    return flat[:required].reshape(height, width, bytes_per_pixel)


def split_planes(yuv: np.ndarray, width: int, height: int, layout: str = LAYOUT_PLANAR) -> Dict[str, np.ndarray]:
    """
    Разделяет буфер YUV 4:2:0 на плоскости Y, U и V.
    
    Args:
        yuv: Одномерный буфер, полученный от конвертера
        width: Ширина кадра
        height: Высота кадра
        layout: Раскладка буфера ("planar" или "nv12")
        
    Returns:
        Dict[str, np.ndarray]: Словарь с Y (height, width), U и V (height // 2, width // 2)
    """
    frame_size, chroma_size, total_size = frame_sizes(width, height)
    if len(yuv) != total_size:
        raise ValueError(f"Размер буфера {len(yuv)} не соответствует кадру {width}x{height}")
    
    yuv = np.asarray(yuv, dtype=np.uint8)
    uv_height, uv_width = height // 2, width // 2
    blocks = uv_height * uv_width
    
    y_plane = yuv[:frame_size].reshape(height, width)
    if layout == LAYOUT_PLANAR:
        u_data = yuv[frame_size:frame_size + blocks]
        v_data = yuv[frame_size + chroma_size:frame_size + chroma_size + blocks]
    elif layout == LAYOUT_NV12:
        uv_data = yuv[frame_size:frame_size + 2 * blocks]
        u_data = uv_data[0::2]
        v_data = uv_data[1::2]
    else:
        raise ValueError(f"Неподдерживаемая раскладка: {layout}")
    
    return {
        'Y': y_plane,
        'U': u_data.reshape(uv_height, uv_width),
        'V': v_data.reshape(uv_height, uv_width),
    }
