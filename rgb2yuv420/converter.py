"""Конвертер RGB(A) в YUV 4:2:0 (полный диапазон, 8 бит).

Одно ядро преобразования и две раскладки выходного буфера:

* planar (I420): ``[Y ... Y][U ... U][V ... V]``
* semi-planar NV12: ``[Y ... Y][U V U V ...]``

Раскладка задается функцией размещения цветовых отсчетов, которая
передается в общее ядро.
"""

import numpy as np
from typing import Callable

from .utils.constants import LAYOUT_PLANAR, LAYOUT_NV12
from .utils.color_transforms import rgb_to_luma_fixed_point, rgb_to_chroma_fixed_point
from .utils.yuv_utils import frame_sizes, create_yuv_buffer, as_pixel_array

# (yuv, uv_index, chroma_size, u, v) -> None
StoreUV = Callable[[np.ndarray, int, int, np.ndarray, np.ndarray], None]


def store_uv_planar(yuv: np.ndarray, uv_index: int, chroma_size: int, u: np.ndarray, v: np.ndarray) -> None:
    """
    Записывает U и V в отдельные плоскости: V начинается сразу после U-плоскости.
    
    Args:
        yuv: Выходной буфер
        uv_index: Начало U-плоскости (первый байт после Y-плоскости)
        chroma_size: Размер одной цветовой плоскости
        u: U отсчеты в порядке блоков 2x2
        v: V отсчеты в порядке блоков 2x2
    """
    count = len(u)
    yuv[uv_index:uv_index + count] = u
    yuv[uv_index + chroma_size:uv_index + chroma_size + count] = v


def store_uv_nv12(yuv: np.ndarray, uv_index: int, chroma_size: int, u: np.ndarray, v: np.ndarray) -> None:
    """
    Записывает U и V парами U, V, U, V, ... (NV12).
    
    Args:
        yuv: Выходной буфер
        uv_index: Начало UV-области
        chroma_size: Не используется, оставлен для единой сигнатуры
        u: U отсчеты в порядке блоков 2x2
        v: V отсчеты в порядке блоков 2x2
    """
    count = len(u)
    yuv[uv_index:uv_index + 2 * count:2] = u
    yuv[uv_index + 1:uv_index + 2 * count:2] = v


def _convert_rgb_to_yuv420(pixels, width: int, height: int, bytes_per_pixel: int, store_uv: StoreUV) -> np.ndarray:
    frame_size, chroma_size, _ = frame_sizes(width, height)
    image = as_pixel_array(pixels, width, height, bytes_per_pixel)
    yuv = create_yuv_buffer(width, height)
    if frame_size == 0:
        return yuv
    
    # Байты сверх первых трех (например, альфа) не читаются
    rgb = image[:, :, :3]
    yuv[:frame_size] = rgb_to_luma_fixed_point(rgb).reshape(-1)
    
    # Цвет берется из верхнего левого пикселя каждого полного блока 2x2,
    # без усреднения; неполные последняя строка и столбец пропускаются
    even_height = height - height % 2
    even_width = width - width % 2
    corners = rgb[0:even_height:2, 0:even_width:2]
    u, v = rgb_to_chroma_fixed_point(corners)
    store_uv(yuv, frame_size, chroma_size, u.reshape(-1), v.reshape(-1))
    
    return yuv


def convert_to_planar(pixels, width: int, height: int, bytes_per_pixel: int) -> np.ndarray:
    """
    Преобразует RGB изображение в YUV420p (три плоскости).
    
    Args:
        pixels: Пиксели в формате [r, g, b, (a), r, g, b, (a), ...] построчно
        width: Ширина изображения
        height: Высота изображения
        bytes_per_pixel: Количество байт на пиксель (3 для RGB, 4 для RGBA)
        
    Returns:
        numpy.ndarray: [y, y, ..., u, u, ..., v, v, ...] длиной width * height * 3 // 2
    """
    return _convert_rgb_to_yuv420(pixels, width, height, bytes_per_pixel, store_uv_planar)


def convert_to_semi_planar_nv12(pixels, width: int, height: int, bytes_per_pixel: int) -> np.ndarray:
    """
    Преобразует RGB изображение в YUV420sp NV12 (две плоскости).
    
    Args:
        pixels: Пиксели в формате [r, g, b, (a), r, g, b, (a), ...] построчно
        width: Ширина изображения
        height: Высота изображения
        bytes_per_pixel: Количество байт на пиксель (3 для RGB, 4 для RGBA)
        
    Returns:
        numpy.ndarray: [y, y, ..., u, v, u, v, ...] длиной width * height * 3 // 2
    """
    return _convert_rgb_to_yuv420(pixels, width, height, bytes_per_pixel, store_uv_nv12)


convert_planar = convert_to_planar
convert_semi_planar_nv12 = convert_to_semi_planar_nv12

_CONVERTERS = {
    LAYOUT_PLANAR: convert_to_planar,
    LAYOUT_NV12: convert_to_semi_planar_nv12,
}


def convert(pixels, width: int, height: int, bytes_per_pixel: int, layout: str = LAYOUT_PLANAR) -> np.ndarray:
    """Преобразует изображение в YUV 4:2:0 с раскладкой, выбранной по имени."""
    try:
        converter = _CONVERTERS[layout]
    except KeyError:
        raise ValueError(f"Неподдерживаемая раскладка: {layout}") from None
    return converter(pixels, width, height, bytes_per_pixel)
