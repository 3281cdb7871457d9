"""Утилиты для работы с цветами и YUV форматом."""

from .color_transforms import (
    clamp_to_byte,
    rgb_to_luma_fixed_point,
    rgb_to_chroma_fixed_point,
    rgb_to_yuv_fixed_point,
)
from .yuv_utils import (
    frame_sizes,
    create_yuv_buffer,
    as_pixel_array,
    split_planes,
)

__all__ = [
    'clamp_to_byte',
    'rgb_to_luma_fixed_point',
    'rgb_to_chroma_fixed_point',
    'rgb_to_yuv_fixed_point',
    'frame_sizes',
    'create_yuv_buffer',
    'as_pixel_array',
    'split_planes',
]
