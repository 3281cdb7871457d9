"""Пакет для преобразования RGB(A) изображений в YUV 4:2:0."""

from .converter import (
    convert,
    convert_to_planar,
    convert_to_semi_planar_nv12,
    convert_planar,
    convert_semi_planar_nv12,
)
from .image_loader import RgbImage, load_rgb_image
from .yuv_writer import YuvWriter, output_name

__all__ = [
    'convert',
    'convert_to_planar',
    'convert_to_semi_planar_nv12',
    'convert_planar',
    'convert_semi_planar_nv12',
    'RgbImage',
    'load_rgb_image',
    'YuvWriter',
    'output_name',
]
