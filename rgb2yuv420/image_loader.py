"""Модуль для чтения изображений (PNG, JPEG и др.) в буфер RGB(A) пикселей."""

import cv2
import numpy as np
from dataclasses import dataclass
from pathlib import Path
from typing import Union


@dataclass
class RgbImage:
    """Декодированное изображение: пиксели построчно, первые три байта пикселя - R, G, B."""
    pixels: np.ndarray
    width: int
    height: int
    bytes_per_pixel: int
    
    @property
    def stride(self) -> int:
        """Размер строки в байтах."""
        return self.width * self.bytes_per_pixel


def load_rgb_image(path: Union[str, Path]) -> RgbImage:
    """
    Читает изображение и приводит его к порядку каналов RGB или RGBA.
    
    Args:
        path: Путь к файлу изображения
        
    Returns:
        RgbImage: Пиксели и геометрия изображения
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Файл не найден: {path}")
    
    image = cv2.imread(str(path), cv2.IMREAD_UNCHANGED)
    if image is None:
        raise FileNotFoundError(f"Не удалось декодировать изображение: {path}")
    
    if image.dtype != np.uint8:
        raise ValueError(f"Поддерживается только 8 бит на канал, получено {image.dtype}: {path}")
    
    # OpenCV хранит каналы в порядке BGR(A)
    if image.ndim == 2:
        image = cv2.cvtColor(image, cv2.COLOR_GRAY2RGB)
    elif image.shape[2] == 3:
        image = cv2.cvtColor(image, cv2.COLOR_BGR2RGB)
    elif image.shape[2] == 4:
        image = cv2.cvtColor(image, cv2.COLOR_BGRA2RGBA)
    else:
        raise ValueError(f"Неподдерживаемое количество каналов {image.shape[2]}: {path}")
    
    height, width, bytes_per_pixel = image.shape
    return RgbImage(
        pixels=np.ascontiguousarray(image),
        width=width,
        height=height,
        bytes_per_pixel=bytes_per_pixel
    )
