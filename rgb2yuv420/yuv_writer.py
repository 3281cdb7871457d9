"""Модуль для записи YUV буферов в файлы (raw .yuv и Y4M)."""

import numpy as np
from pathlib import Path
from typing import BinaryIO, Dict, List, Optional, Sequence, Tuple

from .utils.constants import LAYOUT_PLANAR, Y4M_COLORSPACE, Y4M_COLOR_RANGE
from .utils.yuv_utils import frame_sizes, split_planes


def output_name(stem: str, width: int, height: int, layout: str, extension: str = "yuv") -> str:
    """Формирует имя выходного файла вида <stem>_<W>x<H>_<layout>.<ext>."""
    return f"{stem}_{width}x{height}_{layout}.{extension}"


class YuvWriter:
    """Класс для записи YUV 4:2:0 буферов на диск."""
    
    def __init__(self, output_dir: str = "output"):
        """
        Инициализирует writer.
        
        Args:
            output_dir: Директория для выходных файлов
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
    
    def write_raw(self, yuv: np.ndarray, filename: str) -> Path:
        """
        Записывает буфер в файл без заголовка.
        
        Args:
            yuv: Буфер YUV (planar или NV12)
            filename: Имя выходного файла
            
        Returns:
            Path: Путь к записанному файлу
        """
        path = self.output_dir / filename
        with open(path, 'wb') as f:
            f.write(np.asarray(yuv, dtype=np.uint8).tobytes())
        return path
    
    def write_y4m_header(self, file: BinaryIO, width: int, height: int, fps: int) -> None:
        """
        Записывает заголовок Y4M файла (4:2:0, полный диапазон).
        
        Args:
            file: Файловый объект для записи
            width: Ширина кадра
            height: Высота кадра
            fps: Частота кадров
        """
        header = (f"YUV4MPEG2 W{width} H{height} F{fps}:1 Ip A1:1 "
                  f"C{Y4M_COLORSPACE} XCOLORRANGE={Y4M_COLOR_RANGE}\n")
        file.write(header.encode('ascii'))
    
    def write_y4m_frame(self, file: BinaryIO, frame: Dict[str, np.ndarray]) -> None:
        """
        Записывает кадр в Y4M файл.
        
        Args:
            file: Файловый объект для записи
            frame: Буфер кадра с Y, U и V плоскостями
        """
        file.write(b"FRAME\n")
        file.write(frame['Y'].tobytes())
        file.write(frame['U'].tobytes())
        file.write(frame['V'].tobytes())
    
    def write_y4m(
        self,
        frames: Sequence[np.ndarray],
        width: int,
        height: int,
        fps: int = 30,
        filename: str = "output.y4m"
    ) -> Path:
        """
        Записывает последовательность planar буферов в Y4M файл.
        
        Args:
            frames: Буферы YUV420p, полученные от convert_to_planar
            width: Ширина кадра
            height: Высота кадра
            fps: Частота кадров
            filename: Имя выходного файла
            
        Returns:
            Path: Путь к Y4M файлу
        """
        if width % 2 or height % 2:
            raise ValueError(f"Y4M 4:2:0 требует четных размеров, получено {width}x{height}")
        
        y4m_path = self.output_dir / filename
        with open(y4m_path, 'wb') as f:
            self.write_y4m_header(f, width, height, fps)
            for yuv in frames:
                self.write_y4m_frame(f, split_planes(yuv, width, height, LAYOUT_PLANAR))
        
        return y4m_path
    
    def read_y4m_frame(self, file: BinaryIO, width: int, height: int) -> Optional[np.ndarray]:
        """
        Читает один кадр из Y4M файла.
        
        Args:
            file: Файловый объект для чтения
            width: Ширина кадра
            height: Высота кадра
            
        Returns:
            Optional[np.ndarray]: Буфер YUV420p или None в конце файла
        """
        # Пропускаем заголовок кадра
        frame_header = file.readline()
        if not frame_header.startswith(b"FRAME"):
            return None
        
        _, _, total_size = frame_sizes(width, height)
        data = file.read(total_size)
        if len(data) != total_size:
            return None
        
        return np.frombuffer(data, dtype=np.uint8)
    
    def read_y4m(self, path: Path) -> Tuple[int, int, List[np.ndarray]]:
        """
        Читает Y4M файл целиком.
        
        Args:
            path: Путь к Y4M файлу
            
        Returns:
            Tuple[int, int, List[np.ndarray]]: Ширина, высота и список буферов YUV420p
        """
        with open(path, 'rb') as f:
            header = f.readline().decode('ascii').split()
            if not header or header[0] != "YUV4MPEG2":
                raise ValueError(f"Не Y4M файл: {path}")
            
            params = {token[0]: token[1:] for token in header[1:]}
            width = int(params['W'])
            height = int(params['H'])
            
            frames = []
            while True:
                frame = self.read_y4m_frame(f, width, height)
                if frame is None:
                    break
                frames.append(frame)
        
        return width, height, frames
