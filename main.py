#!/usr/bin/env python3
"""
Конвертер изображений (PNG, JPEG и др.) в YUV 4:2:0 полного диапазона.

Пример использования:
    python main.py photo.png --layout nv12 --output-dir output
    python main.py frame_*.png --format y4m --fps 25
"""

import sys
import argparse
from pathlib import Path
from typing import List, Optional

from tqdm import tqdm

from rgb2yuv420.converter import convert
from rgb2yuv420.image_loader import load_rgb_image
from rgb2yuv420.yuv_writer import YuvWriter, output_name
from rgb2yuv420.utils.constants import LAYOUTS, LAYOUT_PLANAR


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Парсит аргументы командной строки.
    
    Returns:
        argparse.Namespace: Распарсенные аргументы
    """
    parser = argparse.ArgumentParser(
        description="Конвертер RGB(A) изображений в YUV 4:2:0 (полный диапазон, 8 бит)."
    )
    
    parser.add_argument("inputs", nargs="+", help="Входные изображения")
    parser.add_argument("--layout", choices=LAYOUTS, default=LAYOUT_PLANAR,
                      help="Раскладка: planar (I420) или nv12")
    parser.add_argument("--format", choices=("yuv", "y4m"), default="yuv",
                      help="Формат выходного файла")
    parser.add_argument("--fps", type=int, default=30, help="Частота кадров для Y4M")
    parser.add_argument("--output-dir", type=str, default="output",
                      help="Директория для выходных файлов")
    parser.add_argument("--debug", action="store_true", help="Режим отладки")
    
    args = parser.parse_args(argv)
    if args.format == "y4m" and args.layout != LAYOUT_PLANAR:
        parser.error("Формат y4m поддерживает только раскладку planar")
    
    return args


def convert_file(input_path: Path, writer: YuvWriter, layout: str, file_format: str, fps: int) -> Path:
    """
    Конвертирует одно изображение и записывает результат.
    
    Args:
        input_path: Путь к изображению
        writer: Writer для выходных файлов
        layout: Раскладка YUV буфера
        file_format: "yuv" или "y4m"
        fps: Частота кадров для Y4M
        
    Returns:
        Path: Путь к выходному файлу
    """
    image = load_rgb_image(input_path)
    yuv = convert(image.pixels, image.width, image.height, image.bytes_per_pixel, layout)
    
    filename = output_name(input_path.stem, image.width, image.height, layout, file_format)
    if file_format == "y4m":
        return writer.write_y4m([yuv], image.width, image.height, fps, filename)
    return writer.write_raw(yuv, filename)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Основная функция программы.
    
    Returns:
        int: Код возврата (0 - успех, 1 - были ошибки)
    """
    args = parse_args(argv)
    writer = YuvWriter(output_dir=args.output_dir)
    
    converted = []
    failed = []
    for input_name in tqdm(args.inputs, desc="Конвертация", disable=len(args.inputs) < 2):
        input_path = Path(input_name)
        try:
            converted.append(convert_file(input_path, writer, args.layout, args.format, args.fps))
        except (OSError, ValueError) as e:
            print(f"❌ {input_path}: {e}")
            if args.debug:
                import traceback
                traceback.print_exc()
            failed.append(input_path)
    
    for path in converted:
        print(f"✅ {path}")
    print(f"Готово: {len(converted)} из {len(args.inputs)}")
    
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
