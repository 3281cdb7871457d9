"""Tests for the command line interface"""

import cv2
import numpy as np
import pytest

import main


@pytest.fixture
def red_png(tmp_path):
    bgr = np.zeros((2, 4, 3), dtype=np.uint8)
    bgr[..., 2] = 255
    path = tmp_path / "red.png"
    cv2.imwrite(str(path), bgr)
    return path


class TestMain:
    
    def test_planar_yuv(self, tmp_path, red_png):
        out_dir = tmp_path / "out"
        code = main.main([str(red_png), "--output-dir", str(out_dir)])
        
        assert code == 0
        data = (out_dir / "red_4x2_planar.yuv").read_bytes()
        assert list(data) == [77] * 8 + [85, 85, 255, 255]
    
    def test_nv12_yuv(self, tmp_path, red_png):
        out_dir = tmp_path / "out"
        main.main([str(red_png), "--layout", "nv12", "--output-dir", str(out_dir)])
        
        data = (out_dir / "red_4x2_nv12.yuv").read_bytes()
        assert list(data) == [77] * 8 + [85, 255, 85, 255]
    
    def test_y4m(self, tmp_path, red_png):
        out_dir = tmp_path / "out"
        main.main([str(red_png), "--format", "y4m", "--fps", "24", "--output-dir", str(out_dir)])
        
        content = (out_dir / "red_4x2_planar.y4m").read_bytes()
        assert content.startswith(b"YUV4MPEG2 W4 H2 F24:1")
    
    def test_y4m_requires_planar(self, tmp_path, red_png):
        with pytest.raises(SystemExit):
            main.main([str(red_png), "--format", "y4m", "--layout", "nv12"])
    
    def test_batch_continues_after_failure(self, tmp_path, red_png, capsys):
        out_dir = tmp_path / "out"
        code = main.main([str(tmp_path / "missing.png"), str(red_png), "--output-dir", str(out_dir)])
        
        assert code == 1
        assert (out_dir / "red_4x2_planar.yuv").exists()
        assert "missing.png" in capsys.readouterr().out
