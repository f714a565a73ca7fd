import pytest
from PIL import Image

from diffblend.cli import main


def _save(tmp_path, name, color):
    path = tmp_path / name
    Image.new("RGBA", (2, 2), color).save(path)
    return path


def test_writes_result(tmp_path):
    first = _save(tmp_path, "a.png", (0, 0, 0, 255))
    second = _save(tmp_path, "b.png", (255, 255, 255, 255))
    out = tmp_path / "out.png"
    assert main([str(first), str(second), "-o", str(out)]) == 0
    with Image.open(out) as result:
        assert result.size == (2, 2)
        assert result.convert("RGBA").getpixel((1, 1)) == (255, 255, 255, 255)


def test_high_threshold_leaves_black(tmp_path):
    first = _save(tmp_path, "a.png", (10, 10, 10, 255))
    second = _save(tmp_path, "b.png", (20, 20, 20, 255))
    out = tmp_path / "out.png"
    assert main([str(first), str(second), "-t", "200", "-m", "3", "-o", str(out)]) == 0
    with Image.open(out) as result:
        assert result.convert("RGBA").getpixel((0, 0)) == (0, 0, 0, 255)


def test_no_loadable_images_fails(tmp_path, capsys):
    out = tmp_path / "out.png"
    assert main([str(tmp_path / "missing.png"), "-o", str(out)]) == 1
    assert not out.exists()
    assert "no image" in capsys.readouterr().err


def test_invalid_mode_rejected(tmp_path):
    first = _save(tmp_path, "a.png", (0, 0, 0, 255))
    with pytest.raises(SystemExit) as excinfo:
        main([str(first), "-m", "7"])
    assert excinfo.value.code == 2


def test_missing_arguments_rejected():
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 2