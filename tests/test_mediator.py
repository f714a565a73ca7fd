import pytest
from PIL import Image

from diffblend.blender import BlendMode, blend
from diffblend.mediator import Mediator


def _save(tmp_path, name, color, size=(3, 2)):
    path = tmp_path / name
    Image.new("RGBA", size, color).save(path)
    return path


@pytest.fixture
def frames(tmp_path):
    first = _save(tmp_path, "a.png", (0, 0, 0, 255))
    second = _save(tmp_path, "b.png", (200, 100, 50, 255))
    return [first, second]


def test_load_counts_images(frames):
    mediator = Mediator()
    assert mediator.load_images(frames) == 2
    assert len(mediator.images) == 2


def test_unreadable_files_are_skipped(tmp_path, frames):
    bogus = tmp_path / "broken.png"
    bogus.write_bytes(b"not an image")
    missing = tmp_path / "missing.png"
    mediator = Mediator()
    assert mediator.load_images([frames[0], bogus, missing, frames[1]]) == 2


def test_reload_replaces_buffer(frames):
    mediator = Mediator()
    mediator.load_images(frames)
    assert mediator.load_images(frames[:1]) == 1
    assert len(mediator.images) == 1


def test_file_urls_are_accepted(frames):
    mediator = Mediator()
    assert mediator.load_images([path.as_uri() for path in frames]) == 2


def test_default_threshold_matches_source():
    assert Mediator().threshold == 30


def test_process_matches_blend(frames):
    mediator = Mediator(threshold=10)
    mediator.load_images(frames)
    for mode in BlendMode:
        expected = blend(list(mediator.images), mode, 10)
        assert mediator.process(mode).tobytes() == expected.tobytes()


def test_set_threshold_changes_result(frames):
    mediator = Mediator()
    mediator.load_images(frames)
    mediator.set_threshold(0)
    low = mediator.process(BlendMode.TRAIL_V3)
    mediator.set_threshold(250)
    high = mediator.process(BlendMode.TRAIL_V3)
    assert mediator.threshold == 250
    assert low.getpixel((0, 0)) == (255, 255, 255, 255)
    assert high.getpixel((0, 0)) == (0, 0, 0, 255)


def test_process_keeps_image_size(frames):
    mediator = Mediator()
    mediator.load_images(frames)
    assert mediator.process(BlendMode.TRAIL).size == (3, 2)


def test_process_empty_buffer_raises():
    with pytest.raises(ValueError):
        Mediator().process(BlendMode.TRAIL)


def test_process_unknown_mode_raises(frames):
    mediator = Mediator()
    mediator.load_images(frames)
    with pytest.raises(ValueError):
        mediator.process(9)