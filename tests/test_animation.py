from types import SimpleNamespace

import pytest

from katana.animation import Animation, Frame


def make_animation(count=3, seconds=0.5):
    anim = Animation()
    anim.frames = [Frame(i * 10, 0, 10, 10) for i in range(count)]
    anim.seconds_per_frame = seconds
    anim.set_current_frame(0)
    return anim


def tick(seconds):
    return SimpleNamespace(elapsed_time=seconds)


def test_update_advances_after_frame_time():
    anim = make_animation()
    anim.update(tick(0.2))
    assert anim.current_index == 0
    anim.update(tick(0.3))
    assert anim.current_index == 1
    assert anim.current_frame == anim.frames[1]


def test_infinite_loop_wraps():
    anim = make_animation(count=2)
    for _ in range(2):
        anim.update(tick(0.5))
    assert anim.current_index == 0
    assert anim.is_playing


def test_zero_loops_stops_at_end():
    anim = make_animation(count=2)
    anim.set_loop_count(0)
    anim.update(tick(0.5))
    anim.update(tick(0.5))
    assert not anim.is_playing
    assert anim.current_index == 0
    anim.update(tick(0.5))
    assert anim.current_index == 0


def test_single_extra_loop_then_stops():
    anim = make_animation(count=2)
    anim.set_loop_count(1)
    for _ in range(2):
        anim.update(tick(0.5))
    assert anim.is_playing
    assert anim.current_index == 0
    for _ in range(2):
        anim.update(tick(0.5))
    assert not anim.is_playing


def test_paused_animation_does_not_advance():
    anim = make_animation()
    anim.pause()
    anim.update(tick(5.0))
    assert anim.current_index == 0
    anim.play()
    anim.update(tick(0.5))
    assert anim.current_index == 1


def test_set_current_frame_ignores_invalid_index():
    anim = make_animation(count=3)
    anim.set_current_frame(2)
    assert anim.current_index == 2
    anim.set_current_frame(3)
    anim.set_current_frame(-1)
    assert anim.current_index == 2


def test_stop_resets_to_first_frame():
    anim = make_animation()
    anim.set_current_frame(2)
    anim.stop()
    assert anim.current_index == 0
    assert not anim.is_playing


def test_clone_is_independent():
    anim = make_animation()
    anim.texture = object()
    anim.set_current_frame(1)
    copy = anim.clone()
    assert copy is not anim
    assert copy.texture is anim.texture
    assert copy.frames == anim.frames
    assert copy.current_index == 1
    copy.update(tick(0.5))
    assert copy.current_index == 2
    assert anim.current_index == 1
    assert anim.cloneable


class FakeManager:
    def __init__(self):
        self.requests = []
        self.texture = object()

    def load(self, kind, path):
        self.requests.append((kind.__name__, path))
        return self.texture


def test_load_parses_file(tmp_path):
    source = tmp_path / "walk.anim"
    source.write_text(
        "// sprite sheet\n"
        "sheet.png   // the texture\n"
        "\n"
        "0.25\n"
        "0,0,32,32\n"
        "32,0,32,32 // second\n",
        encoding="utf-8",
    )
    manager = FakeManager()
    anim = Animation()
    anim.load(str(source), manager)
    assert manager.requests == [("Texture", "sheet.png")]
    assert anim.texture is manager.texture
    assert anim.seconds_per_frame == 0.25
    assert anim.frames == [Frame(0, 0, 32, 32), Frame(32, 0, 32, 32)]


def test_load_rejects_short_frame(tmp_path):
    source = tmp_path / "bad.anim"
    source.write_text("sheet.png\n0.5\n1,2,3\n", encoding="utf-8")
    with pytest.raises(ValueError):
        Animation().load(str(source), FakeManager())


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        Animation().load(str(tmp_path / "absent.anim"), FakeManager())