"""Tests for the OpenCV driver's camera start-up path."""

import app.main as main_mod
from app.config import AppConfig
from domain.enums import Phase
from domain.errors import AcquisitionError


class FakeUI:
    def __init__(self, keys):
        self.keys = list(keys)
        self.shown = []

    def render_blank(self, snapshot, width=640, height=480):
        self.shown.append(snapshot)

    def wait_key(self):
        return self.keys.pop(0)


class FlakyCamera:
    """Fails to open the first ``failures`` times."""

    failures = 0
    opened = 0

    def __init__(self, device, fps_limit):
        if FlakyCamera.failures > 0:
            FlakyCamera.failures -= 1
            raise AcquisitionError(f"cannot open camera {device}")
        FlakyCamera.opened += 1


def test_failed_open_is_shown_until_quit(monkeypatch, manager):
    FlakyCamera.failures = 99
    monkeypatch.setattr(main_mod, "Camera", FlakyCamera)
    ui = FakeUI(keys=[ord("x"), main_mod.KEY_ESC])

    assert main_mod._open_camera(AppConfig(), manager, ui) is None

    assert len(ui.shown) == 1
    assert ui.shown[0].is_failed
    assert "cannot open camera" in ui.shown[0].error


def test_retry_after_failed_open_starts_fresh_session(monkeypatch, manager):
    FlakyCamera.failures = 1
    FlakyCamera.opened = 0
    monkeypatch.setattr(main_mod, "Camera", FlakyCamera)
    ui = FakeUI(keys=[main_mod.KEY_RETRY])

    camera = main_mod._open_camera(AppConfig(), manager, ui)

    assert isinstance(camera, FlakyCamera)
    assert FlakyCamera.opened == 1
    assert ui.shown[0].is_failed
    assert manager.phase == Phase.GATE
    assert manager.snapshot().error == ""
