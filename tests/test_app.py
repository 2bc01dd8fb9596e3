from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

from double_slit import config
from double_slit.storage import ConfigurationStore

APP_PATH = str(Path(__file__).resolve().parents[1] / "app.py")


@pytest.fixture
def app(tmp_path, monkeypatch):
    monkeypatch.setenv("DOUBLE_SLIT_DB_PATH", str(tmp_path / "app.db"))
    at = AppTest.from_file(APP_PATH, default_timeout=60)
    at.run()
    return at


def test_app_renders_with_defaults(app):
    assert not app.exception
    assert len(app.slider) == 3
    assert app.slider(key="wavelength_nm").value == config.DEFAULT_WAVELENGTH_NM
    controller = app.session_state["controller"]
    assert controller.frames_committed == 1


def test_slider_change_triggers_render(app):
    app.slider(key="wavelength_nm").set_value(650.0).run()
    assert not app.exception
    controller = app.session_state["controller"]
    assert controller.frames_committed == 2
    assert controller.last_committed[0].wavelength_nm == 650.0


def test_reset_restores_defaults(app):
    app.slider(key="distance_cm").set_value(20.0).run()
    reset = next(b for b in app.button if b.label == "Reset to defaults")
    reset.click().run()
    assert not app.exception
    assert app.slider(key="distance_cm").value == config.DEFAULT_DISTANCE_CM


def test_load_saved_configuration(tmp_path, monkeypatch):
    db_path = str(tmp_path / "saved.db")
    monkeypatch.setenv("DOUBLE_SLIT_DB_PATH", db_path)
    seed = ConfigurationStore(db_path)
    seed.create("Red", 650, 1.0, 50)
    seed.close()

    at = AppTest.from_file(APP_PATH, default_timeout=60)
    at.run()
    load = next(b for b in at.button if b.label == "Load")
    load.click().run()

    assert not at.exception
    assert at.slider(key="wavelength_nm").value == 650.0
    assert at.slider(key="separation_mm").value == 1.0
    assert at.slider(key="distance_cm").value == 50.0
    assert at.session_state["controller"].last_committed[0].wavelength_nm == 650.0
