from streamlit.testing.v1 import AppTest

from playground.models import DESCRIPTIONS, Regime

APP_PATH = "../app.py"


def _markdown(at):
    return [md.value for md in at.markdown]


def test_app_renders_default_overfit():
    at = AppTest.from_file(APP_PATH, default_timeout=30).run()
    assert not at.exception
    assert at.session_state["data_seed"] == 1
    assert DESCRIPTIONS[Regime.OVERFIT] in _markdown(at)


def test_complexity_one_shows_underfitting():
    at = AppTest.from_file(APP_PATH, default_timeout=30).run()
    at.slider(key="complexity").set_value(1).run()
    assert not at.exception
    assert DESCRIPTIONS[Regime.UNDERFIT] in _markdown(at)


def test_regenerate_increments_seed():
    at = AppTest.from_file(APP_PATH, default_timeout=30).run()
    at.button(key="regenerate").click().run()
    assert not at.exception
    assert at.session_state["data_seed"] == 2
