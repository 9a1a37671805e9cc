from streamlit.testing.v1 import AppTest

APP_PATH = "../streamlit_app.py"


def test_sessions_get_their_own_event_loop_and_clients():
    first = AppTest.from_file(APP_PATH, default_timeout=30).run()
    second = AppTest.from_file(APP_PATH, default_timeout=30).run()

    assert not first.exception
    assert not second.exception
    assert first.session_state["event_loop"] is not second.session_state["event_loop"]
    assert first.session_state["deps"] is not second.session_state["deps"]


def test_reruns_keep_the_session_event_loop():
    app = AppTest.from_file(APP_PATH, default_timeout=30).run()
    loop = app.session_state["event_loop"]

    app.run()

    assert app.session_state["event_loop"] is loop
    assert not loop.is_running()
