import random

import pytest

from samplecollector.app.ui.main_window import MainWindow


@pytest.fixture
def window(qapp):
    win = MainWindow(rng=random.Random(7))
    yield win
    win.deleteLater()


def test_status_bar_shows_session_status_at_startup(window):
    assert window.session_status.text() == window.session.status_text()
    assert window.session_status.text().endswith("Entry count: 0")


def test_session_status_survives_notifications(window, make_payload):
    outcome = window.session.submit(make_payload())
    window._on_submitted(outcome)

    assert window.statusBar().currentMessage() == outcome.message
    assert window.session_status.text().endswith("Entry count: 1")

    # the notification expires, the permanent status does not
    window.statusBar().clearMessage()
    assert window.statusBar().currentMessage() == ""
    assert window.session_status.text() == window.session.status_text()


def test_form_submit_refreshes_status_and_resets_project_name(window):
    window.form_panel.project_name.setText("Viaduc-Est")
    window.form_panel.submit_button.click()

    assert window.session.store.count() == 1
    assert window.session.table()[0]["Project Name"] == "Viaduc-Est"
    assert window.session_status.text().endswith("Entry count: 1")
    assert window.form_panel.project_name.text().startswith("P-")
