import logging

from samplecollector.logging_config import setup_logging


def test_repeated_setup_does_not_duplicate_handlers():
    setup_logging(level=logging.DEBUG)
    logger = setup_logging(level=logging.DEBUG)
    assert logger.name == "samplecollector"
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG


def test_log_file_receives_package_messages(tmp_path):
    log_file = tmp_path / "collector.log"
    setup_logging(level=logging.INFO, log_file=str(log_file))
    logging.getLogger("samplecollector.app.session").info("hello from the session")

    # re-running the setup closes (and flushes) the file handler
    setup_logging(level=logging.INFO)
    content = log_file.read_text(encoding="utf-8")
    assert "Logging initialized." in content
    assert "samplecollector.app.session - INFO - hello from the session" in content


def test_rejected_submission_is_logged(session, make_payload, caplog):
    with caplog.at_level(logging.WARNING, logger="samplecollector"):
        session.submit(make_payload(maxLoadKN=-10))
    assert any("maxLoadKN" in r.getMessage() for r in caplog.records)
