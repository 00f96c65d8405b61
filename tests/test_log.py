import pytest

from photo_meta import log


@pytest.fixture(autouse=True)
def restore_level():
    level = log.LOG_LEVEL
    yield
    log.LOG_LEVEL = level


def test_format_line():
    line = log.format_line("INFO", "writer", "embedded %s (%d tags)", "a.jpg", 3)
    parts = line.split(" ", 4)
    assert parts[2:] == ["INFO", "writer", "embedded a.jpg (3 tags)"]


def test_level_filtering(capsys):
    logger = log.get_logger("test.filter")
    log.set_log_level("WARNING")
    logger.info("hidden")
    logger.warning("shown %s", 1)
    err = capsys.readouterr().err
    assert "hidden" not in err
    assert "WARNING test.filter shown 1" in err


def test_get_logger_is_cached():
    assert log.get_logger("same") is log.get_logger("same")


def test_unknown_level_rejected():
    with pytest.raises(ValueError):
        log.set_log_level("LOUD")
