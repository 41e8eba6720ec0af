from airmirror.logger import LogLevel, Logger, console_log


def _collecting_logger():
    logger = Logger()
    received = []
    logger.set_callback(lambda level, msg: received.append((level, msg)))
    return logger, received


def test_default_level_is_warning():
    logger = Logger()
    assert logger.level == LogLevel.WARNING


def test_messages_above_level_are_dropped():
    logger, received = _collecting_logger()
    logger.log(LogLevel.INFO, "ignored")
    logger.log(LogLevel.ERR, "kept")
    assert received == [(LogLevel.ERR, "kept")]


def test_set_level_lets_debug_through():
    logger, received = _collecting_logger()
    logger.set_level(LogLevel.DEBUG)
    logger.log(LogLevel.DEBUG, "socket %d", 7)
    assert received == [(LogLevel.DEBUG, "socket 7")]


def test_equal_level_is_kept():
    logger, received = _collecting_logger()
    logger.log(LogLevel.WARNING, "edge")
    assert received == [(LogLevel.WARNING, "edge")]


def test_percent_without_args_is_literal():
    logger, received = _collecting_logger()
    logger.log(LogLevel.ERR, "100% done")
    assert received[0][1] == "100% done"


def test_long_message_is_truncated():
    logger, received = _collecting_logger()
    logger.log(LogLevel.ERR, "x" * 5000)
    assert len(received[0][1]) == 4094


def test_without_callback_writes_stderr(capsys):
    logger = Logger()
    logger.log(LogLevel.ERR, "Accepted %s client", "IPv4")
    captured = capsys.readouterr()
    assert captured.err == "Accepted IPv4 client\n"
    assert captured.out == ""


def test_clearing_callback_restores_stderr(capsys):
    logger, received = _collecting_logger()
    logger.set_callback(None)
    logger.log(LogLevel.ERR, "back")
    assert received == []
    assert capsys.readouterr().err == "back\n"


def test_console_log_prints_to_stdout(capsys):
    console_log(4, "value %s", "abc")
    assert capsys.readouterr().out == "value abc\n"