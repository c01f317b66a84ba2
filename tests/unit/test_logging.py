import io
import logging

import pytest

from salesboard_auth.infrastructure.logging import configure_logging, resolve_log_level


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("debug", logging.DEBUG),
        (" WARNING ", logging.WARNING),
        ("", logging.INFO),
        ("not-a-level", logging.INFO),
    ],
)
def test_resolve_log_level(value: str, expected: int) -> None:
    assert resolve_log_level(value) == expected


def test_configure_logging_writes_to_given_stream_not_stdout(
    capsys: pytest.CaptureFixture[str],
) -> None:
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    stream = io.StringIO()
    try:
        configure_logging(level="debug", stream=stream, force=True)
        logging.getLogger("salesboard_auth.test").debug("credential_record_malformed reason=x")
    finally:
        for handler in root.handlers[:]:
            root.removeHandler(handler)
        for handler in saved_handlers:
            root.addHandler(handler)
        root.setLevel(saved_level)

    assert "DEBUG [salesboard_auth.test] credential_record_malformed reason=x" in stream.getvalue()
    assert capsys.readouterr().out == ""
