import pytest

from cvmattest.errors import AttestationError, ErrorCode


def test_error_keeps_code_and_description():
    err = AttestationError(ErrorCode.ERROR_PARSING_DNS_INFO, "Error extracting DNS info from URL")
    assert err.code is ErrorCode.ERROR_PARSING_DNS_INFO
    assert err.description == "Error extracting DNS info from URL"


def test_error_message_mentions_code_and_description():
    err = AttestationError(ErrorCode.ERROR_INVALID_INPUT_PARAMETER, "Invalid input parameter")
    text = str(err)
    assert "ERROR_INVALID_INPUT_PARAMETER" in text
    assert "Invalid input parameter" in text


def test_error_is_an_exception_carrying_code_and_description():
    err = AttestationError(ErrorCode.ERROR_HTTP_REQUEST_FAILED, "boom")
    assert isinstance(err, Exception)
    assert err.code is ErrorCode.ERROR_HTTP_REQUEST_FAILED
    assert err.description == "boom"
    assert "ERROR_HTTP_REQUEST_FAILED" in str(err)
    assert "boom" in str(err)


@pytest.mark.parametrize("code", list(ErrorCode))
def test_every_code_is_reported_by_name(code):
    err = AttestationError(code, "detail")
    assert err.code is code
    assert code.name in str(err)
    assert "detail" in str(err)


def test_error_logs_on_creation(caplog):
    with caplog.at_level("ERROR"):
        AttestationError(ErrorCode.ERROR_ATTESTATION_FAILED, "denied")
    assert any("denied" in record.getMessage() for record in caplog.records)