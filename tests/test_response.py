"""
Unit tests for response normalisation.
"""

import pytest

from geofox import ApiError, HttpError, UnrecognizedResponse
from geofox.response import ApiResult, check_response, extract_data, normalize_response


class TestCheckResponse:
    """Test envelope classification."""

    def test_ok(self):
        result = check_response({"returnCode": "OK", "foo": "bar"})

        assert result.ok
        assert result.data == {"returnCode": "OK", "foo": "bar"}
        assert result.error is None

    def test_error_with_text(self):
        result = check_response({"returnCode": "ERROR_TEXT", "errorText": "bad input"})

        assert not result.ok
        assert result.error == ApiError("ERROR_TEXT", "bad input")
        assert (result.error.code, result.error.message) == ("ERROR_TEXT", "bad input")

    def test_error_without_text(self):
        result = check_response({"returnCode": "ERROR_TEXT"})

        assert result.error == ApiError("ERROR_TEXT", "Unknown error")

    def test_error_keeps_extra_fields_out(self):
        result = check_response({"returnCode": "ERROR_ROUTE", "errorText": "no route", "errorDevInfo": "x"})

        assert result.error == ApiError("ERROR_ROUTE", "no route")

    def test_missing_return_code(self):
        envelope = {"foo": "bar"}
        result = check_response(envelope)

        assert isinstance(result.error, UnrecognizedResponse)
        assert result.error.raw == envelope

    @pytest.mark.parametrize("envelope", [None, [], "OK", 42])
    def test_not_a_mapping(self, envelope):
        result = check_response(envelope)

        assert isinstance(result.error, UnrecognizedResponse)
        assert result.error.raw == envelope


class TestNormalizeResponse:
    """Test HTTP level classification."""

    def test_http_500(self):
        """Test that non-2xx bodies are not parsed."""
        result = normalize_response(500, "Internal Server Error")

        assert result.error == HttpError(500, "Internal Server Error")

    def test_http_error_bytes_body(self):
        result = normalize_response(503, b"Service Unavailable")

        assert result.error == HttpError(503, "Service Unavailable")

    def test_2xx_envelope(self):
        result = normalize_response(200, b'{"returnCode":"OK","time":{"date":"15.01.2024"}}')

        assert result.data == {"returnCode": "OK", "time": {"date": "15.01.2024"}}

    def test_2xx_not_json(self):
        result = normalize_response(200, "not json")

        assert isinstance(result.error, UnrecognizedResponse)
        assert result.error.raw == "not json"

    def test_2xx_error_envelope(self):
        result = normalize_response(200, '{"returnCode":"ERROR_CN_TOO_MANY","errorText":"too many"}')

        assert result.error == ApiError("ERROR_CN_TOO_MANY", "too many")

    def test_2xx_invalid_utf8_rejected(self):
        """Test that undecodable bytes in an envelope are not accepted as success."""
        result = normalize_response(200, b'{"returnCode":"OK","name":"\xff"}')

        assert isinstance(result.error, UnrecognizedResponse)
        assert result.error.raw == '{"returnCode":"OK","name":"�"}'

    def test_2xx_utf8_envelope(self):
        result = normalize_response(200, '{"returnCode":"OK","name":"Mönckebergstraße"}'.encode('utf-8'))

        assert result.data == {"returnCode": "OK", "name": "Mönckebergstraße"}

    def test_http_error_invalid_utf8_kept_as_text(self):
        result = normalize_response(502, b"bad \xff gateway")

        assert result.error == HttpError(502, "bad � gateway")


class TestApiResult:
    """Test result accessors."""

    def test_unwrap_success(self):
        envelope = {"returnCode": "OK"}

        assert ApiResult.success(envelope).unwrap() is envelope

    def test_unwrap_failure(self):
        with pytest.raises(ApiError) as excinfo:
            ApiResult.failure(ApiError("ERROR_COMM", "down")).unwrap()

        assert excinfo.value.code == "ERROR_COMM"

    def test_bool(self):
        assert ApiResult.success({"returnCode": "OK"})
        assert not ApiResult.failure(ApiError("E", "m"))

    def test_extract_data(self):
        assert extract_data({"returnCode": "OK", "a": 1}) == {"returnCode": "OK", "a": 1}

        with pytest.raises(ApiError):
            extract_data({"returnCode": "ERROR_TEXT", "errorText": "bad"})

        with pytest.raises(UnrecognizedResponse):
            extract_data({"foo": "bar"})
