import pytest
from pydantic import ValidationError

from coreason_agent_tools.models import (
    NO_CODE_MESSAGE,
    ExecutionError,
    ExecutionFailure,
    ExecutionRequest,
    ExecutionSuccess,
    WeatherError,
    WeatherRequest,
)


def test_execution_request_trims_code() -> None:
    request = ExecutionRequest(code="  print(1)\n")
    assert request.code == "print(1)"


@pytest.mark.parametrize("code", ["", "   ", "\n\t ", None, 42])
def test_execution_request_rejects_missing_code(code: object) -> None:
    with pytest.raises(ValidationError, match=NO_CODE_MESSAGE):
        ExecutionRequest(code=code)


def test_execution_request_is_immutable() -> None:
    request = ExecutionRequest(code="pass")
    with pytest.raises(ValidationError):
        request.code = "other"  # type: ignore[misc]


def test_success_response_shape() -> None:
    result = ExecutionSuccess(stdout="4\n", stderr="")
    assert result.to_response() == {"stdout": "4\n", "stderr": "", "exitCode": 0, "success": True}


def test_failure_response_shape() -> None:
    result = ExecutionFailure(stdout="", stderr="boom", exit_code=3)
    assert result.to_response() == {"stdout": "", "stderr": "boom", "exitCode": 3, "success": False}


def test_failure_requires_non_zero_exit_code() -> None:
    with pytest.raises(ValidationError):
        ExecutionFailure(stdout="", stderr="", exit_code=0)


def test_error_response_has_no_streams() -> None:
    response = ExecutionError(error="nope").to_response()
    assert response == {"error": "nope", "exitCode": -1}
    assert "stdout" not in response
    assert "stderr" not in response


def test_weather_request_bounds() -> None:
    WeatherRequest(latitude=-90, longitude=180, forecast_days=14)
    with pytest.raises(ValidationError):
        WeatherRequest(latitude=91, longitude=0)
    with pytest.raises(ValidationError):
        WeatherRequest(latitude=0, longitude=-181)
    with pytest.raises(ValidationError):
        WeatherRequest(latitude=0, longitude=0, forecast_days=15)


def test_weather_request_query_params() -> None:
    request = WeatherRequest(latitude=35.6762, longitude=139.6503, daily=("temperature_2m_max", "weathercode"))
    params = request.query_params()
    assert params == {
        "latitude": "35.6762",
        "longitude": "139.6503",
        "daily": "temperature_2m_max,weathercode",
        "timezone": "auto",
        "forecast_days": "3",
    }


def test_weather_error_omits_empty_detail() -> None:
    assert WeatherError(error="bad").to_response() == {"error": "bad"}
    assert WeatherError(error="bad", detail="why").to_response() == {"error": "bad", "detail": "why"}
