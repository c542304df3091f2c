"""Tests for Distance Matrix response parsing."""

from transit_planner.models.distance_matrix import (
    DistanceMatrixResponse,
    ElementRejected,
    ResponseRejected,
    TravelTimeFound,
)


def _response(status: str = "OK", elements: list | None = None) -> dict:
    if elements is None:
        elements = [
            {
                "status": "OK",
                "duration": {"text": "5 Min.", "value": 300},
                "distance": {"text": "1,2 km", "value": 1200},
            }
        ]
    return {
        "status": status,
        "origin_addresses": ["Stephansplatz, 1010 Wien, Österreich"],
        "destination_addresses": ["Karlsplatz, 1040 Wien, Österreich"],
        "rows": [{"elements": elements}],
    }


def test_ok_response_yields_travel_time():
    """An OK element with a duration yields the duration and its text."""
    response = DistanceMatrixResponse.model_validate(_response())

    result = response.travel_time()

    assert result == TravelTimeFound(duration_seconds=300, duration_text="5 Min.", status="OK")


def test_top_level_failure_is_response_rejected():
    """A non-OK top-level status is reported with that status."""
    response = DistanceMatrixResponse.model_validate({"status": "REQUEST_DENIED", "rows": []})

    assert response.travel_time() == ResponseRejected(status="REQUEST_DENIED")


def test_ok_without_rows_is_response_rejected():
    """An OK status with no rows is still a response-level failure."""
    response = DistanceMatrixResponse.model_validate({"status": "OK", "rows": []})

    assert response.travel_time() == ResponseRejected(status="OK")


def test_ok_without_elements_is_response_rejected():
    """A row without elements is a response-level failure."""
    response = DistanceMatrixResponse.model_validate(_response(elements=[]))

    assert response.travel_time() == ResponseRejected(status="OK")


def test_element_failure_is_element_rejected():
    """A non-OK element status is reported with the element's status."""
    response = DistanceMatrixResponse.model_validate(
        _response(elements=[{"status": "ZERO_RESULTS"}])
    )

    assert response.travel_time() == ElementRejected(status="ZERO_RESULTS")


def test_element_without_duration_is_element_rejected():
    """An OK element missing its duration cannot be used."""
    response = DistanceMatrixResponse.model_validate(_response(elements=[{"status": "OK"}]))

    assert response.travel_time() == ElementRejected(status="OK")


def test_extra_fields_are_ignored():
    """Unknown fields (e.g. fare) do not break parsing."""
    data = _response()
    data["rows"][0]["elements"][0]["fare"] = {"currency": "EUR", "value": 2.4}
    data["unexpected"] = True

    response = DistanceMatrixResponse.model_validate(data)

    assert isinstance(response.travel_time(), TravelTimeFound)
