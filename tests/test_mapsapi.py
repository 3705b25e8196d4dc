import pytest
import responses

from worldle.mapsapi import GEOCODE_URL, MapsApiError, geocode, maps_api, maps_api_key


def _result(lat, lng):
    return {"results": [{"geometry": {"location": {"lat": lat, "lng": lng}}}]}


def test_maps_api_key_from_environment():
    assert maps_api_key({"MAPS_API_KEY": "placeholder"}) == "placeholder"


def test_maps_api_key_missing():
    with pytest.raises(MapsApiError):
        maps_api_key({})


def test_geocode_returns_coordinates():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, GEOCODE_URL, json=_result(46.2, 2.2))
        assert geocode("FRANCE", "placeholder") == (46.2, 2.2)
        sent = rsps.calls[0].request.url
    assert "address=FRANCE" in sent
    assert "key=placeholder" in sent


def test_geocode_uses_first_result():
    body = {"results": _result(1.0, 2.0)["results"] + _result(3.0, 4.0)["results"]}
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, GEOCODE_URL, json=body)
        assert geocode("SOMEWHERE", "placeholder") == (1.0, 2.0)


def test_geocode_empty_results_raise():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, GEOCODE_URL, json={"results": []})
        with pytest.raises(MapsApiError):
            geocode("NOWHERE", "placeholder")


def test_maps_api_bad_status():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, GEOCODE_URL, status=500)
        with pytest.raises(MapsApiError, match="500"):
            maps_api(GEOCODE_URL)


def test_maps_api_invalid_json():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, GEOCODE_URL, body="not json")
        with pytest.raises(MapsApiError):
            maps_api(GEOCODE_URL)


def test_maps_api_returns_object():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, GEOCODE_URL, json={"status": "OK"})
        assert maps_api(GEOCODE_URL) == {"status": "OK"}


def test_geocode_wraps_status_error():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, GEOCODE_URL, status=403)
        with pytest.raises(MapsApiError, match="failed to get geocode"):
            geocode("FRANCE", "placeholder")