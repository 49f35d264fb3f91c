from __future__ import annotations

from math import isclose

from flask.testing import FlaskClient


def projection_payload() -> dict:
    return {
        "initialDepositCD": 5000,
        "initialDepositHYSA": 1000,
        "cdRate": 4.25,
        "hysaRate": 4,
        "termMonths": 12,
        "cdCompoundingFrequency": "daily",
        "hysaCompoundingFrequency": "monthly",
        "regularContribution": 250,
        "contributionFrequency": "biweekly",
    }


def test_defaults_endpoint(client: FlaskClient):
    resp = client.get("/api/calc/defaults")

    assert resp.status_code == 200
    assert resp.get_json() == {
        "initialDepositCD": 5000.0,
        "initialDepositHYSA": 0.0,
        "cdRate": 4.25,
        "hysaRate": 4.0,
        "termMonths": 12,
        "cdCompoundingFrequency": "daily",
        "hysaCompoundingFrequency": "daily",
        "regularContribution": 250.0,
        "contributionFrequency": "monthly",
    }


def test_projection_endpoint_returns_full_result(client: FlaskClient):
    resp = client.post("/api/calc/projection", json=projection_payload())

    assert resp.status_code == 200
    body = resp.get_json()

    assert body["betterOption"] == "Combined"
    assert body["difference"] >= 0
    for key in ("cdMonthlyBalances", "hysaMonthlyBalances", "combinedMonthlyBalances"):
        assert len(body[key]) == 12
        assert body[key][0]["month"] == 1
        assert body[key][-1]["month"] == 12
    assert isclose(
        body["combinedFinalBalance"],
        body["cdFinalBalance"] + body["hysaFinalBalance"],
        abs_tol=1e-6,
    )
    assert isclose(body["totalContributions"], 6000 + 250 * 2.17 * 12, abs_tol=1e-6)


def test_defaults_round_trip_through_projection(client: FlaskClient):
    defaults = client.get("/api/calc/defaults").get_json()

    resp = client.post("/api/calc/projection", json=defaults)

    assert resp.status_code == 200
    assert resp.get_json()["betterOption"] == "Combined"


def test_comparison_endpoint(client: FlaskClient):
    resp = client.post("/api/calc/comparison", json=projection_payload())

    assert resp.status_code == 200
    body = resp.get_json()
    assert [row["month"] for row in body["checkpoints"]] == [2, 4, 6, 8, 12]
    assert all(row["bestOption"] == "Combined" for row in body["checkpoints"])
    assert len(body["differences"]) == 12
    assert set(body["differences"][0]) == {"month", "cdVsHysa", "combinedVsBestIndividual"}


def test_invalid_payload_returns_field_errors(client: FlaskClient):
    payload = projection_payload()
    payload["cdRate"] = -1
    payload["termMonths"] = 0

    resp = client.post("/api/calc/projection", json=payload)

    assert resp.status_code == 422
    body = resp.get_json()
    fields = {tuple(error["loc"]) for error in body["detail"]}
    assert fields == {("cdRate",), ("termMonths",)}
    assert all(error["msg"] for error in body["detail"])


def test_unknown_frequency_is_rejected(client: FlaskClient):
    payload = projection_payload()
    payload["contributionFrequency"] = "yearly"

    resp = client.post("/api/calc/comparison", json=payload)

    assert resp.status_code == 422
    assert resp.get_json()["detail"][0]["loc"] == ["contributionFrequency"]


def test_unexpected_field_is_rejected(client: FlaskClient):
    payload = projection_payload()
    payload["earlyWithdrawalPenalty"] = 90

    resp = client.post("/api/calc/projection", json=payload)

    assert resp.status_code == 422


def test_malformed_json_returns_400(client: FlaskClient):
    resp = client.post(
        "/api/calc/projection",
        data="{not json",
        content_type="application/json",
    )

    assert resp.status_code == 400


def test_huge_rate_returns_field_error(client: FlaskClient):
    payload = projection_payload()
    payload["hysaRate"] = 1e300

    resp = client.post("/api/calc/projection", json=payload)

    assert resp.status_code == 422
    assert resp.get_json()["detail"][0]["loc"] == ["hysaRate"]
