import pytest
from fastapi.testclient import TestClient

from svc_same.app import create_app


def post_same(client, elements):
    response = client.post("/v1/same", json={"elements": elements})
    assert response.status_code == 200, response.text
    return response.json()


class TestHealth:

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok", "env": "test", "cache": "memory"}


class TestSameEndpoint:

    @pytest.mark.parametrize(
        "elements, result, outcome",
        [
            ([{"id": 1}, {"id": 1}], True, "true"),
            ([{"id": 1}, {"id": 2}], False, "false"),
            ([{"source": 1, "target": 2, "label": "knows"}, {"source": 1, "target": 2, "label": "likes"}], True, "true"),
            ([{"source": 1, "target": 2}, {"source": 1, "target": 3}], False, "false"),
            ([{"id": 1}, {"source": 1, "target": 2}], False, "false"),
            ([None, {"id": 1}], None, "unknown"),
            ([{"id": 1}, {"id": 1}, {"id": 1}], True, "true"),
            ([{"id": 1}, None, {"id": 1}], None, "unknown"),
            ([], None, "unknown"),
            ([{"id": 1}], None, "unknown"),
            ([{"id": "x"}, {"id": "x"}], True, "true"),
            ([{"id": 1}, {"id": "1"}], False, "false"),
            (["test", "test"], False, "false"),
        ],
    )
    def test_scenarios(self, client, elements, result, outcome):
        body = post_same(client, elements)
        assert body["result"] is result
        assert body["outcome"] == outcome

    def test_reason_is_reported(self, client):
        assert post_same(client, [{"id": 1}, None, {"source": 1, "target": 2}])["reason"] == "absent_argument"
        assert post_same(client, [{"id": 1}, {"source": 1, "target": 2}])["reason"] == "kind_mismatch"
        assert post_same(client, [{"id": 1}, {"id": 2}])["reason"] == "identity_mismatch"
        assert post_same(client, [{"id": 1}, {"node_id": 1}])["reason"] == "identity_match"
        assert post_same(client, [])["reason"] == "insufficient_arguments"

    def test_properties_are_ignored(self, client):
        body = post_same(client, [
            {"id": 1, "data": {"name": "Alice", "age": 25}},
            {"id": 1, "properties": {"name": "Bob", "age": 30}},
        ])
        assert body["result"] is True

    def test_opaque_payload_shapes_are_accepted(self, client):
        body = post_same(client, [
            {"id": 1, "label": 5, "properties": [1, 2]},
            {"id": 1, "label": None, "data": "anything"},
            {"source": 1, "target": 2, "label": ["knows"]},
        ])
        assert body["outcome"] == "false"
        assert body["reason"] == "kind_mismatch"
        body = post_same(client, [
            {"source": 1, "target": 2, "label": 7, "properties": "x"},
            {"source": 1, "target": 2, "label": {"t": "likes"}},
        ])
        assert body["result"] is True

    def test_invalid_identifier_is_400(self, client):
        response = client.post("/v1/same", json={"elements": [{"id": 1.5}, {"id": 1}]})
        assert response.status_code == 400
        assert response.json()["type"] == "invalid_element"

    def test_too_many_arguments_is_422(self, client, settings):
        elements = [{"id": 1}] * (settings.max_arguments + 1)
        response = client.post("/v1/same", json={"elements": elements})
        assert response.status_code == 422
        assert response.json()["type"] == "argument_limit_exceeded"

    def test_missing_body_is_422(self, client):
        assert client.post("/v1/same").status_code == 422


class TestBatchEndpoint:

    payload = {
        "evaluations": [
            {"elements": [{"id": 1}, {"id": 1}]},
            {"elements": [{"id": 1}, None]},
            {"elements": [{"id": 1}, {"source": 1, "target": 2}]},
        ]
    }

    def test_results_in_order(self, client):
        response = client.post("/v1/same/batch", json=self.payload)
        assert response.status_code == 200
        assert [r["result"] for r in response.json()["results"]] == [True, None, False]

    def test_cache_headers(self, client, settings):
        response = client.post("/v1/same/batch", json=self.payload)
        assert response.headers["cache-control"] == f"public, max-age={settings.cache_api_ttl}"
        assert response.headers["etag"].startswith('"')

    def test_cached_response_is_reused(self, client, app):
        first = client.post("/v1/same/batch", json=self.payload)
        assert len(app.state.cache._store) == 1
        second = client.post("/v1/same/batch", json=self.payload)
        assert second.json() == first.json()
        assert second.headers["etag"] == first.headers["etag"]

    def test_cache_can_be_bypassed(self, client, app):
        response = client.post("/v1/same/batch?cache=false", json=self.payload)
        assert response.status_code == 200
        assert response.headers["cache-control"] == "no-store"
        assert app.state.cache._store == {}

    @pytest.mark.parametrize("if_none_match", ["etag", "*"])
    def test_if_none_match_is_ignored_on_post(self, client, if_none_match):
        etag = client.post("/v1/same/batch", json=self.payload).headers["etag"]
        header = etag if if_none_match == "etag" else if_none_match
        response = client.post("/v1/same/batch", json=self.payload, headers={"If-None-Match": header})
        assert response.status_code == 200
        assert response.headers["etag"] == etag
        assert [r["result"] for r in response.json()["results"]] == [True, None, False]

    def test_invalid_element_fails_whole_batch(self, client, app):
        payload = {"evaluations": [{"elements": [{"id": 1}, {"id": 1}]}, {"elements": [{"id": True}]}]}
        response = client.post("/v1/same/batch", json=payload)
        assert response.status_code == 400
        assert app.state.cache._store == {}


class TestFunctionsEndpoint:

    def test_list_functions(self, client):
        assert client.get("/v1/functions").json() == {"functions": ["same"]}

    @pytest.mark.parametrize("name", ["same", "SAME"])
    def test_call_same(self, client, name):
        response = client.post(f"/v1/functions/{name}", json={"arguments": [{"id": "a"}, {"id": "a"}]})
        assert response.status_code == 200
        assert response.json() == {"function": "same", "result": True}

    def test_call_same_unknown_result(self, client):
        response = client.post("/v1/functions/same", json={"arguments": [{"id": "a"}]})
        assert response.json()["result"] is None

    def test_unknown_function_is_404(self, client):
        response = client.post("/v1/functions/similar", json={"arguments": []})
        assert response.status_code == 404
        assert response.json() == {"error": "unknown function: similar", "type": "unknown_function"}


def test_cors_preflight(settings):
    settings.cors_allow_origins = "https://example.org"
    with TestClient(create_app(settings)) as client:
        response = client.options(
            "/v1/same",
            headers={
                "Origin": "https://example.org",
                "Access-Control-Request-Method": "POST",
            },
        )
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "https://example.org"
