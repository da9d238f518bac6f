#!/usr/bin/env python3
"""Smoke checks against a running svc-same deployment (BASE_URL)."""
import os, sys, requests

BASE_URL = os.environ.get("BASE_URL", "http://localhost:8080")

def must(cond, msg):
    if not cond:
        print("FAIL", msg); sys.exit(1)
    print("ok  ", msg)

def same(elements):
    r = requests.post(f"{BASE_URL}/v1/same", json={"elements": elements}, timeout=10)
    must(r.ok, f"POST /v1/same {elements!r} -> {r.status_code}")
    return r.json()

r = requests.get(f"{BASE_URL}/health", timeout=10)
must(r.status_code == 200, "health 200")

r = requests.get(f"{BASE_URL}/openapi.json", timeout=10)
must(r.ok and "/v1/same" in r.json().get("paths", {}), "openapi lists /v1/same")

must(same([{"id": 1}, {"id": 1}])["result"] is True, "same vertex ids -> true")
must(same([{"id": 1}, {"id": "1"}])["result"] is False, "int vs str id -> false")
must(same([{"source": 1, "target": 2}, {"id": 1}])["result"] is False, "edge vs vertex -> false")
must(same([{"id": 1}, None, {"id": 1}])["result"] is None, "absent argument -> null")
must(same([])["result"] is None, "no arguments -> null")

r = requests.post(f"{BASE_URL}/v1/functions/SAME", json={"arguments": [{"id": "a"}, {"id": "a"}]}, timeout=10)
must(r.ok and r.json()["result"] is True, "builtin SAME by name")

print(f"All smoke checks passed against {BASE_URL}")
