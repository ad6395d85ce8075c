#!/usr/bin/env python3
"""
Smoke check for a running POS Billing API
Read-only: liveness, database round trip, CORS preflight and the error envelope
"""

import sys
from typing import Callable, Dict, List, Optional

import requests

TIMEOUT = 10


def check_liveness(base_url: str) -> Dict:
    response = requests.get(f"{base_url}/test", timeout=TIMEOUT)
    ok = response.status_code == 200 and response.json() == {"message": "working"}
    return {"name": "GET /test", "ok": ok, "status": response.status_code}


def check_health(base_url: str) -> Dict:
    response = requests.get(f"{base_url}/health", timeout=TIMEOUT)
    body = response.json()
    ok = response.status_code == 200 and body.get("status") == "healthy"
    return {"name": "GET /health (database)", "ok": ok, "status": response.status_code,
            "detail": body.get("error")}


def check_cors_preflight(base_url: str, origin: str = "http://localhost:3000") -> Dict:
    response = requests.options(
        f"{base_url}/productSave",
        headers={
            "Origin": origin,
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "Content-Type",
        },
        timeout=TIMEOUT
    )
    allowed = response.headers.get("Access-Control-Allow-Origin")
    ok = response.status_code == 200 and allowed in (origin, "*")
    return {"name": f"OPTIONS /productSave from {origin}", "ok": ok, "status": response.status_code,
            "detail": f"Access-Control-Allow-Origin: {allowed}"}


def check_error_envelope(base_url: str) -> Dict:
    """A missing required parameter must come back as a 400 envelope without touching the database"""
    response = requests.get(f"{base_url}/getProductByBarCode", timeout=TIMEOUT)
    body = response.json()
    ok = response.status_code == 400 and body.get("success") is False and "message" in body
    return {"name": "GET /getProductByBarCode without parameters", "ok": ok,
            "status": response.status_code, "detail": body.get("message")}


CHECKS: List[Callable[[str], Dict]] = [
    check_liveness,
    check_health,
    check_cors_preflight,
    check_error_envelope,
]


def run_checks(base_url: str) -> List[Dict]:
    results = []
    for check in CHECKS:
        try:
            results.append(check(base_url))
        except (requests.exceptions.RequestException, ValueError) as e:
            results.append({"name": check.__name__, "ok": False, "status": None, "detail": f"Request failed: {e}"})
    return results


def print_results(base_url: str, results: List[Dict]):
    print("🧪 POS Billing API Smoke Check")
    print("=" * 50)
    print(f"API Base URL: {base_url}")
    print()

    for result in results:
        status_emoji = "✅" if result["ok"] else "❌"
        print(f"{status_emoji} {result['name']}")
        print(f"   HTTP status: {result['status']}")
        detail: Optional[str] = result.get("detail")
        if detail:
            print(f"   {detail}")
    print()

    failed = sum(1 for result in results if not result["ok"])
    print(f"📊 {len(results) - failed}/{len(results)} checks passed")


if __name__ == "__main__":
    base_url = sys.argv[1].rstrip("/") if len(sys.argv) > 1 else "http://localhost:5000"

    results = run_checks(base_url)
    print_results(base_url, results)

    if any(not result["ok"] for result in results):
        sys.exit(1)
