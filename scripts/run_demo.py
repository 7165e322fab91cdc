#!/usr/bin/env python3
"""run_demo.py: generate interview and quiz questions against the live API.

Usage:
    python scripts/run_demo.py              # default: http://localhost:8000
    python scripts/run_demo.py --base-url http://localhost:8000
"""

from __future__ import annotations

import argparse
import sys

import httpx

DEMO_SCENARIOS = [
    {
        "id": "interview_backend",
        "name": "Interview: Backend Engineer",
        "payload": {
            "jobDescription": (
                "Backend engineer, Go, distributed systems. You will design and "
                "operate high-throughput services on Kubernetes."
            ),
            "questionType": "interview",
        },
    },
    {
        "id": "quiz_data_analyst",
        "name": "Quiz: Data Analyst",
        "payload": {
            "jobDescription": (
                "Data analyst with strong SQL, dashboarding in Looker and "
                "experience with A/B test analysis."
            ),
            "questionType": "quiz",
        },
    },
    {
        "id": "missing_description",
        "name": "Error: Empty Job Description",
        "payload": {"jobDescription": "", "questionType": "quiz"},
    },
]


def run_demo(base_url: str) -> None:
    print("═" * 60)
    print(" Job-Description Question Generator Demo")
    print("═" * 60)
    print(f"Target: {base_url}\n")

    # Health check
    try:
        resp = httpx.get(f"{base_url}/api/v1/health", timeout=5)
        resp.raise_for_status()
        print(f"✅ Health check: {resp.json()}\n")
    except httpx.HTTPError as exc:
        print(f"❌ Health check failed: {exc}")
        print("   Make sure the server is running: uvicorn app.main:app --reload")
        sys.exit(1)

    results = []
    for scenario in DEMO_SCENARIOS:
        print(f"─── {scenario['name']} {'─' * (40 - len(scenario['name']))}")
        print(f"  Type:    {scenario['payload']['questionType']}")
        print(f"  JD:      {scenario['payload']['jobDescription'][:80]}")

        try:
            resp = httpx.post(
                f"{base_url}/api/v1/generate-questions",
                json=scenario["payload"],
                timeout=180,
            )
            data = resp.json()
        except (httpx.HTTPError, ValueError) as exc:
            print(f"  ❌ Error: {exc}")
            results.append({"scenario": scenario["id"], "ok": False})
            print()
            continue

        if resp.status_code == 200:
            questions = data["questions"]
            print(f"  → Questions: {len(questions)}")
            for question in questions[:3]:
                print(f"    • {question}")
        else:
            print(f"  → HTTP {resp.status_code}: {data.get('error')}")
        results.append({"scenario": scenario["id"], "ok": True, "status": resp.status_code})
        print()

    # Summary
    print("═" * 60)
    completed = sum(1 for r in results if r["ok"])
    print(f" Results: {completed}/{len(results)} scenarios completed")
    print("═" * 60)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Run Question Generator demo scenarios")
    parser.add_argument("--base-url", default="http://localhost:8000", help="API base URL")
    args = parser.parse_args()
    run_demo(args.base_url)
