#!/usr/bin/env python3
"""Benchmark CORS handling: latency (p50, p95, p99) and QPS for preflight and simple requests.

Usage:
  Start the server first (corsguard-serve), then:
    export API_URL=http://localhost:8000 ORIGIN=https://example.com
    uv run python scripts/bench_preflight.py [--num-requests 500] [--path /hi]
"""
from __future__ import annotations

import argparse
import os
import statistics
import sys
import time

import httpx


def run(
    client: httpx.Client,
    method: str,
    url: str,
    headers: dict[str, str],
    num_requests: int,
    expected_status: int,
) -> tuple[list[float], int, float]:
    latencies: list[float] = []
    errors = 0
    start_total = time.perf_counter()
    for _ in range(num_requests):
        t0 = time.perf_counter()
        r = client.request(method, url, headers=headers)
        elapsed = time.perf_counter() - t0
        if r.status_code == expected_status:
            latencies.append(elapsed)
        else:
            errors += 1
    return latencies, errors, time.perf_counter() - start_total


def summarize(label: str, latencies: list[float], errors: int, total_elapsed: float) -> str:
    n = len(latencies)
    if n == 0:
        return f"{label}: no successful requests (errors={errors})\n"
    qps = n / total_elapsed
    p50 = statistics.median(latencies) * 1000
    p95 = sorted(latencies)[int(n * 0.95) - 1] * 1000 if n >= 20 else p50
    p99 = sorted(latencies)[int(n * 0.99) - 1] * 1000 if n >= 100 else p95
    return (
        f"{label} (requests={n}, errors={errors})\n"
        f"  QPS: {qps:.2f}\n"
        f"  Latency: p50={p50:.1f} ms, p95={p95:.1f} ms, p99={p99:.1f} ms\n"
        f"  Total time: {total_elapsed:.2f} s\n"
    )


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark CORS preflight")
    parser.add_argument("--num-requests", type=int, default=200, help="Requests per scenario")
    parser.add_argument("--path", type=str, default="/hi", help="Route to probe")
    parser.add_argument("--preflight-status", type=int, default=204, help="Expected preflight status")
    parser.add_argument("--output", type=str, default="/results/bench_preflight.txt", help="Output file path")
    args = parser.parse_args()

    api_url = os.environ.get("API_URL", "http://localhost:8000").rstrip("/")
    origin = os.environ.get("ORIGIN", "https://example.com")
    url = f"{api_url}{args.path}"

    preflight_headers = {
        "Origin": origin,
        "Access-Control-Request-Method": "GET",
        "Access-Control-Request-Headers": "Content-Type",
    }

    summary = ""
    with httpx.Client(timeout=30.0) as client:
        print(f"Running {args.num_requests} preflight requests...")
        summary += summarize(
            "Preflight",
            *run(client, "OPTIONS", url, preflight_headers, args.num_requests, args.preflight_status),
        )
        print(f"Running {args.num_requests} simple requests...")
        summary += summarize(
            "Simple GET",
            *run(client, "GET", url, {"Origin": origin}, args.num_requests, 200),
        )
    print(summary)

    try:
        os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(summary)
        print(f"Wrote {args.output}")
    except OSError:
        pass

    return 0


if __name__ == "__main__":
    sys.exit(main())
