#!/usr/bin/env python3
"""
Smoke checks against a running iHost API.
Only public endpoints are hit, so no Firebase ID token is needed.
Set IHOST_URL to point at another instance.
"""

import asyncio
import os
import httpx

BASE_URL = os.environ.get("IHOST_URL", "http://127.0.0.1:8080")


async def check_health_endpoint():
    """Check the health endpoint."""
    print("Checking health endpoint...")

    async with httpx.AsyncClient() as client:
        response = await client.get(f"{BASE_URL}/health")
        print(f"Status: {response.status_code}")
        print(f"Response: {response.json()}")
        return response.status_code == 200 and response.json().get("status") == "UP"


async def check_root_endpoint():
    """Check the root endpoint."""
    print("\nChecking root endpoint...")

    async with httpx.AsyncClient() as client:
        response = await client.get(f"{BASE_URL}/")
        print(f"Status: {response.status_code}")
        print(f"Response: {response.json()}")
        return response.status_code == 200


async def check_username_availability():
    """Usernames outside 4-12 characters are never available."""
    print("\nChecking username availability...")

    async with httpx.AsyncClient() as client:
        response = await client.get(f"{BASE_URL}/api/users/username-available/abc")
        print(f"Status: {response.status_code}")
        print(f"Response: {response.json()}")
        return response.status_code == 200 and response.json() == {"available": False}


async def check_requires_token():
    """Protected endpoints reject calls without a bearer token."""
    print("\nChecking that /api/events requires a token...")

    async with httpx.AsyncClient() as client:
        response = await client.get(f"{BASE_URL}/api/events")
        print(f"Status: {response.status_code}")
        print(f"Response: {response.json()}")
        return response.status_code == 401


async def run_all_checks():
    """Run all checks sequentially."""
    print("Starting iHost API smoke checks")
    print("=" * 60)

    checks = [
        ("Health Check", check_health_endpoint),
        ("Root Endpoint", check_root_endpoint),
        ("Username Availability", check_username_availability),
        ("Auth Required", check_requires_token),
    ]

    results = []
    for name, check in checks:
        print(f"\n{'=' * 20} {name} {'=' * 20}")
        try:
            results.append((name, await check()))
        except httpx.HTTPError as e:
            print(f"{name} failed: {e}")
            results.append((name, False))

    # Summary
    print(f"\n{'=' * 60}")
    print("SUMMARY")
    print("=" * 60)

    passed = sum(1 for _, result in results if result)
    for name, result in results:
        print(f"{name:.<30} {'PASS' if result else 'FAIL'}")
    print(f"\nTotal: {passed}/{len(results)} checks passed")
    return passed == len(results)


if __name__ == "__main__":
    print(f"Make sure the server is running on {BASE_URL}")
    print("Run: python run.py")
    print()
    try:
        ok = asyncio.run(run_all_checks())
    except KeyboardInterrupt:
        print("\nChecks interrupted by user")
        ok = False
    raise SystemExit(0 if ok else 1)
