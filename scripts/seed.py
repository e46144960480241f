"""Seed script — registers demo users via the REST API.

Usage:
    python scripts/seed.py              # uses http://localhost:3000
    python scripts/seed.py http://host  # custom base URL
"""

import sys

import httpx

DEFAULT_BASE_URL = "http://localhost:3000"

USERS = [
    {
        "username": "alice",
        "email": "alice@example.com",
        "firstName": "Alice",
        "lastName": "Smith",
        "password": "password123",
    },
    {
        "username": "bob",
        "email": "bob@example.com",
        "firstName": "Bob",
        "lastName": "Jones",
        "password": "password123",
    },
]


def register(client: httpx.Client, base_url: str, user: dict) -> bool:
    """Create one user; returns False when the email or username is taken."""
    resp = client.post(f"{base_url}/users/new", json=user)
    if resp.status_code == 200:
        print(f"  Registered {user['username']}")
        return True
    if resp.status_code == 409:
        print(f"  {user['username']} already exists ({resp.json()['error']}), skipping")
        return False
    resp.raise_for_status()
    return False


def seed(client: httpx.Client, base_url: str, users: list[dict] = USERS) -> int:
    created = 0
    print("Users:")
    for user in users:
        if register(client, base_url, user):
            created += 1
    return created


def main() -> None:
    base_url = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_BASE_URL
    print(f"Seeding against {base_url}\n")

    with httpx.Client(timeout=10) as client:
        created = seed(client, base_url)

    print(f"\nDone! {created} new user(s)")


if __name__ == "__main__":
    main()
