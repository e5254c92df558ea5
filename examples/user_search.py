#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio

from gramkit.api import APIClient, Credentials


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Search users by name")
    p.add_argument("sessionid")
    p.add_argument("query")
    p.add_argument("--limit", type=int, default=50)
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    credentials = Credentials(cookies={"sessionid": args.sessionid})
    seen = 0
    async with APIClient(credentials) as client:
        print(f"{'Identifier':>15} | {'Username':30} | Name")
        print("-" * 70)
        async for page in client.pages(client.users.search(args.query)):
            for user in page.users or []:
                print(f"{user.identifier or '?':>15} | {user.username or '?':30} | {user.name or ''}")
                seen += 1
            if seen >= args.limit:
                break


if __name__ == "__main__":
    asyncio.run(main())
