#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio

from gramkit.api import APIClient, Credentials


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="List direct conversations, newest first")
    p.add_argument("sessionid")
    p.add_argument("csrftoken")
    p.add_argument("ds_user_id")
    p.add_argument("--pages", type=int, default=2)
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    credentials = Credentials(
        cookies={
            "sessionid": args.sessionid,
            "csrftoken": args.csrftoken,
            "ds_user_id": args.ds_user_id,
        }
    )
    async with APIClient(credentials) as client:
        pager = client.pages(client.direct.inbox, max_pages=args.pages)
        async for page in pager:
            for conversation in page.conversations or []:
                names = ", ".join(user.username or "?" for user in conversation.participants or [])
                updated = conversation.updated_at.isoformat() if conversation.updated_at else "-"
                print(f"{conversation.identifier or '?':>40} | {updated:25} | {conversation.title or names}")
        if pager.state.resumable:
            print(f"More conversations available (cursor {pager.state.cursor})")


if __name__ == "__main__":
    asyncio.run(main())
