#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
from dataclasses import replace

from laakhay.gitlab import GitLabClient, GitLabConfig


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Stream a project's releases page by page")
    p.add_argument("project", help="Project id or full path, e.g. group/project")
    p.add_argument("--per-page", type=int, default=20)
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    config = replace(GitLabConfig.from_env(), per_page=args.per_page)

    async with GitLabClient(config) as gl:
        n = 0
        async for page in gl.releases.iter(args.project).pages():
            n += 1
            print(f"-- page {n} ({len(page.items)} releases, total={page.total})")
            for release in page.items:
                released = release.released_at.date().isoformat() if release.released_at else "-"
                print(f"  {release.tag_name:20} {released:12} {release.name or ''}")


if __name__ == "__main__":
    asyncio.run(main())
