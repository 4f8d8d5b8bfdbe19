#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio

from laakhay.gitlab import GitLabClient, GitLabConfig, IssuesQuery
from laakhay.gitlab.core import IssueStateFilter, SortOrder


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="List a project's issues via REST")
    p.add_argument("project", help="Project id or full path, e.g. group/project")
    p.add_argument("--state", default="opened", choices=[s.value for s in IssueStateFilter])
    p.add_argument("--label", action="append", dest="labels", help="Repeatable")
    p.add_argument("--search")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    query = IssuesQuery(
        state=IssueStateFilter.from_wire(args.state),
        labels=args.labels,
        search=args.search,
        sort=SortOrder.ASC,
    )

    async with GitLabClient(GitLabConfig.from_env()) as gl:
        issues = await gl.issues.list_project(args.project, query)

    print("=" * 72)
    print(f"Project : {args.project}")
    print(f"Issues  : {len(issues)}")
    print("=" * 72)
    print(f"{'IID':>6} | {'State':8} | {'Created':20} | Title")
    print("-" * 72)
    for issue in issues:
        created = issue.created_at.strftime("%Y-%m-%d %H:%M:%S")
        print(f"{issue.iid:>6} | {issue.state.value:8} | {created:20} | {issue.title}")
    print("=" * 72)


if __name__ == "__main__":
    asyncio.run(main())
