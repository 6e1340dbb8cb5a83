#!/usr/bin/env python3
"""
Browse an organisation's samples from the terminal using the client session.
Make sure the API is running (default http://localhost:8080/test/v1.0) before running this script.

Usage: python scripts/browse_samples.py [ORG_NAME] [SEARCH] [PAGE]
"""

import asyncio
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "apps" / "api"))

from sample_search.client import PatientManagementSession, SampleApiClient


def render(session: PatientManagementSession) -> str:
    columns = session.columns
    rows = [[str(getattr(r, c.accessor) or "") for c in columns] for r in session.visible_rows]
    widths = [
        max([len(c.header)] + [len(row[i]) for row in rows])
        for i, c in enumerate(columns)
    ]
    lines = [" | ".join(c.header.ljust(w) for c, w in zip(columns, widths))]
    lines.append("-+-".join("-" * w for w in widths))
    lines.extend(" | ".join(v.ljust(w) for v, w in zip(row, widths)) for row in rows)
    lines.append("")
    lines.append(f"Page {session.current_page} of {session.total_pages}")
    lines.append(session.summary)
    return "\n".join(lines)


async def browse(org_name: str | None, search: str, page: int) -> int:
    session = PatientManagementSession(SampleApiClient())
    try:
        await session.load_organisations()
        if org_name and session.error is None:
            match = next((o for o in session.organisations if o.name == org_name), None)
            if match is None:
                print(f"Unknown organisation: {org_name}")
                print("Available: " + ", ".join(o.name for o in session.organisations))
                return 1
            await session.select_organisation(match.id)
        if session.error:
            print(session.error)
            return 1

        if search:
            session.set_search(search)
            session.flush_search()
        for _ in range(page - 1):
            session.next_page()

        print(f"Your Organisation: {session.selected.name if session.selected else '-'}")
        print(f"Search by: {session.search_placeholder} (separate multiple search criteria with \";\")")
        print()
        print(render(session))
        return 0
    finally:
        session.close()


if __name__ == "__main__":
    args = sys.argv[1:]
    org = args[0] if len(args) > 0 else None
    text = args[1] if len(args) > 1 else ""
    page_arg = int(args[2]) if len(args) > 2 else 1
    try:
        sys.exit(asyncio.run(browse(org, text, page_arg)))
    except KeyboardInterrupt:
        print("\n\nCancelled by user")
        sys.exit(0)
