#!/usr/bin/env python3
"""
MCP Server SSE Example - fill in a form over MCP.

Connects to a running dynaform MCP server over SSE, fills in the
packaged example form and submits it.

Prerequisites:
    python run_mcp_server.py --transport sse --port 8080

    curl http://localhost:8080/health

Usage:
    python examples/mcp_sse_example.py
"""

import asyncio
import json
import sys

from mcp import ClientSession
from mcp.client.sse import sse_client


async def call(session: ClientSession, name: str, arguments: dict | None = None) -> dict:
    """Call a tool and decode its JSON text reply."""
    result = await session.call_tool(name, arguments or {})
    return json.loads(result.content[0].text)


async def main():
    """Fill in the example form through the MCP tools."""

    mcp_url = "http://localhost:8080/sse"

    print("=" * 60)
    print("MCP Server SSE Example")
    print("=" * 60)
    print(f"MCP Server URL: {mcp_url}")
    print()

    try:
        async with sse_client(mcp_url) as (read_stream, write_stream):
            async with ClientSession(read_stream, write_stream) as session:
                await session.initialize()

                tools = await session.list_tools()
                print(f"Available tools ({len(tools.tools)}):")
                for tool in tools.tools:
                    print(f"   - {tool.name}")
                print()

                form = await call(session, "get_form_fields")
                print("Fields:", [f["key"] for f in form["fields"]])

                # Submitting an empty form shows the required-field errors
                first_try = await call(session, "submit_form")
                print("\nFirst submit:", json.dumps(first_try.get("errors"), indent=2))

                await call(session, "set_field_value", {"key": "name", "value": "Ada Lovelace"})
                await call(session, "set_field_value", {"key": "age", "value": "36"})
                await call(session, "set_field_value", {"key": "country", "value": "Germany"})
                await call(session, "set_field_value", {"key": "newsletter", "value": True})

                second_try = await call(session, "submit_form")

                print("\n" + "=" * 60)
                print("Result:")
                print("=" * 60)
                print(json.dumps(second_try, indent=2))

    except Exception as e:
        print(f"Error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    exit_code = asyncio.run(main())
    sys.exit(exit_code)
