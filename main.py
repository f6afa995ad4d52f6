#!/usr/bin/env python3

import asyncio
import sys
from typing import Any, Optional

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import (
    TextContent,
    Tool,
)
from pydantic import BaseModel, Field

from path_utils import (
    NormalizeOptions,
    PathFormat,
    convert_path,
    detect_path_format,
    is_absolute,
    normalize_path,
)


class NormalizePathArgs(BaseModel):
    path: str
    format: Optional[PathFormat] = Field(
        None, description="Target format. Omit to keep the detected format"
    )
    absolute: bool = Field(
        False, description="Resolve relative segments to an absolute path"
    )
    base: Optional[str] = Field(
        None, description="Base path used with absolute (defaults to server cwd)"
    )


class ConvertPathArgs(BaseModel):
    path: str
    format: PathFormat = Field(description="Format to convert to")


class PathArgs(BaseModel):
    path: str


# Initialize MCP server
server: Server = Server("path-normalizer")  # type: ignore[type-arg]


@server.list_tools()  # type: ignore[misc,no-untyped-call]
async def list_tools() -> list[Tool]:
    """List available tools."""
    return [
        Tool(
            name="normalize_path",
            description=(
                "Validate and normalize a filesystem path string. Converts separators, "
                "UNC prefixes and drive letters to the requested format ('unix' or "
                "'windows'), or cleans up the path within its own detected format when "
                "no format is given. Set 'absolute' to resolve '.' and '..' segments "
                "against a base path. The filesystem is never accessed."
            ),
            inputSchema=NormalizePathArgs.model_json_schema(),
        ),
        Tool(
            name="convert_path",
            description=(
                "Convert a path to the given format without validation. "
                "'C:\\Users\\me' becomes '/c/Users/me' in unix format, and "
                "'/usr/local/bin' becomes '\\usr\\local\\bin' in windows format."
            ),
            inputSchema=ConvertPathArgs.model_json_schema(),
        ),
        Tool(
            name="detect_path_format",
            description=(
                "Report whether a path is Windows-style or Unix-style. Paths containing "
                "a backslash or starting with a drive letter are 'windows'; everything "
                "else is 'unix'."
            ),
            inputSchema=PathArgs.model_json_schema(),
        ),
        Tool(
            name="is_absolute",
            description=(
                "Check whether a path is absolute: a UNC share, a drive-rooted path "
                "like 'C:\\', or a path starting with a separator."
            ),
            inputSchema=PathArgs.model_json_schema(),
        ),
    ]


@server.call_tool()  # type: ignore[misc,no-untyped-call]
async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
    """Handle tool calls."""
    try:
        if name == "normalize_path":
            normalize_args = NormalizePathArgs.model_validate(arguments)
            result = normalize_path(
                normalize_args.path,
                NormalizeOptions(
                    format=normalize_args.format,
                    absolute=normalize_args.absolute,
                    base=normalize_args.base,
                ),
            )

            if not result.success:
                raise ValueError(result.error)

            return [TextContent(type="text", text=result.path)]

        elif name == "convert_path":
            convert_args = ConvertPathArgs.model_validate(arguments)
            converted = convert_path(convert_args.path, convert_args.format)

            return [TextContent(type="text", text=converted)]

        elif name == "detect_path_format":
            detect_args = PathArgs.model_validate(arguments)

            return [
                TextContent(
                    type="text", text=detect_path_format(detect_args.path).value
                )
            ]

        elif name == "is_absolute":
            absolute_args = PathArgs.model_validate(arguments)

            return [
                TextContent(
                    type="text",
                    text="true" if is_absolute(absolute_args.path) else "false",
                )
            ]

        else:
            raise ValueError(f"Unknown tool: {name}")

    except Exception as e:
        return [TextContent(type="text", text=f"Error: {str(e)}")]


async def main() -> None:
    """Main entry point."""
    print("Path Normalizer MCP Server running on stdio", file=sys.stderr)

    # Run the server
    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream, write_stream, server.create_initialization_options()
        )


def run() -> None:
    """Console script entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
