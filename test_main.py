#!/usr/bin/env python3

import pytest

from main import (
    ConvertPathArgs,
    NormalizePathArgs,
    PathArgs,
    call_tool,
    list_tools,
)


class TestListTools:
    """Test the published tool list."""

    @pytest.mark.asyncio
    async def test_lists_path_tools(self) -> None:
        """All path tools are published with their argument schemas."""
        tools = await list_tools()

        assert [tool.name for tool in tools] == [
            "normalize_path",
            "convert_path",
            "detect_path_format",
            "is_absolute",
        ]
        assert tools[0].inputSchema == NormalizePathArgs.model_json_schema()
        assert tools[1].inputSchema == ConvertPathArgs.model_json_schema()
        assert tools[2].inputSchema == PathArgs.model_json_schema()


class TestCallTool:
    """Test tool call handling."""

    @pytest.mark.asyncio
    async def test_normalize_path(self) -> None:
        """normalize_path returns the normalized path text."""
        result = await call_tool(
            "normalize_path", {"path": "C:\\Users\\file.txt", "format": "unix"}
        )

        assert result[0].text == "/c/Users/file.txt"

    @pytest.mark.asyncio
    async def test_normalize_path_with_absolute(self) -> None:
        """normalize_path honours absolute and base."""
        result = await call_tool(
            "normalize_path",
            {"path": "..\\lib", "absolute": True, "base": "D:\\src\\app"},
        )

        assert result[0].text == "D:\\src\\lib"

    @pytest.mark.asyncio
    async def test_normalize_path_reports_validation_errors(self) -> None:
        """Failures are returned as error text."""
        result = await call_tool("normalize_path", {"path": "  "})

        assert result[0].text == "Error: Path cannot be empty"

    @pytest.mark.asyncio
    async def test_convert_path(self) -> None:
        """convert_path returns the raw conversion."""
        result = await call_tool(
            "convert_path", {"path": "/usr/local/bin", "format": "windows"}
        )

        assert result[0].text == "\\usr\\local\\bin"

    @pytest.mark.asyncio
    async def test_detect_path_format(self) -> None:
        """detect_path_format returns the format name."""
        windows = await call_tool("detect_path_format", {"path": "\\\\server\\share"})
        unix = await call_tool("detect_path_format", {"path": "relative/path"})

        assert windows[0].text == "windows"
        assert unix[0].text == "unix"

    @pytest.mark.asyncio
    async def test_is_absolute(self) -> None:
        """is_absolute returns true or false."""
        absolute = await call_tool("is_absolute", {"path": "C:\\Users"})
        relative = await call_tool("is_absolute", {"path": "docs/readme.md"})

        assert absolute[0].text == "true"
        assert relative[0].text == "false"

    @pytest.mark.asyncio
    async def test_invalid_arguments(self) -> None:
        """Argument validation errors are returned as error text."""
        result = await call_tool("convert_path", {"path": "/usr", "format": "mac"})

        assert result[0].text.startswith("Error:")

    @pytest.mark.asyncio
    async def test_unknown_tool(self) -> None:
        """Unknown tools are reported."""
        result = await call_tool("read_file", {"path": "/etc/passwd"})

        assert result[0].text == "Error: Unknown tool: read_file"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
