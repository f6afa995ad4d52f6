#!/usr/bin/env python3

import os
import re
from enum import Enum
from typing import Any, List, Literal, Mapping, NamedTuple, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

__version__ = "0.1.0"

_SEPARATORS = ("/", "\\")
_SEPARATOR_RUN = re.compile(r"[\\/]+")
# Exactly two separators followed by a server name
_UNC_PREFIX = re.compile(r"^[\\/]{2}(?=[^\\/])")
_DRIVE_PREFIX = re.compile(r"^([A-Za-z]):")
_ROOTED_DRIVE_PREFIX = re.compile(r"^[A-Za-z]:[\\/]")
# /c or /c/... written by the unix side of a drive conversion
_UNIX_DRIVE_ROOT = re.compile(r"^/([A-Za-z])(?=/|\Z)")


class PathFormat(str, Enum):
    UNIX = "unix"
    WINDOWS = "windows"


class EmptyPathError(ValueError):
    """Raised when a path is empty or contains only whitespace."""


class NormalizeOptions(BaseModel):
    model_config = ConfigDict(extra="forbid")

    format: Optional[PathFormat] = Field(
        None, description="Target format. Defaults to the detected source format"
    )
    absolute: bool = Field(
        False, description="Resolve relative segments against a base path"
    )
    base: Optional[str] = Field(
        None, description="Base path for absolute resolution (defaults to cwd)"
    )


class NormalizeSuccess(BaseModel):
    success: Literal[True] = True
    path: str = Field(min_length=1)
    format: PathFormat
    error: None = None


class NormalizeFailure(BaseModel):
    success: Literal[False] = False
    path: Literal[""] = ""
    format: None = None
    error: str = Field(min_length=1)


NormalizeResult = Union[NormalizeSuccess, NormalizeFailure]


class _ParsedPath(NamedTuple):
    root: str  # "unc", "drive", "root" or "" for relative paths
    drive: str
    segments: List[str]
    trailing: bool


def detect_path_format(p: str) -> PathFormat:
    """
    Classifies a path string as Windows-style or Unix-style.

    A backslash anywhere wins, then a leading drive letter. Everything else,
    including a bare file name, is treated as Unix.

    Args:
        p: The path to inspect

    Returns:
        The detected PathFormat
    """
    if "\\" in p:
        return PathFormat.WINDOWS
    if _DRIVE_PREFIX.match(p):
        return PathFormat.WINDOWS
    return PathFormat.UNIX


def _parse(p: str, target: PathFormat) -> _ParsedPath:
    drive = ""

    if _UNC_PREFIX.match(p):
        root = "unc"
        rest = p[2:]
    else:
        drive_match = _DRIVE_PREFIX.match(p)
        unix_drive_match = (
            _UNIX_DRIVE_ROOT.match(p) if target is PathFormat.WINDOWS else None
        )
        if drive_match:
            root = "drive"
            drive = drive_match.group(1)
            rest = p[2:]
        elif unix_drive_match:
            root = "drive"
            drive = unix_drive_match.group(1)
            rest = p[2:]
        elif p.startswith(_SEPARATORS):
            root = "root"
            rest = p
        else:
            root = ""
            rest = p

    segments = [segment for segment in _SEPARATOR_RUN.split(rest) if segment]
    trailing = bool(segments) and rest.endswith(_SEPARATORS)
    return _ParsedPath(root, drive, segments, trailing)


def _format(parsed: _ParsedPath, target: PathFormat) -> str:
    sep = "/" if target is PathFormat.UNIX else "\\"
    body = sep.join(parsed.segments)
    if parsed.trailing:
        body += sep

    if parsed.root == "unc":
        return sep * 2 + body

    if parsed.root == "drive":
        if target is PathFormat.UNIX:
            drive_root = "/" + parsed.drive.lower()
            return f"{drive_root}/{body}" if body else drive_root
        return f"{parsed.drive.upper()}:\\{body}"

    if parsed.root == "root":
        return sep + body

    return body


def convert_path(p: str, target: Union[PathFormat, str]) -> str:
    """
    Rewrites separators and structural prefixes of a path for a target format.

    UNC prefixes become ``//server/share`` or ``\\\\server\\share``, drive
    letters become ``/c`` or ``C:\\``, runs of separators collapse to one and
    segment text is copied unchanged.

    Args:
        p: The path to convert
        target: The format to produce

    Returns:
        Converted path
    """
    target = PathFormat(target)
    return _format(_parse(p, target), target)


def normalize_to_unix(p: str) -> str:
    """Converts a path to Unix format without validation."""
    return convert_path(p, PathFormat.UNIX)


def normalize_to_windows(p: str) -> str:
    """Converts a path to Windows format without validation."""
    return convert_path(p, PathFormat.WINDOWS)


to_unix = normalize_to_unix
to_windows = normalize_to_windows


def is_absolute(p: str) -> bool:
    """
    Checks whether a path is rooted.

    Args:
        p: The path to check

    Returns:
        True for UNC paths, drive-rooted paths (``C:\\``) and paths starting
        with a separator
    """
    if _UNC_PREFIX.match(p):
        return True
    if _ROOTED_DRIVE_PREFIX.match(p):
        return True
    return p.startswith(_SEPARATORS)


def _resolve_dots(segments: List[str]) -> List[str]:
    resolved: List[str] = []
    for segment in segments:
        if segment == ".":
            continue
        if segment == "..":
            if resolved:
                resolved.pop()
            continue
        resolved.append(segment)
    return resolved


def _join(base: _ParsedPath, relative: _ParsedPath) -> _ParsedPath:
    return base._replace(
        segments=base.segments + relative.segments,
        trailing=relative.trailing if relative.segments else base.trailing,
    )


def resolve_absolute(
    p: str,
    target: Optional[Union[PathFormat, str]] = None,
    base: Optional[str] = None,
) -> str:
    """
    Resolves a path to an absolute form without touching the filesystem.

    Relative paths are joined onto ``base`` (the current working directory
    when omitted; a relative base is itself resolved against the working
    directory), then ``.`` and ``..`` segments are folded lexically. A
    ``..`` never climbs above a drive root or a UNC share.

    Args:
        p: The path to resolve
        target: The output format. Defaults to the detected format of ``p``
        base: Directory that relative paths are resolved against

    Returns:
        Absolute path in the target format
    """
    target = detect_path_format(p) if target is None else PathFormat(target)

    parsed = _parse(convert_path(p, target), target)
    if not parsed.root:
        cwd = _parse(convert_path(os.getcwd(), target), target)
        base_parsed = cwd
        if base is not None:
            base_parsed = _parse(convert_path(base, target), target)
        if not base_parsed.root:
            base_parsed = _join(cwd, base_parsed)
        parsed = _join(base_parsed, parsed)

    root_length = 0
    if parsed.root == "unc":
        # server and share, up to the first dot segment
        for segment in parsed.segments[:2]:
            if segment in (".", ".."):
                break
            root_length += 1

    segments = parsed.segments[:root_length] + _resolve_dots(
        parsed.segments[root_length:]
    )
    root = "root" if parsed.root == "unc" and not segments else parsed.root

    resolved = parsed._replace(
        root=root, segments=segments, trailing=parsed.trailing and bool(segments)
    )
    return _format(resolved, target)


def validate_path_input(value: Any) -> str:
    """
    Checks that a value is a usable path string.

    Raises:
        TypeError: The value is not a string
        EmptyPathError: The value is empty or only whitespace
    """
    if not isinstance(value, str):
        raise TypeError(f"Path must be a string, got {type(value).__name__}")
    if not value.strip():
        raise EmptyPathError("Path cannot be empty")
    return value


def normalize_path(
    value: Any,
    options: Optional[Union[NormalizeOptions, Mapping[str, Any]]] = None,
) -> NormalizeResult:
    """
    Validates and normalizes a path, returning a success or failure result.

    Without an explicit ``format`` the path is cleaned up within its own
    detected format. Invalid input never raises; it produces a
    NormalizeFailure carrying the error message.

    Args:
        value: The path to normalize
        options: NormalizeOptions or a mapping of its fields

    Returns:
        NormalizeSuccess or NormalizeFailure
    """
    try:
        p = validate_path_input(value)
    except (TypeError, EmptyPathError) as e:
        return NormalizeFailure(error=str(e))

    if options is None:
        options = NormalizeOptions()
    elif not isinstance(options, NormalizeOptions):
        try:
            options = NormalizeOptions.model_validate(options)
        except ValidationError as e:
            message = "; ".join(
                f"{'.'.join(str(loc) for loc in error['loc'])}: {error['msg']}"
                if error["loc"]
                else error["msg"]
                for error in e.errors()
            )
            return NormalizeFailure(error=f"Invalid options: {message}")

    target = options.format or detect_path_format(p)

    if options.absolute:
        normalized = resolve_absolute(p, target, options.base)
    else:
        normalized = convert_path(p, target)

    return NormalizeSuccess(path=normalized, format=target)
