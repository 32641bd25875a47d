from __future__ import annotations

import asyncio
import json
import sys
from typing import Any

from unifs.config.env_loader import load_env_file
from unifs.core.cancellation import CancellationToken
from unifs.core.errors import FilesystemError
from unifs.core.models import (
    CopyDirectoryRequest,
    CopyFileRequest,
    CreateDirectoryRequest,
    DeleteDirectoryRequest,
    DeleteFileRequest,
    FileExistsRequest,
    GetFileRequest,
    MoveDirectoryRequest,
    MoveFileRequest,
    ReadFileAsStringRequest,
    TouchFileRequest,
    WriteTextToFileRequest,
)
from unifs.core.paths import normalize
from unifs.managers.directory_manager import DirectoryManager
from unifs.managers.file_manager import FileManager
from unifs.services.adapter.factory import (
    _get_init_hints,
    build_registry,
    configs_from_env,
    parse_adapter_entries,
)
from unifs.services.adapter.registry import DEFAULT_ADAPTER
from unifs.services.logger.factory import LoggerFactory
from unifs.services.logger.interface import LoggingInterface
from unifs.services.metrics.interface import MetricsInterface
from unifs.services.metrics.noop_metrics import NoopMetrics
from unifs.services.registry import resolve_implementation
from unifs.services.secrets.env_secrets import EnvSecrets
from unifs.services.secrets.interface import SecretsInterface

USAGE = "Usage: python -m unifs <command> <path> [<path>] [flags]"

# Maps command -> number of path arguments it takes.
_COMMANDS: dict[str, int] = {
    "read": 1,
    "write": 1,
    "touch": 1,
    "get": 1,
    "exists": 1,
    "rm": 1,
    "cp": 2,
    "mv": 2,
    "mkdir": 1,
    "rmdir": 1,
    "cpdir": 2,
    "mvdir": 2,
}

# Flags that take a value. --fs and --root may repeat.
_VALUE_FLAGS = {"adapter", "fs", "root", "text", "timeout", "env", "env-file", "log", "metrics"}

_DEFAULT_DRIVER = "local"


def _parse_env_overrides(raw: str) -> dict[str, str]:
    """Parse a JSON string into env overrides. Validates types."""
    data = json.loads(raw)
    if not isinstance(data, dict):
        raise ValueError("--env value must be a JSON object")
    for k, v in data.items():
        if not isinstance(k, str) or not isinstance(v, str):
            raise ValueError("--env JSON must have string keys and string values")
    return data


def _parse_roots(entries: list[str]) -> dict[str, str]:
    """Parse ``--root`` values; a bare path applies to the default adapter."""
    roots: dict[str, str] = {}
    for entry in entries:
        if "=" in entry:
            name, path = entry.split("=", 1)
        else:
            name, path = DEFAULT_ADAPTER, entry
        roots[name.strip()] = path.strip()
    return roots


def _extract_global_flags(
    remaining: list[str],
) -> tuple[dict[str, str], dict[str, str], list[str], list[str], list[str]]:
    """Split raw args into flags and positional paths.

    Returns (flags, env_overrides, fs_entries, root_entries, positional).
    """
    flags: dict[str, str] = {}
    env_overrides: dict[str, str] = {}
    fs_entries: list[str] = []
    root_entries: list[str] = []
    positional: list[str] = []
    env_file: str | None = None

    i = 0
    while i < len(remaining):
        arg = remaining[i]
        if arg.startswith("--") and arg[2:] in _VALUE_FLAGS:
            if i + 1 >= len(remaining):
                raise ValueError(f"Missing value for {arg}")
            name, value = arg[2:], remaining[i + 1]
            if name == "env":
                env_overrides.update(_parse_env_overrides(value))
            elif name == "env-file":
                env_file = value
            elif name == "fs":
                fs_entries.append(value)
            elif name == "root":
                root_entries.append(value)
            else:
                flags[name] = value
            i += 2
        elif arg.startswith("--"):
            raise ValueError(f"Unknown flag: {arg}")
        else:
            positional.append(arg)
            i += 1

    if env_file:
        # --env wins over the file
        merged = dict(load_env_file(env_file))
        merged.update(env_overrides)
        env_overrides = merged

    if "log" in flags and "LOG_IMPL" not in env_overrides:
        env_overrides["LOG_IMPL"] = flags["log"]

    return flags, env_overrides, fs_entries, root_entries, positional


def print_help() -> None:
    print(f"\n  {USAGE}\n")
    print("  File commands:")
    print(f"    {'read PATH':20s} Print a file's text")
    print(f"    {'write PATH':20s} Create or overwrite a file with --text")
    print(f"    {'touch PATH':20s} Create an empty file if it does not exist")
    print(f"    {'get PATH':20s} Describe an existing file")
    print(f"    {'exists PATH':20s} Report whether a file exists")
    print(f"    {'rm PATH':20s} Delete a file")
    print(f"    {'cp SRC DST':20s} Copy a file")
    print(f"    {'mv SRC DST':20s} Move a file")
    print()
    print("  Directory commands (paths end with '/'):")
    print(f"    {'mkdir PATH':20s} Create a directory")
    print(f"    {'rmdir PATH':20s} Delete a directory and everything under it")
    print(f"    {'cpdir SRC DST':20s} Copy a directory")
    print(f"    {'mvdir SRC DST':20s} Move a directory")
    print()
    print("  Global flags:")
    print(f"    --{'adapter':20s} Adapter to run against [default: default]")
    print(f"    --{'fs':20s} Adapter NAME=DRIVER, repeatable: memory, local, minio [default: local]")
    print(f"    --{'root':20s} Adapter root NAME=PATH, repeatable")
    print(f"    --{'text':20s} Text for 'write'")
    print(f"    --{'timeout':20s} Deadline in seconds")
    print(f"    --{'metrics':20s} Metrics: noop, memory, prometheus [default: noop]")
    print(f"    --{'log':20s} Logging format: pretty, memory, noop [default: pretty]")
    print(f"    --{'env':20s} JSON string of env var overrides")
    print(f"    --{'env-file':20s} Environment file name (loads .env/<name>.env)")
    print()


def _build_metrics(impl_name: str | None, secrets: SecretsInterface) -> MetricsInterface:
    if not impl_name:
        return NoopMetrics()
    impl_cls = resolve_implementation("metrics", impl_name)
    if "secrets" in _get_init_hints(impl_cls):
        return impl_cls(secrets=secrets)
    return impl_cls()


def _build_managers(
    flags: dict[str, str],
    env_overrides: dict[str, str],
    fs_entries: list[str],
    root_entries: list[str],
) -> tuple[FileManager, DirectoryManager, LoggingInterface]:
    secrets = EnvSecrets(overrides=env_overrides)

    log_impl = flags.get("log") or env_overrides.get("LOG_IMPL", "pretty")
    logger = LoggerFactory(default_impl=log_impl).create()
    metrics = _build_metrics(flags.get("metrics"), secrets)

    if fs_entries:
        configs = parse_adapter_entries(fs_entries)
    else:
        configs = configs_from_env(secrets) or parse_adapter_entries([_DEFAULT_DRIVER])
    roots = _parse_roots(root_entries)
    for config in configs:
        if config.name in roots:
            config.root = roots[config.name]

    registry = build_registry(configs, secrets, metrics)
    return (
        FileManager(registry, logger=logger, metrics=metrics),
        DirectoryManager(registry, logger=logger, metrics=metrics),
        logger,
    )


async def _dispatch(
    command: str,
    paths: list[str],
    text: str | None,
    adapter: str,
    files: FileManager,
    directories: DirectoryManager,
    cancellation: CancellationToken,
) -> dict[str, Any]:
    first = normalize(paths[0])
    second = normalize(paths[1]) if len(paths) > 1 else None
    match command:
        case "read":
            content = await files.read_as_string(
                ReadFileAsStringRequest(path=first), adapter, cancellation
            )
            return {"path": first.normalized, "adapter": adapter, "text": content}
        case "write":
            await files.write_text(
                WriteTextToFileRequest(path=first, text=text), adapter, cancellation
            )
            return {"type": "file", "path": first.normalized, "adapter": adapter}
        case "touch":
            result = await files.touch(TouchFileRequest(path=first), adapter, cancellation)
        case "get":
            result = await files.get(GetFileRequest(path=first), adapter, cancellation)
        case "exists":
            found = await files.exists(FileExistsRequest(path=first), adapter, cancellation)
            return {"path": first.normalized, "adapter": adapter, "exists": found}
        case "rm":
            await files.delete(DeleteFileRequest(path=first), adapter, cancellation)
            return {"deleted": first.normalized, "adapter": adapter}
        case "cp":
            result = await files.copy(
                CopyFileRequest(source=first, destination=second), adapter, cancellation
            )
        case "mv":
            result = await files.move(
                MoveFileRequest(source=first, destination=second), adapter, cancellation
            )
        case "mkdir":
            result = await directories.create(
                CreateDirectoryRequest(path=first), adapter, cancellation
            )
        case "rmdir":
            await directories.delete(DeleteDirectoryRequest(path=first), adapter, cancellation)
            return {"deleted": first.normalized, "adapter": adapter}
        case "cpdir":
            result = await directories.copy(
                CopyDirectoryRequest(source=first, destination=second), adapter, cancellation
            )
        case "mvdir":
            result = await directories.move(
                MoveDirectoryRequest(source=first, destination=second), adapter, cancellation
            )
        case _:
            raise ValueError(f"Unknown command: '{command}'")
    return result.to_dict()


def run_command(argv: list[str]) -> tuple[int, dict[str, Any] | None]:
    """Testable entry point: parses args, builds managers, runs one command."""
    if not argv:
        raise ValueError(USAGE)
    if argv[0] in ("--help", "-h", "help"):
        print_help()
        return (0, None)

    command = argv[0]
    if command not in _COMMANDS:
        raise ValueError(f"Unknown command: '{command}' (available: {', '.join(_COMMANDS)})")

    flags, env_overrides, fs_entries, root_entries, paths = _extract_global_flags(argv[1:])
    expected = _COMMANDS[command]
    if len(paths) != expected:
        raise ValueError(f"'{command}' takes {expected} path argument(s), got {len(paths)}")

    files, directories, logger = _build_managers(flags, env_overrides, fs_entries, root_entries)
    timeout = float(flags["timeout"]) if "timeout" in flags else None
    adapter = flags.get("adapter", DEFAULT_ADAPTER)

    logger.debug("Running command", command=command, adapter=adapter, paths=paths)
    payload = asyncio.run(
        _dispatch(
            command,
            paths,
            flags.get("text"),
            adapter,
            files,
            directories,
            CancellationToken(timeout=timeout),
        )
    )
    return (0, payload)


def run_cli(argv: list[str] | None = None) -> None:
    args = argv if argv is not None else sys.argv[1:]
    try:
        exit_code, payload = run_command(args)
    except FilesystemError as e:
        print(f"error: {e.kind.value}: {e}", file=sys.stderr)
        sys.exit(1)
    except (ValueError, KeyError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    if payload is not None:
        print(json.dumps(payload))
    sys.exit(exit_code)
