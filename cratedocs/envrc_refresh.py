#!/usr/bin/env python3
"""
Force a nix-direnv rebuild of the cratedocs-mcp development environment.

Steps, each aborting the run on failure:
1. Check that the project checkout exists
2. Run `direnv exec <dir> true` with nix-direnv's force-reload flag set
3. Touch `.envrc` so direnv sees the environment as changed
4. Copy the new `.envrc` timestamps onto `.direnv/*.rc` so direnv does not
   consider its profile caches stale and rebuild all over again

Usage:
    cratedocs-refresh-env
"""

import os
import subprocess
import sys
from pathlib import Path
from typing import List

from .logger import setup_logging

# Configuration
TARGET_DIR = Path.home() / "src" / "cratedocs-mcp"
LOGS_DIR = Path("./logs")
DIRENV = "direnv"
FORCE_RELOAD_VAR = "_nix_direnv_force_reload"
MARKER_NAME = ".envrc"
PROFILE_CACHE_GLOB = ".direnv/*.rc"

# Shell conventions for "command not found" and "found but not executable"
COMMAND_NOT_FOUND = 127
COMMAND_NOT_EXECUTABLE = 126


class EnvironmentRefreshError(Exception):
    """Base class for refresh failures. `exit_code` is the process status to report."""
    exit_code = 1


class TargetDirectoryMissing(EnvironmentRefreshError):
    def __init__(self, target_dir: Path):
        self.target_dir = target_dir
        super().__init__(
            f"Cannot find the cratedocs-mcp checkout at {target_dir}.\n"
            f"Expected a directory containing {MARKER_NAME}. Automatic reload is not possible; "
            f"reload manually instead:\n"
            f"    cd /path/to/cratedocs-mcp && {FORCE_RELOAD_VAR}=1 {DIRENV} exec . true"
        )


class RebuildFailed(EnvironmentRefreshError):
    def __init__(self, command: List[str], exit_code: int, reason: str = None):
        self.command = command
        self.exit_code = exit_code
        detail = reason or f"exited with status {exit_code}"
        super().__init__(f"Environment rebuild failed: {' '.join(command)} {detail}")


def ensure_target_dir(target_dir: Path) -> None:
    if not target_dir.is_dir():
        raise TargetDirectoryMissing(target_dir)


def force_rebuild(target_dir: Path, logger) -> None:
    """
    Run the rebuild through direnv and wait for it.

    Output goes straight to the terminal; only the exit status is inspected.

    Raises:
        RebuildFailed: direnv is missing or not executable, exited non-zero, or was killed
    """
    command = [DIRENV, "exec", str(target_dir), "true"]
    env = dict(os.environ, **{FORCE_RELOAD_VAR: "1"})

    logger.info("Forcing environment rebuild", extra={'extra_data': {'command': command}})
    try:
        completed = subprocess.run(command, env=env, check=False)
    except FileNotFoundError:
        raise RebuildFailed(command, COMMAND_NOT_FOUND, f"could not be run: {DIRENV} not found on PATH")
    except OSError as e:
        raise RebuildFailed(command, COMMAND_NOT_EXECUTABLE, f"could not be run: {e}")

    if completed.returncode != 0:
        # Negative return codes mean death by signal
        code = completed.returncode if completed.returncode > 0 else 128 - completed.returncode
        raise RebuildFailed(command, code)


def touch_marker(target_dir: Path, logger) -> os.stat_result:
    """Set `.envrc`'s mtime to now, creating it if needed, and return its new stat."""
    marker = target_dir / MARKER_NAME
    marker.touch(exist_ok=True)
    marker_stat = marker.stat()
    logger.info(
        "Touched environment marker",
        extra={'extra_data': {'path': str(marker), 'mtime_ns': marker_stat.st_mtime_ns}}
    )
    return marker_stat


def sync_profile_caches(target_dir: Path, marker_stat: os.stat_result, logger) -> List[Path]:
    """
    Give every profile cache exactly the marker's timestamps.

    Timestamps are copied in nanoseconds so direnv's newer-than comparison
    sees them as equal. Having no cache files is not an error.

    Returns:
        The cache files that were re-stamped
    """
    cache_files = sorted(target_dir.glob(PROFILE_CACHE_GLOB))
    if not cache_files:
        logger.warning(
            "No profile cache files to synchronize",
            extra={'extra_data': {'pattern': str(target_dir / PROFILE_CACHE_GLOB)}}
        )
        return []

    for cache_file in cache_files:
        os.utime(cache_file, ns=(marker_stat.st_atime_ns, marker_stat.st_mtime_ns))

    logger.info(
        "Synchronized profile caches",
        extra={'extra_data': {'files': [str(path) for path in cache_files], 'mtime_ns': marker_stat.st_mtime_ns}}
    )
    return cache_files


def refresh_environment(target_dir: Path, logger) -> List[Path]:
    """
    Run the full refresh against `target_dir`.

    Returns:
        The profile cache files that were re-stamped

    Raises:
        EnvironmentRefreshError: validation or rebuild failed
        OSError: a timestamp could not be updated
    """
    ensure_target_dir(target_dir)
    force_rebuild(target_dir, logger)
    marker_stat = touch_marker(target_dir, logger)
    return sync_profile_caches(target_dir, marker_stat, logger)


def main(target_dir: Path = TARGET_DIR, logs_dir: Path = LOGS_DIR) -> int:
    logger = setup_logging(logs_dir, name="CrateDocsEnvRefresh")
    logger.info("Environment refresh starting", extra={'extra_data': {'target_dir': str(target_dir)}})

    try:
        synced = refresh_environment(target_dir, logger)
    except EnvironmentRefreshError as e:
        logger.error("Environment refresh failed", exc_info=True, extra={'extra_data': {'exit_code': e.exit_code}})
        print(str(e), file=sys.stderr)
        return e.exit_code
    except OSError as e:
        logger.error("Failed to update timestamps", exc_info=True, extra={'extra_data': {'target_dir': str(target_dir)}})
        print(f"Failed to update timestamps in {target_dir}: {e}", file=sys.stderr)
        return 1

    print(f"Reloaded environment for {target_dir} ({len(synced)} profile cache(s) re-stamped)")
    logger.info("Environment refresh finished", extra={'extra_data': {'synced_count': len(synced)}})
    return 0


if __name__ == "__main__":
    sys.exit(main())
