"""Local network provisioning and node process management."""

import asyncio
import json
import logging
import os
import shutil
import time
from pathlib import Path
from typing import List, Optional, Sequence

from .config import Config
from .constants import (
    CHAINDATA_DIRNAME,
    CHAINDATA_ENV_VAR,
    GENESIS_FILENAME,
    GENESIS_TIMESTAMP_FIELD,
    NODE_CONFIG_FILENAME,
    NODE_CONFIGS_DIR,
    NODE_DIR_PREFIX,
)
from .exceptions import ProcessError, ProvisioningError

__all__ = [
    "node_dirs",
    "provision_network",
    "update_genesis_timestamp",
    "remove_chaindata",
    "run_core_process",
    "resume_network",
    "reset_network",
]

logger = logging.getLogger(__name__)


def node_dirs(config: Config, create: bool = False) -> List[Path]:
    """
    Return ``V1`` .. ``VN`` under the network directory.

    Args:
        config: Launcher config
        create: Create missing directories
    """
    dirs = [config.network_dir / f"{NODE_DIR_PREFIX}{i}" for i in range(1, config.nodes_count + 1)]
    if create:
        for d in dirs:
            try:
                d.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise ProvisioningError(f"Cannot create {d}: {e}") from e
    return dirs


def _copy_file(src: Path, dst: Path) -> None:
    try:
        shutil.copyfile(src, dst)
    except OSError as e:
        raise ProvisioningError(f"Copy {src} -> {dst}: {e}") from e


def provision_network(config: Config) -> List[Path]:
    """
    Create node directories and copy the shared genesis and per-node configs.

    Returns:
        Node directories in order
    """
    src = config.source_dir
    dirs = node_dirs(config, create=True)

    for i, node_dir in enumerate(dirs, start=1):
        _copy_file(src / GENESIS_FILENAME, node_dir / GENESIS_FILENAME)
        _copy_file(
            src / NODE_CONFIGS_DIR / f"config_{i}.json",
            node_dir / NODE_CONFIG_FILENAME,
        )

    logger.info("Directories setup complete for network size %s", config.net_mode)
    return dirs


def update_genesis_timestamp(
    genesis_path: Path,
    timestamp_ms: int,
    field: str = GENESIS_TIMESTAMP_FIELD
) -> None:
    """
    Rewrite the epoch start timestamp inside a genesis document.

    Raises:
        ProvisioningError: If the file is unreadable or not a JSON object
    """
    try:
        with open(genesis_path, "r", encoding="utf-8") as f:
            genesis = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ProvisioningError(f"Cannot read genesis {genesis_path}: {e}") from e

    if not isinstance(genesis, dict):
        raise ProvisioningError(f"Genesis {genesis_path} must hold a JSON object")

    genesis[field] = timestamp_ms

    try:
        with open(genesis_path, "w", encoding="utf-8") as f:
            json.dump(genesis, f, indent=2)
    except OSError as e:
        raise ProvisioningError(f"Cannot write genesis {genesis_path}: {e}") from e


def remove_chaindata(node_dir: Path) -> bool:
    """Delete ``CHAINDATA`` inside a node directory; return whether it existed."""
    chaindata = node_dir / CHAINDATA_DIRNAME
    if not chaindata.is_dir():
        return False
    try:
        shutil.rmtree(chaindata)
    except OSError as e:
        raise ProvisioningError(f"Remove {chaindata}: {e}") from e
    return True


async def run_core_process(
    node_dir: Path,
    core_path: str,
    args: Sequence[str] = ()
) -> asyncio.subprocess.Process:
    """
    Start the node binary for one node directory.

    The process runs inside ``node_dir`` with ``CHAINDATA_PATH`` pointing
    at it and inherits stdout/stderr.

    Raises:
        ProcessError: If the binary cannot be started
    """
    env = dict(os.environ)
    env[CHAINDATA_ENV_VAR] = str(node_dir)

    try:
        proc = await asyncio.create_subprocess_exec(
            core_path,
            *args,
            cwd=str(node_dir),
            env=env,
        )
    except (OSError, ValueError) as e:
        raise ProcessError(f"spawn for {node_dir}: {e}") from e

    logger.info("Started node %s (pid %d)", node_dir.name, proc.pid)
    return proc


async def _terminate(procs: Sequence[asyncio.subprocess.Process]) -> None:
    for proc in procs:
        if proc.returncode is None:
            proc.terminate()
    await asyncio.gather(*(p.wait() for p in procs))


async def resume_network(config: Config, args: Sequence[str] = ()) -> List[int]:
    """
    Start one node process per node directory and wait for all to exit.

    Missing node directories are created first. If a later node fails to
    start, the nodes already running are terminated before the error
    propagates.

    Returns:
        Exit codes in node order
    """
    dirs = node_dirs(config, create=True)
    procs: List[asyncio.subprocess.Process] = []
    for node_dir in dirs:
        try:
            procs.append(await run_core_process(node_dir, config.core_path, args))
        except ProcessError:
            await _terminate(procs)
            raise

    try:
        codes = await asyncio.gather(*(p.wait() for p in procs))
    except asyncio.CancelledError:
        await _terminate(procs)
        raise

    for node_dir, code in zip(dirs, codes):
        if code != 0:
            logger.warning("Node %s exited with code %d", node_dir.name, code)
    return list(codes)


async def reset_network(
    config: Config,
    args: Sequence[str] = (),
    timestamp_ms: Optional[int] = None
) -> List[int]:
    """
    Re-provision the network from its templates, then resume it.

    Copies fresh genesis and config files, stamps the genesis with the
    current time, and wipes every node's chain data.
    """
    dirs = provision_network(config)

    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)

    for node_dir in dirs:
        genesis_path = node_dir / GENESIS_FILENAME
        if genesis_path.is_file():
            update_genesis_timestamp(genesis_path, timestamp_ms)
            logger.info("Updated timestamp in %s", genesis_path)
        if remove_chaindata(node_dir):
            logger.info("Deleted %s directory in %s", CHAINDATA_DIRNAME, node_dir)

    logger.info("Timestamps updated and %s directories deleted", CHAINDATA_DIRNAME)

    return await resume_network(config, args)
