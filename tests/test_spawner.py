import asyncio
import json
import sys

import pytest

from netspawner import spawner
from netspawner.config import Config, load_config, parse_nodes_count
from netspawner.constants import GENESIS_TIMESTAMP_FIELD
from netspawner.exceptions import ConfigError, ProcessError, ProvisioningError
from netspawner.spawner import (
    node_dirs, provision_network, update_genesis_timestamp, remove_chaindata,
    resume_network, reset_network,
)

NET_MODE = "TESTNET_2V"


def write_home(home, core_path=sys.executable, net_mode=NET_MODE, nodes=2):
    (home / "config.json").write_text(json.dumps({"corePath": core_path, "netMode": net_mode}))
    src = home / "files" / "testnets" / net_mode
    (src / "configs_for_nodes").mkdir(parents=True)
    (src / "genesis.json").write_text(json.dumps({"NETWORK_ID": "local", GENESIS_TIMESTAMP_FIELD: 0}))
    for i in range(1, nodes + 1):
        (src / "configs_for_nodes" / f"config_{i}.json").write_text(json.dumps({"node": i}))
    return load_config(home)


def test_parse_nodes_count():
    assert parse_nodes_count("TESTNET_2V") == 2
    assert parse_nodes_count("TESTNET_21V") == 21
    for bad in ("TESTNET", "TESTNET_V", "TESTNET_0V", "TESTNET_5"):
        with pytest.raises(ConfigError):
            parse_nodes_count(bad)


def test_load_config(tmp_path):
    config = write_home(tmp_path)
    assert config.net_mode == NET_MODE
    assert config.nodes_count == 2
    assert config.network_dir == tmp_path.resolve() / "XTESTNET_2V"


def test_load_config_errors(tmp_path):
    with pytest.raises(ConfigError):
        load_config(tmp_path)

    (tmp_path / "config.json").write_text("{not json")
    with pytest.raises(ConfigError):
        load_config(tmp_path)

    (tmp_path / "config.json").write_text(json.dumps({"netMode": NET_MODE}))
    with pytest.raises(ConfigError) as exc:
        load_config(tmp_path)
    assert "corePath" in str(exc.value)


def test_provision_network(tmp_path):
    config = write_home(tmp_path)
    dirs = provision_network(config)
    assert [d.name for d in dirs] == ["V1", "V2"]
    for i, d in enumerate(dirs, start=1):
        assert json.loads((d / "configs.json").read_text()) == {"node": i}
        assert (d / "genesis.json").is_file()


def test_provision_missing_template(tmp_path):
    config = write_home(tmp_path)
    (config.source_dir / "configs_for_nodes" / "config_2.json").unlink()
    with pytest.raises(ProvisioningError):
        provision_network(config)


def test_update_genesis_timestamp(tmp_path):
    path = tmp_path / "genesis.json"
    path.write_text(json.dumps({"NETWORK_ID": "local", GENESIS_TIMESTAMP_FIELD: 1}))
    update_genesis_timestamp(path, 1700000000000)
    data = json.loads(path.read_text())
    assert data[GENESIS_TIMESTAMP_FIELD] == 1700000000000
    assert data["NETWORK_ID"] == "local"

    path.write_text("[]")
    with pytest.raises(ProvisioningError):
        update_genesis_timestamp(path, 1)


def test_remove_chaindata(tmp_path):
    (tmp_path / "CHAINDATA" / "blocks").mkdir(parents=True)
    assert remove_chaindata(tmp_path) is True
    assert not (tmp_path / "CHAINDATA").exists()
    assert remove_chaindata(tmp_path) is False


def test_resume_network_runs_every_node(tmp_path):
    config = write_home(tmp_path)
    script = (
        "import os, sys; "
        "sys.exit(0 if os.environ['CHAINDATA_PATH'] == os.getcwd() else 3)"
    )
    codes = asyncio.run(resume_network(config, ["-c", script]))
    assert codes == [0, 0]
    assert all(d.is_dir() for d in node_dirs(config))


def test_resume_network_missing_binary(tmp_path):
    config = write_home(tmp_path, core_path=str(tmp_path / "no-such-binary"))
    with pytest.raises(ProcessError):
        asyncio.run(resume_network(config))


def test_reset_network(tmp_path):
    config = write_home(tmp_path)
    stale = config.network_dir / "V1" / "CHAINDATA"
    stale.mkdir(parents=True)

    codes = asyncio.run(reset_network(config, ["-c", "pass"], timestamp_ms=42))

    assert codes == [0, 0]
    assert not stale.exists()
    for d in node_dirs(config):
        assert json.loads((d / "genesis.json").read_text())[GENESIS_TIMESTAMP_FIELD] == 42


def test_config_is_immutable(tmp_path):
    config = Config(core_path="core", net_mode=NET_MODE, home=tmp_path)
    with pytest.raises(Exception):
        config.net_mode = "TESTNET_5V"


def test_run_core_process_invalid_path(tmp_path):
    with pytest.raises(ProcessError):
        asyncio.run(spawner.run_core_process(tmp_path, "bad\x00path"))


def test_resume_network_terminates_started_nodes(tmp_path, monkeypatch):
    config = write_home(tmp_path)
    real_run = spawner.run_core_process
    started = []

    async def flaky_run(node_dir, core_path, args=()):
        if started:
            raise ProcessError(f"spawn for {node_dir}: refused")
        proc = await real_run(node_dir, core_path, ["-c", "import time; time.sleep(60)"])
        started.append(proc)
        return proc

    monkeypatch.setattr(spawner, "run_core_process", flaky_run)
    with pytest.raises(ProcessError):
        asyncio.run(resume_network(config))

    assert len(started) == 1
    assert started[0].returncode is not None


def test_resume_network_creates_missing_node_dirs(tmp_path):
    config = write_home(tmp_path)
    assert not config.network_dir.exists()
    assert asyncio.run(resume_network(config, ["-c", "pass"])) == [0, 0]
    assert [d.name for d in node_dirs(config)] == ["V1", "V2"]
    assert all(d.is_dir() for d in node_dirs(config))
