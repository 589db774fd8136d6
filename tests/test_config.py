import dataclasses

import pytest

from medtrace.config import OrgSetup, ServerSettings


def test_defaults_from_empty_env():
    settings = ServerSettings.from_env({})
    assert settings == ServerSettings()
    assert settings.chaincode_name == "medtrace_cc"
    assert settings.channel_name == "medtrace"
    assert settings.port == 9090
    assert settings.allow_origins == ("http://localhost:5173",)


def test_env_overrides():
    settings = ServerSettings.from_env({"CHAINCODE_NAME": "cc2", "CHANNEL_NAME": "chan2"})
    assert settings.chaincode_name == "cc2"
    assert settings.channel_name == "chan2"


def test_empty_env_values_keep_defaults():
    settings = ServerSettings.from_env({"CHAINCODE_NAME": "", "CHANNEL_NAME": ""})
    assert settings.chaincode_name == "medtrace_cc"
    assert settings.channel_name == "medtrace"


def test_reads_process_environment(monkeypatch):
    monkeypatch.setenv("CHANNEL_NAME", "other")
    monkeypatch.delenv("CHAINCODE_NAME", raising=False)
    settings = ServerSettings.from_env()
    assert settings.channel_name == "other"
    assert settings.chaincode_name == "medtrace_cc"


def test_org_setup_defaults():
    setup = OrgSetup()
    assert setup.org_name == "Org1"
    assert setup.msp_id == "Org1MSP"
    assert setup.peer_endpoint == "dns:///localhost:7051"
    assert setup.gateway_peer == "peer0.org1.medtrace.com"
    for path in (setup.cert_path, setup.key_path, setup.tls_cert_path):
        assert path.startswith(setup.crypto_path)


def test_org_setup_is_frozen():
    setup = OrgSetup()
    with pytest.raises(dataclasses.FrozenInstanceError):
        setup.org_name = "Org2"
    assert setup.org_name == "Org1"