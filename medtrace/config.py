"""Organization identity paths and server settings."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

CRYPTO_PATH = "../../../MedTrace_network/organizations/peerOrganizations/org1.medtrace.com"


@dataclass(frozen=True)
class OrgSetup:
    """Where an organization's identity, key and TLS material live, and which peer to use."""

    org_name: str = "Org1"
    msp_id: str = "Org1MSP"
    crypto_path: str = CRYPTO_PATH
    cert_path: str = CRYPTO_PATH + "/users/[email]/msp/signcerts/[email]"
    key_path: str = CRYPTO_PATH + "/users/[email]/msp/keystore"
    tls_cert_path: str = CRYPTO_PATH + "/peers/peer0.org1.medtrace.com/tls/ca.crt"
    peer_endpoint: str = "dns:///localhost:7051"
    gateway_peer: str = "peer0.org1.medtrace.com"


@dataclass(frozen=True)
class ServerSettings:
    """Channel, chaincode and listening settings for the API server."""

    chaincode_name: str = "medtrace_cc"
    channel_name: str = "medtrace"
    host: str = ""
    port: int = 9090
    allow_origins: tuple[str, ...] = ("http://localhost:5173",)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ServerSettings:
        """Read CHAINCODE_NAME and CHANNEL_NAME; unset or empty values keep the defaults."""
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            chaincode_name=env.get("CHAINCODE_NAME") or defaults.chaincode_name,
            channel_name=env.get("CHANNEL_NAME") or defaults.channel_name,
        )