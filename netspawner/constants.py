"""Constants for NetSpawner key derivation and network launching."""

from enum import Enum
from typing import Tuple

__all__ = [
    "KeyType",
    "HARDENED_OFFSET",
    "DEFAULT_BIP44_PATH",
    "MAX_PATH_COMPONENT",
    "BIP32_SEED_KEY",
    "SECP256K1_ORDER",
    "MNEMONIC_STRENGTH",
    "MNEMONIC_LANGUAGE",
    "PBKDF2_ROUNDS",
    "SEED_LENGTH",
    "ED25519_SPKI_PREFIX",
    "ED25519_KEY_LENGTH",
    "ED25519_SIGNATURE_LENGTH",
    "CONFIG_FILENAME",
    "NET_DIR_PREFIX",
    "NODE_DIR_PREFIX",
    "TESTNETS_SOURCE_DIR",
    "GENESIS_FILENAME",
    "NODE_CONFIGS_DIR",
    "NODE_CONFIG_FILENAME",
    "CHAINDATA_DIRNAME",
    "GENESIS_TIMESTAMP_FIELD",
    "CHAINDATA_ENV_VAR",
]


class KeyType(str, Enum):
    """Signature curves a key pair can live on."""

    ED25519 = "ed25519"


# BIP32 / BIP44
HARDENED_OFFSET = 0x80000000
DEFAULT_BIP44_PATH: Tuple[int, ...] = (44, 7337, 0, 0)
MAX_PATH_COMPONENT = HARDENED_OFFSET - 1
BIP32_SEED_KEY = b"Bitcoin seed"
SECP256K1_ORDER = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141

# BIP39
MNEMONIC_STRENGTH = 256
MNEMONIC_LANGUAGE = "english"
PBKDF2_ROUNDS = 2048
SEED_LENGTH = 64

# Ed25519 SubjectPublicKeyInfo header: SEQUENCE { SEQUENCE { OID 1.3.101.112 } BIT STRING }
ED25519_SPKI_PREFIX = bytes([
    0x30, 0x2A, 0x30, 0x05, 0x06, 0x03, 0x2B, 0x65, 0x70, 0x03, 0x21, 0x00,
])
ED25519_KEY_LENGTH = 32
ED25519_SIGNATURE_LENGTH = 64

# Launcher layout
CONFIG_FILENAME = "config.json"
NET_DIR_PREFIX = "X"
NODE_DIR_PREFIX = "V"
TESTNETS_SOURCE_DIR = ("files", "testnets")
GENESIS_FILENAME = "genesis.json"
NODE_CONFIGS_DIR = "configs_for_nodes"
NODE_CONFIG_FILENAME = "configs.json"
CHAINDATA_DIRNAME = "CHAINDATA"
GENESIS_TIMESTAMP_FIELD = "FIRST_EPOCH_START_TIMESTAMP"
CHAINDATA_ENV_VAR = "CHAINDATA_PATH"
