"""Pytest configuration and fixtures."""

import pytest
import sys
from pathlib import Path

from hypothesis import HealthCheck, settings as hypothesis_settings

# Add src to path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from adaconv.config import get_settings
from adaconv.ledger import (
    ByronAddress,
    Credential,
    CredentialKind,
    Network,
    Pointer,
    RewardAccount,
    ShelleyAddress,
)


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Give every test settings built from a clean environment."""
    for name in ("ADACONV_STRICT_HEX", "ADACONV_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def key_hash():
    return bytes(range(28))


@pytest.fixture
def script_hash():
    return bytes(range(100, 128))


@pytest.fixture
def base_address(key_hash, script_hash):
    """Mainnet key/script base address (type 2)."""
    return ShelleyAddress(
        Network.MAINNET,
        Credential(CredentialKind.KEY_HASH, key_hash),
        Credential(CredentialKind.SCRIPT_HASH, script_hash),
    )


@pytest.fixture
def enterprise_address(key_hash):
    """Testnet enterprise address (type 6)."""
    return ShelleyAddress(Network.TESTNET, Credential(CredentialKind.KEY_HASH, key_hash))


@pytest.fixture
def pointer_address(script_hash):
    """Mainnet script/pointer address (type 5)."""
    return ShelleyAddress(
        Network.MAINNET,
        Credential(CredentialKind.SCRIPT_HASH, script_hash),
        Pointer(2498243, 27, 3),
    )


@pytest.fixture
def byron_address(key_hash):
    return ByronAddress(root=key_hash, attributes={2: b"\x1a\x2d\x96\x4a\x09"})


@pytest.fixture
def reward_account(key_hash):
    return RewardAccount(Network.MAINNET, Credential(CredentialKind.KEY_HASH, key_hash))


# The autouse settings fixture is function scoped.
hypothesis_settings.register_profile(
    "adaconv",
    suppress_health_check=[HealthCheck.function_scoped_fixture, HealthCheck.too_slow],
)
hypothesis_settings.load_profile("adaconv")
