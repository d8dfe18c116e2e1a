"""Tests for the adaconv command line interface."""

import json
import logging

import pytest
from bech32 import bech32_encode, convertbits
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

from adaconv.cli import build_parser, main
from adaconv.core.address_codec import address_to_hex
from adaconv.core.tx_reference import ADDRESS_INSTEAD_OF_TXIN


def run(capsys, *argv):
    code = main(list(argv))
    out, err = capsys.readouterr()
    return code, out, err


class TestAddressCommand:
    """Tests for `adaconv address`."""

    def test_shelley(self, capsys, base_address):
        code, out, _ = run(capsys, "address", address_to_hex(base_address).upper())
        assert code == 0
        report = json.loads(out)
        assert report == {
            "era": "shelley",
            "network": "mainnet",
            "hex": address_to_hex(base_address),
        }

    def test_byron(self, capsys, byron_address):
        code, out, _ = run(capsys, "address", address_to_hex(byron_address))
        assert code == 0
        assert json.loads(out)["era"] == "byron"
        assert json.loads(out)["network"] is None

    def test_invalid(self, capsys):
        code, out, err = run(capsys, "address", "xy")
        assert code == 1
        assert out == ""
        assert "Not a Shelley or Byron address" in err

    def test_strict_hex_flag(self, capsys, enterprise_address):
        text = address_to_hex(enterprise_address) + "zz"
        assert run(capsys, "address", text)[0] == 0
        assert run(capsys, "--strict-hex", "address", text)[0] == 1

    def test_no_strict_hex_overrides_environment(self, capsys, monkeypatch, enterprise_address):
        monkeypatch.setenv("ADACONV_STRICT_HEX", "true")
        text = address_to_hex(enterprise_address) + "zz"
        assert run(capsys, "address", text)[0] == 1
        assert run(capsys, "--no-strict-hex", "address", text)[0] == 0

    def test_malformed_setting_falls_back(self, capsys, monkeypatch, enterprise_address):
        monkeypatch.setenv("ADACONV_STRICT_HEX", "maybe")
        text = address_to_hex(enterprise_address) + "zz"
        assert run(capsys, "address", text)[0] == 0


class TestTxCommands:
    """Tests for `adaconv txin` and `adaconv txout`."""

    def test_txin(self, capsys):
        code, out, _ = run(capsys, "txin", "AB" * 32 + "#2")
        assert code == 0
        assert json.loads(out) == {"tx_id": "ab" * 32, "index": 2, "rendered": "ab" * 32 + "#2"}

    def test_txin_address_given(self, capsys, enterprise_address):
        code, _, err = run(capsys, "txin", address_to_hex(enterprise_address) + "#0")
        assert code == 1
        assert err.strip() == ADDRESS_INSTEAD_OF_TXIN

    def test_txout(self, capsys, enterprise_address):
        hex_address = address_to_hex(enterprise_address)
        code, out, _ = run(capsys, "txout", f"{hex_address}+1000")
        assert code == 0
        report = json.loads(out)
        assert report["lovelace"] == 1000
        assert report["address"]["era"] == "shelley"
        assert report["address"]["network"] == "testnet"
        assert report["rendered"] == f"{hex_address}+1000"

    def test_txout_failure(self, capsys):
        code, _, err = run(capsys, "txout", "abcd+5")
        assert code == 1
        assert "abcd" in err


class TestItnKeyCommand:
    """Tests for `adaconv itn-key`."""

    def test_signing_key(self, capsys, tmp_path):
        path = tmp_path / "itn.skey"
        path.write_text(bech32_encode("ed25519_sk", convertbits(bytes(32), 8, 5)))
        code, out, _ = run(capsys, "itn-key", "--signing-key-file", str(path))
        assert code == 0
        report = json.loads(out)
        assert report["era"] == "shelley"
        assert report["key_type"] == "signing"
        assert len(bytes.fromhex(report["verification_key"])) == 32
        assert len(bytes.fromhex(report["key_hash"])) == 28

    def test_bad_verification_key(self, capsys, tmp_path):
        path = tmp_path / "itn.vkey"
        path.write_text(bech32_encode("ed25519_pk", convertbits(b"\x01\x02", 8, 5)))
        code, _, err = run(capsys, "itn-key", "--verification-key-file", str(path))
        assert code == 1
        assert err.strip() == "Error deserialising verification key: b'\\x01\\x02'"

    def test_missing_file(self, capsys, tmp_path):
        code, _, err = run(capsys, "itn-key", "--verification-key-file", str(tmp_path / "none"))
        assert code == 1
        assert err.startswith("adaconv.utils.files.read_text: ")

    def test_unexpected_prefix_warns(self, capsys, tmp_path, caplog):
        path = tmp_path / "stake.vkey"
        public = Ed25519PrivateKey.from_private_bytes(bytes(32)).public_key()
        raw = public.public_bytes(Encoding.Raw, PublicFormat.Raw)
        path.write_text(bech32_encode("stake_vk", convertbits(raw, 8, 5)))
        with caplog.at_level(logging.WARNING, logger="adaconv.crypto.itn"):
            code, out, _ = run(capsys, "itn-key", "--verification-key-file", str(path))
        assert code == 0
        assert json.loads(out)["key_type"] == "verification"
        assert "Expected key prefix 'ed25519_pk', got 'stake_vk'" in caplog.text

    def test_requires_one_file(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["itn-key"])
