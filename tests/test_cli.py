#!/usr/bin/env python3
"""
Integration tests for the hashcrawler command line
"""

import json

import pytest
from typer.testing import CliRunner

from hashcrawler.cli import app

from conftest import BCRYPT_HASH, MD5_HASH, MYSQL41_HASH


@pytest.fixture
def runner():
    return CliRunner()


def test_identify_json(runner):
    result = runner.invoke(app, ["identify", BCRYPT_HASH, "--format", "Json"])
    assert result.exit_code == 0
    decoded = json.loads(result.stdout)
    assert decoded[0]["hash"] == BCRYPT_HASH
    assert [m["name"] for m in decoded[0]["matches"]] == ["BCrypt"]


def test_identify_plain_text(runner):
    result = runner.invoke(app, ["identify", MYSQL41_HASH, "--no-color"])
    assert result.exit_code == 0
    assert f"Hash: {MYSQL41_HASH}" in result.stdout
    assert "[Possible] MySQL4.1+" in result.stdout


def test_identify_rich_text(runner):
    result = runner.invoke(app, ["identify", MD5_HASH])
    assert result.exit_code == 0
    assert "MD5" in result.stdout
    assert "NTLM" in result.stdout


def test_identify_object(runner):
    result = runner.invoke(app, ["identify", BCRYPT_HASH, "-o", "object"])
    assert result.exit_code == 0
    assert "BCrypt" in result.stdout


def test_identify_from_file(runner, tmp_path):
    path = tmp_path / "hashes.txt"
    path.write_text(f"{MD5_HASH}\n\nnot-a-hash!!\n{BCRYPT_HASH}\n\n")
    result = runner.invoke(app, ["identify", "--file", str(path), "-o", "Json", "-w", "3"])
    assert result.exit_code == 0
    decoded = json.loads(result.stdout)
    assert [item["hash"] for item in decoded] == [MD5_HASH, "", "not-a-hash!!", BCRYPT_HASH]
    assert decoded[1]["matches"][0]["name"] == "Unknown"


def test_identify_from_stdin(runner):
    result = runner.invoke(app, ["identify", "-o", "Json"], input=f"{MYSQL41_HASH}\n{BCRYPT_HASH}\n")
    assert result.exit_code == 0
    assert [item["hash"] for item in json.loads(result.stdout)] == [MYSQL41_HASH, BCRYPT_HASH]


def test_missing_file(runner, tmp_path):
    result = runner.invoke(app, ["identify", "--file", str(tmp_path / "nope.txt")])
    assert result.exit_code == 1


def test_no_input(runner):
    result = runner.invoke(app, ["identify"], input="")
    assert result.exit_code == 1


def test_bad_format(runner):
    result = runner.invoke(app, ["identify", MD5_HASH, "--format", "Xml"])
    assert result.exit_code == 1


def test_unknown_hash_still_succeeds(runner):
    result = runner.invoke(app, ["identify", "not-a-hash!!", "--no-color"])
    assert result.exit_code == 0
    assert "[Unknown] Unknown" in result.stdout


def test_types(runner):
    result = runner.invoke(app, ["types"])
    assert result.exit_code == 0
    assert "BCrypt" in result.stdout


def test_types_rarity_filter(runner):
    result = runner.invoke(app, ["types", "--rarity", "rare"])
    assert result.exit_code == 0
    assert "ADLER32" in result.stdout
    assert "BCrypt" not in result.stdout


def test_types_bad_rarity(runner):
    result = runner.invoke(app, ["types", "--rarity", "legendary"])
    assert result.exit_code == 1


def test_version(runner):
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert "HashCrawler" in result.stdout


def test_bracketed_format_reported_cleanly(runner):
    result = runner.invoke(app, ["identify", "abc", "--format", "[/x]"])
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "'[/x]'" in result.output


def test_bracketed_missing_file_reported_cleanly(runner, tmp_path):
    missing = tmp_path / "[" / "x]"
    result = runner.invoke(app, ["identify", "--file", str(missing)])
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "Cannot read" in result.output
