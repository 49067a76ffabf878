#!/usr/bin/env python3
"""
Pytest configuration and fixtures for hashcrawler tests
"""

import os
import sys

import pytest
import yaml

# Add parent directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from hashcrawler.core.identifier import registry as default_registry


BCRYPT_HASH = "$2a$12$K3JNi5vQMio5UQRrUJQOm.7U8Fb3sacDJIQUblk75jtpz6nbMPuFS"
MD5_HASH = "5f4dcc3b5aa765d61d8327deb882cf99"
MYSQL41_HASH = "*2470C0C06DEE42FD1618BB99005ADCA2EC9D1E19"


@pytest.fixture
def registry():
    """The built-in hash type registry"""
    return default_registry


@pytest.fixture
def sample_hashes():
    """Known hashes keyed by the type they should be reported as"""
    return {
        "MD5": MD5_HASH,
        "SHA1": "5baa61e4c9b93f3f0682250b6cf8331b7ee68fd8",
        "SHA224": "d63dc919e201d7bc4c825630d2cf25fdc93d4b2f0d46706d29038d01",
        "SHA256": "5e884898da28047151d0e56f8dc6292773603d0d6aabbdd62a11ef721d1542d8",
        "SHA384": "a8b64babd0aca91a59bdbb7761b421d4f2bb38280d3a75ba0f21f2bebc45583d"
                  "446c598660c94ce680c47d19c30783a7",
        "SHA512": "b109f3bbbc244eb82441917ed06d618b9008dd09b3befd1b5e07394c706a8bb9"
                  "80b1d7785e5976ec049b46df5f1326af5a2ea6d103fd07c95385ffab0cacbc86",
        "MySQL323": "6f8c114b58f2ce9e",
        "MySQL4.1+": MYSQL41_HASH,
        "BCrypt": BCRYPT_HASH,
        "Argon2": "$argon2id$v=19$m=65536,t=3,p=4$c29tZXNhbHQ$RdescudvJCsgt3ub+b+dWRWJTmaaJObG",
        "MD5 Crypt": "$1$28772684$iEwNOgGugqO9.bIz5sk8k/",
        "SHA512 Crypt": "$6$saltsalt$" + "a" * 86,
        "Apache MD5": "$apr1$71850310$gh9m4xcAn3MGxogwX/ztb.",
        "PHPass": "$P$984478476IagS59wHZvyQMArzfx58u.",
        "DES Crypt": "abJnggxhB/yWI",
        "CRC32": "cbf43926",
        "DCC": "4dd8965d1d476fa0d026722989a6b772:3060147285011",
        "NetNTLMv2": "admin::N46iSNekpT:08ca45b7d7ea58ee:88dcbe4446168966a153a0064958dac6:"
                     "5c7830315c78303100000000000b45c67103d07d7b95acd12ffa11230e0000000052920b85f78d013c31",
    }


@pytest.fixture
def config_file(tmp_path):
    """Write a config file and return a factory for its path"""
    def _write(data):
        path = tmp_path / "hashcrawler.yaml"
        with open(path, 'w') as f:
            yaml.dump(data, f)
        return path
    return _write


def pytest_configure(config):
    """Configure pytest markers"""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests for component interaction")


def pytest_collection_modifyitems(config, items):
    """Add markers based on test file names"""
    for item in items:
        if "test_cli" in item.nodeid:
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)
