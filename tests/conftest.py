import json

import pytest

STRATUM_DOC = {
    "hashrate_15m": 10505,
    "hashrate_1h": 13794,
    "hashrate_24h": 24049,
    "total_hashes": 6021562332,
    "shares_found": 18,
    "shares_failed": 1,
    "average_effort": 122.298,
    "current_effort": 108.724,
    "connections": 2,
    "incoming_connections": 1,
}

NETWORK_DOC = {
    "difficulty": 326180875193,
    "hash": "5cc9cc40404608a866c16f4114a396355b82f8148c4285a21cd0937e8b84e776",
    "height": 2870723,
    "reward": 605959900000,
    "timestamp": 1682270152,
}


def write_state(data_dir, *, stratum=None, network=None):
    """Write the two P2Pool data api documents under ``data_dir``.

    Strings are written verbatim so tests can produce malformed JSON.
    """
    for relpath, doc in (("local/stratum", stratum), ("network/stats", network)):
        if doc is None:
            continue
        path = data_dir / relpath
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(doc if isinstance(doc, str) else json.dumps(doc))


@pytest.fixture
def stratum_doc():
    return dict(STRATUM_DOC)


@pytest.fixture
def network_doc():
    return dict(NETWORK_DOC)


@pytest.fixture
def data_dir(tmp_path, stratum_doc, network_doc):
    """A P2Pool data directory holding both valid documents."""
    write_state(tmp_path, stratum=stratum_doc, network=network_doc)
    return tmp_path


@pytest.fixture
def state_writer():
    return write_state
