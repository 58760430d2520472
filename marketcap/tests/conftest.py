import json

import pytest

BCH_THB = {
    "avg24hr": "6325",
    "baseVolume": "0.27633587786259542",
    "high24hr": "6550",
    "highestBid": "6150",
    "last": "6100",
    "low24hr": "6100",
    "lowestAsk": "6549.99",
    "percentChange": "-3.557312252964426877",
    "quoteVolume": "1720.000000000000001",
}


def record(**overrides):
    data = dict(BCH_THB)
    data.update(overrides)
    return data


@pytest.fixture
def payload() -> bytes:
    return json.dumps(
        {
            "ETH_THB": record(last="6789.125", percentChange="0.5"),
            "BCH_THB": record(),
            "BTC_THB": record(last="1234567.891", percentChange="4.2"),
        }
    ).encode()


@pytest.fixture
def make_record():
    return record
