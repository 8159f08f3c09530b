from __future__ import annotations

from fastapi.testclient import TestClient

from position_descriptor.api.deps import get_construct_token_uri_use_case, get_format_tick_use_case
from position_descriptor.application.dto.formatting import FormatTickOutput
from position_descriptor.application.dto.token_uri import ConstructTokenURIOutput
from position_descriptor.domain.exceptions import TickInputError
from position_descriptor.domain.services.tick_math import encode_price_sqrt
from position_descriptor.main import app


class FakeFormatTickUseCase:
    def execute(self, command):
        if command.tick_spacing == 7:
            raise TickInputError("bad spacing")
        return FormatTickOutput(tick=command.tick, tick_spacing=command.tick_spacing, decimal_string="MAX")


class FakeConstructTokenURIUseCase:
    def __init__(self):
        self.commands = []

    def execute(self, command):
        self.commands.append(command)
        return ConstructTokenURIOutput(token_uri="data:application/json,{}")


client = TestClient(app)


def test_health():
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_fixed_point_decimal_string():
    value = encode_price_sqrt(38741, 10**20)

    response = client.get("/v1/fixed-point/decimal-string", params={"value": str(value)})

    assert response.status_code == 200
    payload = response.json()
    assert payload["value"] == str(value)
    assert payload["kind"] == "sqrt_ratio_x96"
    assert payload["decimal_string"] == "0.00000000000000038740"


def test_fixed_point_decimal_string_rejects_bad_values():
    assert client.get("/v1/fixed-point/decimal-string", params={"value": "-1"}).status_code == 400
    assert client.get("/v1/fixed-point/decimal-string", params={"value": str(2**160)}).status_code == 400
    assert (
        client.get("/v1/fixed-point/decimal-string", params={"value": "1", "kind": "other"}).status_code
        == 422
    )


def test_tick_decimal_string():
    response = client.get("/v1/ticks/-1/decimal-string", params={"tick_spacing": 60})

    assert response.status_code == 200
    assert response.json() == {"tick": -1, "tick_spacing": 60, "decimal_string": "0.99990"}


def test_tick_decimal_string_sentinel_and_rejection():
    assert client.get("/v1/ticks/-887220/decimal-string", params={"tick_spacing": 60}).json()[
        "decimal_string"
    ] == "MIN"
    assert client.get("/v1/ticks/887221/decimal-string", params={"tick_spacing": 60}).status_code == 400


def test_tick_decimal_string_with_overridden_use_case():
    app.dependency_overrides[get_format_tick_use_case] = lambda: FakeFormatTickUseCase()
    try:
        ok = client.get("/v1/ticks/5/decimal-string", params={"tick_spacing": 1})
        bad = client.get("/v1/ticks/5/decimal-string", params={"tick_spacing": 7})
    finally:
        app.dependency_overrides.clear()

    assert ok.json()["decimal_string"] == "MAX"
    assert bad.status_code == 400
    assert bad.json()["detail"] == "bad spacing"


def test_tick_bounds():
    response = client.get("/v1/ticks/bounds", params={"fee": 500})

    assert response.status_code == 200
    assert response.json() == {"tick_spacing": 10, "min_tick": -887270, "max_tick": 887270}
    assert client.get("/v1/ticks/bounds").status_code == 400


def test_fee_percent_string():
    response = client.get("/v1/fees/3000/percent-string")

    assert response.status_code == 200
    assert response.json() == {"fee": 3000, "percent_string": "0.3%"}
    assert client.get("/v1/fees/16777216/percent-string").status_code == 400


def test_address_string():
    response = client.get("/v1/addresses/0x" + "1234ABCDEF" * 4)

    assert response.status_code == 200
    assert response.json() == {"address": "0x" + "1234abcdef" * 4}
    assert client.get("/v1/addresses/0x1234").status_code == 400


def test_token_uri():
    response = client.post(
        "/v1/token-uri",
        json={
            "token0": "0x" + "1" * 40,
            "token1": "0x" + "2" * 40,
            "tick_lower": -887220,
            "tick_upper": 887220,
            "token0_symbol": "TKN0",
            "token1_symbol": "TKN1",
            "fee": 3000,
            "liquidity": 123456,
            "pool_address": "0x" + "b" * 40,
        },
    )

    assert response.status_code == 200
    assert response.json()["token_uri"].startswith(
        'data:application/json,{"name":"Uniswap V3 - 0.3% - TKN0/TKN1 - MIN<>MAX", '
    )


def test_token_uri_passes_request_to_use_case():
    fake = FakeConstructTokenURIUseCase()
    app.dependency_overrides[get_construct_token_uri_use_case] = lambda: fake
    try:
        response = client.post(
            "/v1/token-uri",
            json={
                "token0": "0xa",
                "token1": "0xb",
                "tick_lower": -60,
                "tick_upper": 60,
                "tick_spacing": 60,
                "token0_symbol": "A",
                "token1_symbol": "B",
                "fee": 3000,
                "liquidity": 2**100,
                "pool_address": "0xc",
            },
        )
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 200
    assert response.json() == {"token_uri": "data:application/json,{}"}
    assert fake.commands[0].liquidity == 2**100
    assert fake.commands[0].tick_spacing == 60


def test_token_uri_rejects_invalid_position():
    response = client.post(
        "/v1/token-uri",
        json={
            "token0": "0xzz",
            "token1": "0x" + "2" * 40,
            "tick_lower": -60,
            "tick_upper": 60,
            "tick_spacing": 60,
            "token0_symbol": "A",
            "token1_symbol": "B",
            "fee": 3000,
            "liquidity": 1,
            "pool_address": "0x" + "b" * 40,
        },
    )

    assert response.status_code == 400


def test_fixed_point_decimal_string_rejects_oversized_digit_strings():
    assert client.get("/v1/fixed-point/decimal-string", params={"value": "9" * 5000}).status_code == 400
    assert client.get("/v1/fixed-point/decimal-string", params={"value": "1" * 79}).status_code == 400


def test_fixed_point_decimal_string_accepts_leading_zeros():
    response = client.get("/v1/fixed-point/decimal-string", params={"value": "0" * 100 + str(2**96)})

    assert response.status_code == 200
    assert response.json()["decimal_string"] == "1.0000"


def test_tick_bounds_rejects_spacing_that_contradicts_fee():
    response = client.get("/v1/ticks/bounds", params={"fee": 500, "tick_spacing": 60})

    assert response.status_code == 400
    assert client.get("/v1/ticks/bounds", params={"fee": 500, "tick_spacing": 10}).status_code == 200
