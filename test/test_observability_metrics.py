import asyncio

from prometheus_client import REGISTRY

from number_ai.facade import NumberAI


def _sample(name, **labels):
    return REGISTRY.get_sample_value(name, labels) or 0.0


def test_invalid_calls_are_counted(fake_provider_factory):
    ai = NumberAI(fake_provider_factory('{"random_int_array": [1]}'))
    before = _sample("number_ai_requests_total", operation="random_int_array", outcome="invalid")

    asyncio.run(ai.random_int_array(0))

    after = _sample("number_ai_requests_total", operation="random_int_array", outcome="invalid")
    assert after == before + 1


def test_ok_and_error_outcomes(fake_provider_factory):
    ok_before = _sample("number_ai_requests_total", operation="is_prime", outcome="ok")
    err_before = _sample("number_ai_requests_total", operation="is_prime", outcome="error")
    latency_before = _sample("number_ai_request_latency_seconds_count", operation="is_prime")

    asyncio.run(NumberAI(fake_provider_factory('{"is_prime": true}')).is_prime(7))
    asyncio.run(NumberAI(fake_provider_factory("not json")).is_prime(7))

    assert _sample("number_ai_requests_total", operation="is_prime", outcome="ok") == ok_before + 1
    assert _sample("number_ai_requests_total", operation="is_prime", outcome="error") == err_before + 1
    assert _sample("number_ai_request_latency_seconds_count", operation="is_prime") == latency_before + 2
