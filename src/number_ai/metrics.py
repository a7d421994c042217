from prometheus_client import Counter, Histogram, REGISTRY


# we check if they are already registered to avoid errors during reloads or test runs
def get_or_create_metric(name, documentation, metric_type, **kwargs):
    try:
        return metric_type(name, documentation, **kwargs)
    except ValueError:
        return REGISTRY._names_to_collectors[name]


REQUESTS_TOTAL = get_or_create_metric(
    "number_ai_requests_total",
    "Operation calls by outcome (ok, error, invalid)",
    Counter,
    labelnames=["operation", "outcome"],
)

REQUEST_LATENCY_SECONDS = get_or_create_metric(
    "number_ai_request_latency_seconds",
    "Latency of operation calls that reached the provider",
    Histogram,
    labelnames=["operation"],
)
