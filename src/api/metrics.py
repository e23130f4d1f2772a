from prometheus_client import Counter, Histogram, Gauge, REGISTRY


# we check if they are already registered to avoid errors during hot reloads or test runs
def get_or_create_metric(name, documentation, metric_type, **kwargs):
    try:
        return metric_type(name, documentation, **kwargs)
    except ValueError:
        # If it already exists, retrieve it from the registry
        return REGISTRY._names_to_collectors[name]


REQUESTS_TOTAL = get_or_create_metric(
    "taskmind_requests_total",
    "Total requests",
    Counter,
    labelnames=["endpoint", "status"],
)

REQUEST_LATENCY_SECONDS = get_or_create_metric(
    "taskmind_request_latency_seconds",
    "Request latency",
    Histogram,
    labelnames=["endpoint"],
)

ANALYSES_TOTAL = get_or_create_metric(
    "taskmind_analyses_total",
    "Heuristic analyses run",
    Counter,
    labelnames=["kind"],
)

TASKS_TOTAL = get_or_create_metric(
    "taskmind_tasks_total", "Tasks currently stored", Gauge
)
