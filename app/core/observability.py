from prometheus_client import Counter, Histogram

REQUEST_COUNT = Counter(
    "contentfeed_api_requests_total",
    "Total API requests",
    ["method", "path", "status"],
)

REQUEST_LATENCY = Histogram(
    "contentfeed_api_request_latency_seconds",
    "API request latency",
    ["method", "path"],
)

UPSTREAM_COUNT = Counter(
    "contentfeed_upstream_requests_total",
    "Total Jupiter API requests",
    ["endpoint", "status"],
)

UPSTREAM_LATENCY = Histogram(
    "contentfeed_upstream_latency_seconds",
    "Jupiter API call latency",
    ["endpoint"],
)

FEED_RECORDS = Counter(
    "contentfeed_records_total",
    "Content records emitted by the feed normalizer",
    ["kind"],
)
