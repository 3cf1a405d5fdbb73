#!/usr/bin/env python3
"""
Metrics definitions for the AI Gateway.
"""

import prometheus_client

PROVIDER_REQUESTS = prometheus_client.Counter(
    'gateway_provider_requests_total',
    'Outbound provider calls by endpoint and outcome',
    ['endpoint', 'outcome'],
)
PROVIDER_LATENCY = prometheus_client.Histogram(
    'gateway_provider_request_seconds',
    'Duration of outbound provider calls',
    ['endpoint'],
)
PROVIDER_SHAPE_ERRORS = prometheus_client.Counter(
    'gateway_provider_shape_errors_total',
    'Provider responses that did not match the expected shape',
    ['endpoint'],
)
