"""
Prometheus metrics for NewsAlert.

Shared metric definitions exposed from the host adapter's ``/metrics``
endpoint: render-cycle outcomes, list fetch latency, and the number of
alerts on screen after the last successful render.
"""

from __future__ import annotations

from prometheus_client import Counter, Gauge, Histogram

render_cycles_total = Counter(
    "newsalert_render_cycles_total",
    "Render cycles run by the alert list widget",
    ["outcome"],
)
list_fetch_duration_seconds = Histogram(
    "newsalert_list_fetch_duration_seconds",
    "Latency of the remote list items request in seconds",
)
rendered_alerts = Gauge(
    "newsalert_rendered_alerts",
    "Alerts displayed after the most recent render",
)
