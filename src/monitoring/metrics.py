"""
Metrics Collection
Prometheus metrics for layout synthesis and rendering
"""

import time

from prometheus_client import Counter, Gauge, Histogram, generate_latest


class MetricsCollector:
    """
    Collects and exposes Prometheus metrics for the layout service.
    """

    def __init__(self) -> None:
        # Synthesis metrics
        self.synthesis_requests_total = Counter(
            "layout_synthesis_requests_total",
            "Total number of layout synthesis runs",
            ["status"],
        )
        self.synthesis_duration = Histogram(
            "layout_synthesis_duration_seconds",
            "Layout synthesis duration in seconds",
            buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0],
        )
        self.elements_placed_total = Counter(
            "layout_elements_placed_total",
            "Total number of positioned elements emitted",
            ["bucket"],
        )
        self.synthesis_warnings_total = Counter(
            "layout_synthesis_warnings_total",
            "Recoverable synthesis problems (catalog misses, overflow clamps)",
            ["kind"],
        )

        # Render metrics
        self.render_passes_total = Counter(
            "layout_render_passes_total",
            "Total number of render passes",
            ["status"],
        )
        self.render_blocks_total = Counter(
            "layout_render_blocks_total",
            "Rendered blocks by terminal state",
            ["state"],
        )
        self.block_render_duration = Histogram(
            "layout_block_render_duration_seconds",
            "Per-block render duration in seconds",
            buckets=[0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5],
        )

        # Registry metrics
        self.registry_size = Gauge(
            "layout_registry_components",
            "Number of registered renderable components",
        )

        # Error metrics
        self.errors_total = Counter(
            "layout_errors_total",
            "Total number of errors",
            ["error_type", "component"],
        )

        # System metrics
        self.uptime = Gauge(
            "layout_uptime_seconds",
            "Service uptime in seconds",
        )
        self.start_time = time.time()

    def record_synthesis(self, status: str, duration: float) -> None:
        """Record a synthesis run."""
        self.synthesis_requests_total.labels(status=status).inc()
        self.synthesis_duration.observe(duration)

    def record_element_placed(self, bucket: str) -> None:
        """Record one positioned element."""
        self.elements_placed_total.labels(bucket=bucket).inc()

    def record_synthesis_warning(self, kind: str) -> None:
        """Record a catalog miss or overflow clamp."""
        self.synthesis_warnings_total.labels(kind=kind).inc()

    def record_render_pass(self, status: str) -> None:
        """Record a render pass."""
        self.render_passes_total.labels(status=status).inc()

    def record_block(self, state: str, duration: float) -> None:
        """Record a block reaching a terminal state."""
        self.render_blocks_total.labels(state=state).inc()
        self.block_render_duration.observe(duration)

    def set_registry_size(self, size: int) -> None:
        """Set the registered component count."""
        self.registry_size.set(size)

    def record_error(self, error_type: str, component: str) -> None:
        """Record an error."""
        self.errors_total.labels(error_type=error_type, component=component).inc()

    def update_uptime(self) -> None:
        """Update the uptime metric."""
        self.uptime.set(time.time() - self.start_time)

    def get_metrics(self) -> bytes:
        """Get metrics in Prometheus format."""
        self.update_uptime()
        return generate_latest()


# Global metrics collector instance
metrics_collector = MetricsCollector()
