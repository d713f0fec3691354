"""
Models for export service.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from metrika_logs.models.log_request import Part


class ExportMetrics(BaseModel):
    """Timing and size figures for one export run."""

    # Timing (seconds)
    total_time: float = 0.0
    wait_time: float = 0.0
    download_time: float = 0.0

    # Sizes (bytes)
    reported_size: int = 0
    downloaded_size: int = 0

    @property
    def download_speed_mbps(self) -> float:
        """Download speed in MB/s."""
        if self.download_time <= 0:
            return 0.0
        return (self.downloaded_size / 1024 / 1024) / self.download_time

    def summary(self) -> str:
        """Human-readable summary."""
        size_mb = self.downloaded_size / 1024 / 1024
        return "\n".join(
            [
                f"Size: {size_mb:.1f} MB ({self.downloaded_size:,} bytes)",
                f"Total: {self.total_time:.1f}s",
                f"  └─ Waiting: {self.wait_time:.1f}s",
                f"  └─ Download: {self.download_time:.1f}s @ {self.download_speed_mbps:.1f} MB/s",
            ]
        )


class ExportResult(BaseModel):
    """Result of a complete create/wait/download run."""

    request_id: int
    parts: list[Part] = Field(default_factory=list)
    files: list[Path] = Field(default_factory=list)
    metrics: ExportMetrics = Field(default_factory=ExportMetrics)

    def __repr__(self) -> str:
        return f"ExportResult(request_id={self.request_id}, files={len(self.files)})"

    def __str__(self) -> str:
        return self.metrics.summary()
