"""Process-wide services: telemetry."""
