"""
Telemetry Hub Root Module

Store-and-serve backend for a single remote sensing device. The device
pushes partial readings, the hub keeps the latest value per field plus a
bounded rolling history, and dashboards poll the combined view.

Layer Structure:
- Domain: Snapshot, history sample and alert entities, alert rules
- Application: Ingestion/query use cases and DTOs
- Infrastructure: In-memory telemetry store
- Presentation: FastAPI controllers
- Shared: Cross-cutting concerns (logging, constants, rounding)
- Main: Composition root, application entry point and configuration
"""

__version__ = "1.0.0"
