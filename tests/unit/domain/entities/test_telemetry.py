from __future__ import annotations

import math
from datetime import datetime

from telemetry_hub.domain.entities.telemetry import (
    HistorySample,
    SnapshotState,
    TelemetryPatch,
)


def test_patch_reads_canonical_keys() -> None:
    patch = TelemetryPatch.from_mapping(
        {
            "board_temp": 25.5,
            "ambient_temp": 27.3,
            "ambient_humidity": 50.1,
            "cpu_temp": 41.2,
            "free_memory_bytes": 204800,
            "cpu_usage": 12.5,
            "wifi_rssi": -61,
        }
    )

    assert patch.board_temperature == 25.5
    assert patch.temperature == 27.3
    assert patch.humidity == 50.1
    assert patch.cpu_temperature == 41.2
    assert patch.free_memory_bytes == 204800
    assert patch.cpu_usage_percent == 12.5
    assert patch.wifi_signal_dbm == -61
    assert patch.rejected_keys == ()


def test_patch_reads_firmware_keys() -> None:
    patch = TelemetryPatch.from_mapping(
        {
            "lm75_temp": 25,
            "sht20_temp": 22.0,
            "sht20_humi": 40.4,
            "esp32_temp": 39.9,
            "ram_free": 1024,
        }
    )

    assert patch.board_temperature == 25.0
    assert isinstance(patch.board_temperature, float)
    assert patch.temperature == 22.0
    assert patch.humidity == 40.4
    assert patch.cpu_temperature == 39.9
    assert patch.free_memory_bytes == 1024


def test_patch_skips_wrongly_typed_fields_only() -> None:
    patch = TelemetryPatch.from_mapping(
        {
            "ambient_temp": "hot",
            "ambient_humidity": 40.0,
            "cpu_usage": True,
            "wifi_rssi": -60.5,
            "cpu_temp": None,
        }
    )

    assert patch.temperature is None
    assert patch.humidity == 40.0
    assert patch.cpu_usage_percent is None
    assert patch.wifi_signal_dbm is None
    assert patch.cpu_temperature is None
    assert set(patch.rejected_keys) == {
        "ambient_temp",
        "cpu_usage",
        "wifi_rssi",
        "cpu_temp",
    }


def test_patch_rejects_non_finite_numbers() -> None:
    patch = TelemetryPatch.from_mapping(
        {"ambient_temp": math.nan, "ambient_humidity": math.inf, "board_temp": 10**400}
    )

    assert patch.is_empty
    assert set(patch.rejected_keys) == {
        "ambient_temp",
        "ambient_humidity",
        "board_temp",
    }


def test_patch_accepts_integral_float_rssi() -> None:
    patch = TelemetryPatch.from_mapping({"wifi_rssi": -61.0})

    assert patch.wifi_signal_dbm == -61
    assert isinstance(patch.wifi_signal_dbm, int)


def test_patch_falls_back_to_alias_when_canonical_key_is_invalid() -> None:
    patch = TelemetryPatch.from_mapping({"ambient_temp": None, "sht20_temp": 24.0})

    assert patch.temperature == 24.0
    assert patch.rejected_keys == ("ambient_temp",)


def test_patch_ignores_unknown_keys() -> None:
    patch = TelemetryPatch.from_mapping({"firmware": "1.2.3", "uptime": 99})

    assert patch.is_empty
    assert patch.rejected_keys == ()


def test_snapshot_defaults() -> None:
    snapshot = SnapshotState()

    assert snapshot.temperature == 23.5
    assert snapshot.humidity == 45.2
    assert snapshot.cpu_temperature == 40.0
    assert snapshot.board_temperature == 0.0
    assert snapshot.memory_use_label == "0KB"
    assert snapshot.cpu_usage_percent == 0.0
    assert snapshot.wifi_signal_dbm == 0
    assert snapshot.has_climate_reading


def test_snapshot_merge_is_last_write_wins_per_field() -> None:
    first = SnapshotState().merged(
        TelemetryPatch(temperature=27.3, humidity=50.1, wifi_signal_dbm=-70)
    )
    second = first.merged(TelemetryPatch(temperature=22.0))

    assert second.temperature == 22.0
    assert second.humidity == 50.1
    assert second.wifi_signal_dbm == -70
    assert first.temperature == 27.3


def test_snapshot_merge_formats_free_memory() -> None:
    snapshot = SnapshotState().merged(TelemetryPatch(free_memory_bytes=204800))

    assert snapshot.memory_use_label == "200.00KB"


def test_snapshot_merge_with_empty_patch_returns_same_state() -> None:
    snapshot = SnapshotState()

    assert snapshot.merged(TelemetryPatch()) is snapshot


def test_history_sample_rounds_readings(fixed_now: datetime) -> None:
    snapshot = SnapshotState(temperature=27.349, humidity=50.06)

    sample = HistorySample.from_snapshot(snapshot, fixed_now)

    assert sample is not None
    assert sample.timestamp == fixed_now
    assert sample.temperature == 27.3
    assert sample.humidity == 50.1


def test_history_sample_requires_climate_reading(fixed_now: datetime) -> None:
    snapshot = SnapshotState(temperature=None, humidity=45.0)

    assert not snapshot.has_climate_reading
    assert HistorySample.from_snapshot(snapshot, fixed_now) is None
