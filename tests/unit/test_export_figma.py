"""Tests for the design-tool variables exporter."""

from __future__ import annotations

import json
from datetime import datetime, timedelta, timezone

import pytest

from tokenforge.exporters.figma import (
    build_figma_document,
    export_to_figma_json,
    format_timestamp,
)


@pytest.fixture
def document(default_tokens, fixed_time) -> dict:
    return json.loads(export_to_figma_json(default_tokens, generated_at=fixed_time))


def _collection(document: dict, name: str) -> dict:
    return next(c for c in document["collections"] if c["name"] == name)


def _values(collection: dict) -> dict:
    return {v["name"]: v["valuesByMode"] for v in collection["variables"]}


class TestDocument:
    def test_envelope(self, document):
        assert document["version"] == "1.0.0"
        assert document["generatedAt"] == "2026-01-02T03:04:05.678Z"

    def test_collection_order(self, document):
        assert [c["name"] for c in document["collections"]] == [
            "Colors",
            "Spacing",
            "Border Radius",
            "Typography",
        ]

    def test_modes(self, document):
        assert _collection(document, "Colors")["modes"] == ["light", "dark"]
        for name in ("Spacing", "Border Radius", "Typography"):
            assert _collection(document, name)["modes"] == ["light"]

    def test_indented_json(self, default_tokens, fixed_time):
        text = export_to_figma_json(default_tokens, generated_at=fixed_time)
        assert text.startswith('{\n  "version": "1.0.0",')

    def test_reproducible_with_fixed_time(self, default_tokens, fixed_time):
        assert export_to_figma_json(default_tokens, fixed_time) == export_to_figma_json(
            default_tokens, fixed_time
        )

    def test_defaults_to_now(self, default_tokens):
        before = datetime.now(timezone.utc).replace(microsecond=0) - timedelta(seconds=1)
        stamp = build_figma_document(default_tokens)["generatedAt"]
        parsed = datetime.fromisoformat(stamp.replace("Z", "+00:00"))
        assert parsed >= before


class TestColorsCollection:
    def test_variable_count(self, document):
        # 8 scales x 11 shades, 10 surfaces, 4 borders
        assert len(_collection(document, "Colors")["variables"]) == 88 + 10 + 4

    def test_every_color_has_both_modes(self, document):
        for variable in _collection(document, "Colors")["variables"]:
            assert variable["type"] == "COLOR"
            assert set(variable["valuesByMode"]) == {"light", "dark"}

    def test_scale_shades_same_in_both_modes(self, document, default_tokens):
        values = _values(_collection(document, "Colors"))
        expected = default_tokens.colors.primary["500"]
        assert values["color/primary/500"] == {"light": expected, "dark": expected}

    def test_surface_names_kebab_case(self, document):
        values = _values(_collection(document, "Colors"))
        assert values["surface/card-foreground"] == {"light": "#0f172a", "dark": "#fafafa"}
        assert values["surface/background"] == {"light": "#ffffff", "dark": "#0a0a0b"}

    def test_borders(self, document):
        values = _values(_collection(document, "Colors"))
        assert values["border/focus"] == {"light": "#2563eb", "dark": "#3b82f6"}
        assert values["border/default"]["dark"] == "rgba(255, 255, 255, 0.08)"


class TestNumericCollections:
    def test_spacing(self, document):
        collection = _collection(document, "Spacing")
        values = _values(collection)
        assert values["spacing/0.5"] == {"light": 2}
        assert values["spacing/px"] == {"light": 1}
        assert values["spacing/32"] == {"light": 128}
        assert values["spacing/compact/md"] == {"light": 12}
        assert values["spacing/comfortable/xl"] == {"light": 48}
        assert len(collection["variables"]) == 16 + 3 * 5
        assert all(v["type"] == "FLOAT" for v in collection["variables"])

    def test_radius(self, document):
        values = _values(_collection(document, "Border Radius"))
        assert values["radius/none"] == {"light": 0}
        assert values["radius/2xl"] == {"light": 24}
        assert values["radius/full"] == {"light": 9999}

    def test_typography(self, document):
        collection = _collection(document, "Typography")
        values = _values(collection)
        assert values["font-weight/bold"] == {"light": 700}
        assert values["typography/display/xl/font-size"] == {"light": 72}
        assert values["typography/display/xl/line-height"] == {"light": 1.1}
        assert values["typography/heading/h1/font-size"] == {"light": 32}
        assert values["typography/body/md/line-height"] == {"light": 1.6}
        assert values["typography/overline/font-size"] == {"light": 11}
        assert len(collection["variables"]) == 4 + 17 * 2

    def test_integral_values_serialize_as_ints(self, default_tokens, fixed_time):
        text = export_to_figma_json(default_tokens, generated_at=fixed_time)
        assert '"light": 72\n' in text
        assert '"light": 72.0' not in text


class TestFormatTimestamp:
    def test_utc_millis(self):
        moment = datetime(2026, 1, 2, 3, 4, 5, 678901, tzinfo=timezone.utc)
        assert format_timestamp(moment) == "2026-01-02T03:04:05.678Z"

    def test_naive_is_utc(self):
        assert format_timestamp(datetime(2026, 1, 2)) == "2026-01-02T00:00:00.000Z"

    def test_converts_offset(self):
        moment = datetime(2026, 1, 2, 5, 0, tzinfo=timezone(timedelta(hours=2)))
        assert format_timestamp(moment) == "2026-01-02T03:00:00.000Z"
