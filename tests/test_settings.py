"""Tests for render settings resolution and validation."""

from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path

from mdcanvas.settings import RenderSettings, available_settings_profiles, resolve_settings


def _write_settings(tmp_dir: str, payload: object) -> Path:
    path = Path(tmp_dir) / "settings.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


class SettingsProfileTests(unittest.TestCase):
    def test_available_settings_profiles_contains_default(self) -> None:
        self.assertIn("default", available_settings_profiles())

    def test_defaults(self) -> None:
        settings = resolve_settings()
        self.assertEqual(settings.block_quote_indent, 7)
        self.assertEqual(settings.paragraph_gap, 8)
        self.assertEqual(settings.list_item_gap, 4)
        self.assertEqual(settings.ordered_list_indent, 14)
        self.assertEqual(settings.unordered_list_indent_offset, 0)
        self.assertEqual(settings.code_font, "Courier")
        self.assertEqual(settings.font_size, 10)
        self.assertEqual(settings.heading_font_name(1), "Helvetica-Bold")
        self.assertEqual(settings.heading_gap_before(2), 0)
        self.assertFalse(settings.report_unsupported)

    def test_unknown_profile_is_rejected(self) -> None:
        with self.assertRaisesRegex(ValueError, "unknown settings profile 'fancy'"):
            resolve_settings(profile="fancy")

    def test_keyword_overrides(self) -> None:
        settings = resolve_settings(paragraph_gap=12, heading_font_size=lambda depth: 30 - depth)
        self.assertEqual(settings.paragraph_gap, 12)
        self.assertEqual(settings.heading_font_size(2), 28)
        with self.assertRaisesRegex(ValueError, "unknown settings key\\(s\\): spacing"):
            resolve_settings(spacing=3)

    def test_keyword_overrides_are_validated(self) -> None:
        cases = (
            ({"font_size": -3}, "'font_size' must be >= 0"),
            ({"report_unsupported": "yes"}, "'report_unsupported' must be a boolean"),
            ({"normal_font": ""}, "'normal_font' must be a non-empty font name"),
            ({"max_nesting_depth": 0}, "'max_nesting_depth' must be >= 1"),
            ({"heading_gap_after": 4}, "'heading_gap_after' must be a function of the heading depth"),
        )
        for overrides, message in cases:
            with self.subTest(overrides=overrides):
                with self.assertRaisesRegex(ValueError, message):
                    resolve_settings(**overrides)
        self.assertIsNone(resolve_settings(max_nesting_depth=None).max_nesting_depth)


class SettingsFileTests(unittest.TestCase):
    def test_file_overrides_apply_before_keywords(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            path = _write_settings(
                tmp_dir,
                {"normal_font": "Times-Roman", "paragraph_gap": 10.5, "report_unsupported": True},
            )
            settings = resolve_settings(settings_file=path, paragraph_gap=2)

        self.assertEqual(settings.normal_font, "Times-Roman")
        self.assertEqual(settings.paragraph_gap, 2)
        self.assertTrue(settings.report_unsupported)
        self.assertEqual(settings.bold_font, RenderSettings().bold_font)

    def test_missing_file(self) -> None:
        with self.assertRaisesRegex(ValueError, "does not exist"):
            resolve_settings(settings_file="/nonexistent/settings.json")

    def test_invalid_json(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            path = Path(tmp_dir) / "settings.json"
            path.write_text("{not json", encoding="utf-8")
            with self.assertRaisesRegex(ValueError, "is not valid JSON"):
                resolve_settings(settings_file=path)

    def test_non_object_payload(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            path = _write_settings(tmp_dir, [1, 2])
            with self.assertRaisesRegex(ValueError, "must be a JSON object"):
                resolve_settings(settings_file=path)

    def test_rejects_unknown_key(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            path = _write_settings(tmp_dir, {"unknown": 1})
            with self.assertRaisesRegex(ValueError, "unknown settings key\\(s\\): unknown"):
                resolve_settings(settings_file=path)

    def test_rejects_depth_function_key(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            path = _write_settings(tmp_dir, {"heading_font_size": 12})
            with self.assertRaisesRegex(ValueError, "'heading_font_size' is a depth function"):
                resolve_settings(settings_file=path)

    def test_rejects_wrong_value_types(self) -> None:
        cases = (
            ({"paragraph_gap": "8"}, "'paragraph_gap' must be a number"),
            ({"font_size": True}, "'font_size' must be a number"),
            ({"list_item_gap": -1}, "'list_item_gap' must be >= 0"),
            ({"code_font": ""}, "'code_font' must be a non-empty font name"),
            ({"report_unsupported": "yes"}, "'report_unsupported' must be a boolean"),
            ({"max_nesting_depth": 0}, "'max_nesting_depth' must be >= 1"),
            ({"max_nesting_depth": 2.5}, "'max_nesting_depth' must be an integer or null"),
        )
        for payload, message in cases:
            with self.subTest(payload=payload):
                with tempfile.TemporaryDirectory() as tmp_dir:
                    path = _write_settings(tmp_dir, payload)
                    with self.assertRaisesRegex(ValueError, message):
                        resolve_settings(settings_file=path)

    def test_nesting_ceiling_can_be_disabled(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            path = _write_settings(tmp_dir, {"max_nesting_depth": None})
            self.assertIsNone(resolve_settings(settings_file=path).max_nesting_depth)
