# -*- coding: utf-8 -*-
"""
Unit Tests for SettingsModel

Tests for defaults, validation, persistence and observers of the
preference store.
"""

import json

import pytest

from models.entry import PartitionTag
from models.settings_model import SettingsModel
from interfaces.i_sync import IPreferenceStore
from stringedit_enums import Platform


class TestDefaults:

    def test_defaults_without_file(self, settings_model):
        assert settings_model.last_partition == PartitionTag(Platform.IOS)
        assert settings_model.ui_language == "en"
        assert not settings_model.is_dirty

    def test_implements_preference_store(self, settings_model):
        assert isinstance(settings_model, IPreferenceStore)

    def test_invalid_values_fall_back(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({
            "last_platform": "windows",
            "last_language": "fr",
            "ui_language": "xx",
        }), encoding="utf-8")

        settings = SettingsModel(path)

        assert settings.last_partition == PartitionTag(Platform.IOS)
        assert settings.ui_language == "en"

    def test_corrupted_file_uses_defaults(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text("{not json", encoding="utf-8")
        assert SettingsModel(path).last_partition == PartitionTag(Platform.IOS)


class TestPersistence:

    def test_last_partition_round_trip(self, tmp_path):
        path = tmp_path / "settings.json"
        settings = SettingsModel(path)
        settings.last_partition = PartitionTag(Platform.ANDROID, "fr")
        assert settings.is_dirty

        assert settings.save()
        assert not settings.is_dirty

        reloaded = SettingsModel(path)
        assert reloaded.last_partition == PartitionTag(Platform.ANDROID, "fr")

    def test_save_creates_parent_directory(self, tmp_path):
        path = tmp_path / "nested" / "dir" / "settings.json"
        assert SettingsModel(path).save()
        assert path.is_file()

    def test_rejects_unknown_ui_language(self, settings_model):
        with pytest.raises(ValueError):
            settings_model.ui_language = "xx"


class TestObservers:

    def test_notified_on_change_only(self, settings_model):
        received = []
        settings_model.subscribe(SettingsModel.KEY_LAST_PLATFORM, received.append)

        settings_model.last_partition = PartitionTag(Platform.ANDROID)
        settings_model.last_partition = PartitionTag(Platform.ANDROID)

        assert received == ["android"]

    def test_unsubscribe(self, settings_model):
        received = []
        settings_model.subscribe(SettingsModel.KEY_UI_LANGUAGE, received.append)
        settings_model.unsubscribe(SettingsModel.KEY_UI_LANGUAGE, received.append)

        settings_model.ui_language = "tr"

        assert received == []

    def test_failing_observer_does_not_block_others(self, settings_model):
        received = []

        def broken(value):
            raise RuntimeError("observer failed")

        settings_model.subscribe(SettingsModel.KEY_UI_LANGUAGE, broken)
        settings_model.subscribe(SettingsModel.KEY_UI_LANGUAGE, received.append)

        settings_model.ui_language = "tr"

        assert received == ["tr"]
