"""Tests for settings, sound synthesis, and logging setup.

Covers:
- Settings dataclass defaults and JSON round-trip
- SoundManager WAV generation and playback API
- setup_logging handlers
"""

from __future__ import annotations

import io
import json
import logging
import wave

import pytest

from stopwatch.settings import Settings, load_settings, save_settings
from stopwatch.audio.sounds import (
    SoundManager,
    SOUND_NAMES,
    SAMPLE_RATE,
    _generate_start,
    _generate_reset,
    _generate_alert,
)
from stopwatch.logging_config import setup_logging


# ═══════════════════════════════════════════════════════════════════════
#  SETTINGS
# ═══════════════════════════════════════════════════════════════════════


class TestSettingsDefaults:
    def test_no_threshold(self):
        assert Settings().alert_threshold is None

    def test_repeat_seconds(self):
        assert Settings().alert_repeat_seconds == 5

    def test_sound(self):
        s = Settings()
        assert s.sound_enabled is True
        assert s.sound_volume == 70

    def test_notifications_default(self):
        assert Settings().notifications_enabled is True


class TestSettingsPersistence:
    def test_round_trip(self):
        save_settings(Settings(alert_threshold=90, sound_volume=42))
        loaded = load_settings()
        assert loaded.alert_threshold == 90
        assert loaded.sound_volume == 42

    def test_missing_file_returns_defaults(self):
        assert load_settings() == Settings()

    def test_invalid_json_returns_defaults(self, isolated_settings):
        (isolated_settings / "settings.json").write_text(
            "NOT VALID JSON", encoding="utf-8",
        )
        assert load_settings() == Settings()

    def test_non_object_returns_defaults(self, isolated_settings):
        (isolated_settings / "settings.json").write_text("[1, 2]", encoding="utf-8")
        assert load_settings() == Settings()

    def test_extra_keys_ignored(self, isolated_settings):
        data = {"alert_threshold": 30, "unknown_future_key": True}
        (isolated_settings / "settings.json").write_text(
            json.dumps(data), encoding="utf-8",
        )
        s = load_settings()
        assert s.alert_threshold == 30
        assert not hasattr(s, "unknown_future_key")

    def test_wrong_typed_threshold_dropped(self, isolated_settings, caplog):
        (isolated_settings / "settings.json").write_text(
            json.dumps({"alert_threshold": "90", "sound_volume": 40}),
            encoding="utf-8",
        )
        with caplog.at_level(logging.WARNING, logger="stopwatch.settings"):
            s = load_settings()
        assert s.alert_threshold is None
        assert s.sound_volume == 40
        assert "alert_threshold" in caplog.text

    @pytest.mark.parametrize("key, value", [
        ("window_width", "wide"),
        ("window_height", 280.5),
        ("sound_volume", None),
        ("sound_enabled", "yes"),
        ("alert_repeat_seconds", True),
        ("alert_threshold", [90]),
    ])
    def test_wrong_typed_values_fall_back_to_defaults(
        self, isolated_settings, key, value,
    ):
        (isolated_settings / "settings.json").write_text(
            json.dumps({key: value}), encoding="utf-8",
        )
        assert getattr(load_settings(), key) == getattr(Settings(), key)

    def test_loaded_threshold_accepted_by_engine(self, qapp, isolated_settings):
        from stopwatch.timer.engine import TimerEngine

        (isolated_settings / "settings.json").write_text(
            json.dumps({"alert_threshold": "90"}), encoding="utf-8",
        )
        engine = TimerEngine(threshold=load_settings().alert_threshold)
        assert engine.alert_threshold is None

    def test_null_threshold_is_valid(self, isolated_settings):
        (isolated_settings / "settings.json").write_text(
            json.dumps({"alert_threshold": None, "minimize_to_tray": True}),
            encoding="utf-8",
        )
        s = load_settings()
        assert s.alert_threshold is None
        assert s.minimize_to_tray is True

    def test_written_file_is_json(self, isolated_settings):
        save_settings(Settings())
        data = json.loads((isolated_settings / "settings.json").read_text())
        assert data["alert_threshold"] is None


# ═══════════════════════════════════════════════════════════════════════
#  SOUND SYNTHESIS
# ═══════════════════════════════════════════════════════════════════════


def _read_wav(data: bytes):
    with wave.open(io.BytesIO(data), "rb") as wf:
        return wf.getnchannels(), wf.getsampwidth(), wf.getframerate(), wf.getnframes()


class TestGenerators:
    @pytest.mark.parametrize("gen", [_generate_start, _generate_reset, _generate_alert])
    def test_valid_mono_pcm(self, gen):
        channels, width, rate, frames = _read_wav(gen())
        assert channels == 1
        assert width == 2
        assert rate == SAMPLE_RATE
        assert frames > 0

    def test_alert_is_longest(self):
        alert = _read_wav(_generate_alert())[3]
        assert alert > _read_wav(_generate_start())[3]
        assert alert > _read_wav(_generate_reset())[3]


class TestSoundManager:
    def test_creates_all_wavs(self, qapp, tmp_path):
        SoundManager(sounds_dir=tmp_path / "sounds")
        for name in SOUND_NAMES:
            assert (tmp_path / "sounds" / f"{name}.wav").exists()

    def test_default_dir_follows_app_support_dir(self, qapp, isolated_settings):
        mgr = SoundManager()
        assert mgr.sounds_dir == isolated_settings / "sounds"
        for name in SOUND_NAMES:
            assert (isolated_settings / "sounds" / f"{name}.wav").exists()

    def test_existing_files_kept(self, qapp, tmp_path):
        d = tmp_path / "sounds"
        d.mkdir()
        (d / "alert.wav").write_bytes(_generate_reset())
        SoundManager(sounds_dir=d)
        assert (d / "alert.wav").read_bytes() == _generate_reset()

    def test_volume_clamped(self, qapp, tmp_path):
        mgr = SoundManager(sounds_dir=tmp_path)
        mgr.set_volume(150)
        assert mgr.volume == 100
        mgr.set_volume(-5)
        assert mgr.volume == 0

    def test_disable(self, qapp, tmp_path):
        mgr = SoundManager(sounds_dir=tmp_path)
        mgr.set_enabled(False)
        assert mgr.enabled is False
        mgr.play("alert")  # no-op, must not raise

    def test_unknown_name_is_noop(self, qapp, tmp_path):
        mgr = SoundManager(sounds_dir=tmp_path)
        mgr.play("does_not_exist")


# ═══════════════════════════════════════════════════════════════════════
#  LOGGING
# ═══════════════════════════════════════════════════════════════════════


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.mark.usefixtures("restore_root_logger")
class TestSetupLogging:
    def test_console_only(self):
        root = setup_logging(logging.DEBUG)
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1

    def test_repeated_calls_do_not_duplicate(self):
        setup_logging()
        root = setup_logging()
        assert len(root.handlers) == 1

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "logs" / "stopwatch.log"
        root = setup_logging(log_file=log_file)
        try:
            assert len(root.handlers) == 2
            logging.getLogger("stopwatch.test").info("hello")
            for h in root.handlers:
                h.flush()
            assert "hello" in log_file.read_text(encoding="utf-8")
        finally:
            for h in list(root.handlers):
                if isinstance(h, logging.FileHandler):
                    h.close()
                    root.removeHandler(h)
