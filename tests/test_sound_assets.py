import numpy as np

from zombie_yard.sound_assets import build_groan_wave, build_shoot_wave


def test_shoot_wave_is_short_and_decays() -> None:
    wave = build_shoot_wave(22050)

    assert len(wave) == int(22050 * 0.12)
    assert np.max(np.abs(wave)) <= 1.0
    head = np.abs(wave[:200]).mean()
    tail = np.abs(wave[-200:]).mean()
    assert tail < head / 10


def test_shoot_wave_is_deterministic() -> None:
    assert np.array_equal(build_shoot_wave(44100), build_shoot_wave(44100))


def test_groan_wave_stays_in_range() -> None:
    wave = build_groan_wave(22050)

    assert len(wave) == int(22050 * 1.6)
    assert np.max(np.abs(wave)) <= 0.8 + 1e-9
    assert np.max(np.abs(wave)) > 0.3
