import json
from pathlib import Path

import pytest

from squadsplit.config_loader import DEFAULT_PROFILE, BalanceProfile, load_profile


def test_default_profile_constants():
    assert DEFAULT_PROFILE.overall_weight == pytest.approx(0.20)
    assert DEFAULT_PROFILE.attribute_weight == pytest.approx(0.30)
    assert DEFAULT_PROFILE.positional_weight == pytest.approx(0.40)
    assert DEFAULT_PROFILE.distribution_weight == pytest.approx(0.10)
    assert DEFAULT_PROFILE.overall_penalty == pytest.approx(0.5)
    assert DEFAULT_PROFILE.attribute_penalty == pytest.approx(2.0)
    assert DEFAULT_PROFILE.positional_penalty == pytest.approx(1.5)
    assert DEFAULT_PROFILE.distribution_penalty == pytest.approx(10.0)


def test_weights_must_sum_to_one():
    with pytest.raises(ValueError):
        BalanceProfile(overall_weight=0.5)


def test_negative_values_rejected():
    with pytest.raises(ValueError):
        BalanceProfile(attribute_penalty=-1.0)


def test_profile_save_and_load(tmp_path: Path):
    profile = BalanceProfile(overall_weight=0.25, distribution_weight=0.05, positional_penalty=2.0)
    path = tmp_path / "profile.json"
    profile.save(path)

    assert BalanceProfile.load(path) == profile


def test_load_keeps_defaults_and_ignores_unknown_keys(tmp_path: Path):
    path = tmp_path / "profile.json"
    path.write_text(json.dumps({"overall_penalty": 1, "colour": "blue"}), encoding="utf-8")

    profile = BalanceProfile.load(path)
    assert profile.overall_penalty == pytest.approx(1.0)
    assert profile.attribute_weight == pytest.approx(0.30)


def test_load_profile_uses_environment(tmp_path: Path, monkeypatch):
    path = tmp_path / "env.json"
    path.write_text(json.dumps({"distribution_penalty": 5}), encoding="utf-8")

    monkeypatch.delenv("SQUADSPLIT_PROFILE", raising=False)
    assert load_profile() is DEFAULT_PROFILE

    monkeypatch.setenv("SQUADSPLIT_PROFILE", str(path))
    assert load_profile().distribution_penalty == pytest.approx(5.0)
