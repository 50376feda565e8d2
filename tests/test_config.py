"""Tests for configuration models and loading."""

import pytest
import yaml
from pydantic import ValidationError

from feedrank.config import (
    Config,
    ConfigModel,
    RankingConfig,
    RankingWeights,
    default_config_path,
    load_config,
    save_config,
)
from feedrank.models import UserProfile


class TestRankingConfig:

    def test_defaults(self):
        config = RankingConfig()
        assert config.weights.base_hot_score == 0.35
        assert config.weights.diversity_penalty == 0.10
        assert config.cold_start_threshold == 10
        assert config.fresh_content_window_minutes == 240
        assert config.max_age_hours == 48
        assert config.max_per_author == 3
        assert config.diversity_window == 20

    def test_negative_weight_rejected(self):
        with pytest.raises(ValidationError):
            RankingWeights(social_proof=-0.1)

    def test_weights_need_not_sum_to_one(self):
        weights = RankingWeights(base_hot_score=2.0, author_affinity=2.0)
        assert weights.base_hot_score == 2.0

    def test_fresh_window_longer_than_max_age_rejected(self):
        with pytest.raises(ValidationError):
            RankingConfig(fresh_content_window_minutes=600, max_age_hours=5)

    @pytest.mark.parametrize("field", ["fresh_content_window_minutes", "max_age_hours"])
    def test_non_positive_time_windows_rejected(self, field):
        with pytest.raises(ValidationError):
            RankingConfig(**{field: 0})

    def test_max_per_author_must_be_positive(self):
        with pytest.raises(ValidationError):
            RankingConfig(max_per_author=0)

    def test_immutable(self):
        config = RankingConfig()
        with pytest.raises(ValidationError):
            config.max_per_author = 5


class TestUserProfileValidation:

    def test_interest_out_of_range_rejected(self):
        with pytest.raises(ValidationError):
            UserProfile(topic_interests={"climate": 1.5})

    def test_negative_like_count_rejected(self):
        with pytest.raises(ValidationError):
            UserProfile(liked_author_counts={"alice": -1})

    def test_topic_keys_lowercased(self):
        profile = UserProfile(topic_interests={"Climate": 0.7})
        assert profile.topic_interests == {"climate": 0.7}


class TestConfigLoader:

    def test_save_and_load(self, tmp_path):
        path = tmp_path / "config.yaml"
        config = ConfigModel(ranking={"max_per_author": 2, "weights": {"social_proof": 0.4}})

        save_config(config, path)
        loaded = load_config(path)

        assert loaded.ranking.max_per_author == 2
        assert loaded.ranking.weights.social_proof == 0.4
        assert loaded.ranking.weights.base_hot_score == 0.35

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")

    def test_empty_file_uses_defaults(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_config(path) == ConfigModel()

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("ranking: [unclosed")
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_config(path)

    def test_negative_weight_in_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(yaml.dump({"ranking": {"weights": {"quality_score": -1}}}))
        with pytest.raises(ValueError, match="Invalid configuration"):
            load_config(path)

    def test_manager_falls_back_to_defaults(self, tmp_path, monkeypatch):
        """No explicit path and no user config: built-in defaults."""
        monkeypatch.delenv("FEEDRANK_CONFIG", raising=False)
        monkeypatch.setenv("HOME", str(tmp_path))
        assert Config().ranking == RankingConfig()

    def test_manager_explicit_missing_path(self, tmp_path):
        manager = Config(tmp_path / "typo.yaml")
        with pytest.raises(FileNotFoundError):
            manager.ranking

    def test_manager_env_missing_path(self, tmp_path, monkeypatch):
        monkeypatch.setenv("FEEDRANK_CONFIG", str(tmp_path / "typo.yaml"))
        with pytest.raises(FileNotFoundError):
            Config().ranking

    def test_manager_reads_env_path(self, tmp_path, monkeypatch):
        path = tmp_path / "custom.yaml"
        save_config(ConfigModel(ranking={"cold_start_threshold": 3}), path)
        monkeypatch.setenv("FEEDRANK_CONFIG", str(path))

        assert default_config_path() == path
        assert Config().ranking.cold_start_threshold == 3
