from __future__ import annotations

from issue_upvotes.config import DEFAULT_OWNER, DEFAULT_REPOSITORY, Settings, load_env_file


class TestSettings:
    def test_defaults_target_fixed_repository(self, monkeypatch):
        monkeypatch.setenv("GITHUB_TOKEN", "tok")
        settings = Settings.from_env()
        assert settings.token == "tok"
        assert settings.full_name == f"{DEFAULT_OWNER}/{DEFAULT_REPOSITORY}"

    def test_empty_token_is_treated_as_missing(self, monkeypatch):
        monkeypatch.setenv("GITHUB_TOKEN", "")
        assert Settings.from_env(owner="octo", repository="hello").token is None


class TestLoadEnvFile:
    def test_missing_file_is_tolerated(self, tmp_path):
        assert load_env_file(tmp_path / "absent.env") is False

    def test_file_values_fill_environment(self, tmp_path, monkeypatch):
        monkeypatch.delenv("GITHUB_TOKEN", raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text("GITHUB_TOKEN=from-file\n", encoding="utf-8")

        assert load_env_file(env_file) is True
        assert Settings.from_env().token == "from-file"

    def test_existing_environment_wins(self, tmp_path, monkeypatch):
        monkeypatch.setenv("GITHUB_TOKEN", "from-env")
        env_file = tmp_path / ".env"
        env_file.write_text("GITHUB_TOKEN=from-file\n", encoding="utf-8")

        load_env_file(env_file)

        assert Settings.from_env().token == "from-env"
