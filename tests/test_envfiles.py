"""
ABOUTME: Unit tests for .env file hydration
ABOUTME: Tests candidate ordering, precedence and that existing variables are never overridden
"""

import logging
import os

from envp.envfiles import env_file_candidates, load_env_from_env_files


class TestEnvFileCandidates:
    """Test candidate file ordering."""

    def test_development_default(self):
        expected = [
            ".env.development.local",
            ".env.local",
            ".env.development",
            ".env",
        ]
        assert env_file_candidates("") == expected
        assert env_file_candidates(None) == expected
        assert env_file_candidates("development") == expected

    def test_production(self):
        assert env_file_candidates("production") == [
            ".env.production.local",
            ".env.local",
            ".env.production",
            ".env",
        ]

    def test_test_environment_skips_env_local(self):
        assert env_file_candidates("test") == [
            ".env.test.local",
            ".env.test",
            ".env",
        ]


class TestLoadEnvFromEnvFiles:
    """Test loading .env files into the process environment."""

    def test_loads_value_when_absent(self, clean_env, temp_dir, write_env_file):
        write_env_file(".env", "ENVP_TEST_A=1\n")

        loaded = load_env_from_env_files("development", temp_dir)

        assert os.environ["ENVP_TEST_A"] == "1"
        assert loaded == [temp_dir / ".env"]

    def test_existing_variable_wins(self, clean_env, temp_dir, write_env_file):
        os.environ["ENVP_TEST_A"] = "2"
        write_env_file(".env", "ENVP_TEST_A=1\n")

        load_env_from_env_files("development", temp_dir)

        assert os.environ["ENVP_TEST_A"] == "2"

    def test_missing_files_are_ignored(self, clean_env, temp_dir):
        assert load_env_from_env_files("production", temp_dir) == []
        assert "ENVP_TEST_A" not in os.environ

    def test_precedence_order(self, clean_env, temp_dir, write_env_file):
        write_env_file(".env", "ENVP_TEST_A=base\nENVP_TEST_B=base\nENVP_TEST_C=base\n")
        write_env_file(".env.production", "ENVP_TEST_A=env\nENVP_TEST_B=env\n")
        write_env_file(".env.local", "ENVP_TEST_A=local\n")

        loaded = load_env_from_env_files("production", temp_dir)

        assert os.environ["ENVP_TEST_A"] == "local"
        assert os.environ["ENVP_TEST_B"] == "env"
        assert os.environ["ENVP_TEST_C"] == "base"
        assert loaded == [
            temp_dir / ".env.local",
            temp_dir / ".env.production",
            temp_dir / ".env",
        ]

    def test_env_specific_local_beats_everything(
        self, clean_env, temp_dir, write_env_file
    ):
        write_env_file(".env.staging.local", "ENVP_TEST_A=staging-local\n")
        write_env_file(".env.local", "ENVP_TEST_A=local\n")
        write_env_file(".env.staging", "ENVP_TEST_A=staging\n")

        load_env_from_env_files("staging", temp_dir)

        assert os.environ["ENVP_TEST_A"] == "staging-local"

    def test_test_environment_ignores_env_local(
        self, clean_env, temp_dir, write_env_file
    ):
        write_env_file(".env.local", "ENVP_TEST_A=local\n")
        write_env_file(".env.test", "ENVP_TEST_A=test\n")

        loaded = load_env_from_env_files("test", temp_dir)

        assert os.environ["ENVP_TEST_A"] == "test"
        assert temp_dir / ".env.local" not in loaded

    def test_empty_name_means_development(self, clean_env, temp_dir, write_env_file):
        write_env_file(".env.development", "ENVP_TEST_A=dev\n")

        load_env_from_env_files("", temp_dir)

        assert os.environ["ENVP_TEST_A"] == "dev"

    def test_defaults_to_current_directory(
        self, clean_env, temp_dir, write_env_file, monkeypatch
    ):
        write_env_file(".env", "ENVP_TEST_A=cwd\n")
        monkeypatch.chdir(temp_dir)

        load_env_from_env_files()

        assert os.environ["ENVP_TEST_A"] == "cwd"

    def test_comments_and_quotes(self, clean_env, temp_dir, write_env_file):
        write_env_file(
            ".env",
            '# comment\n\nENVP_TEST_A="quoted value"\nexport ENVP_TEST_B=exported\n',
        )

        load_env_from_env_files("development", temp_dir)

        assert os.environ["ENVP_TEST_A"] == "quoted value"
        assert os.environ["ENVP_TEST_B"] == "exported"

    def test_directory_entry_named_like_env_file_is_skipped(
        self, clean_env, temp_dir
    ):
        (temp_dir / ".env.local").mkdir()
        assert load_env_from_env_files("development", str(temp_dir)) == []

    def test_loaded_files_logged_at_debug(
        self, clean_env, temp_dir, write_env_file, caplog
    ):
        caplog.set_level(logging.DEBUG, logger="envp.envfiles")
        env_path = write_env_file(".env", "ENVP_TEST_A=1\n")

        load_env_from_env_files("development", temp_dir)

        debug = [r for r in caplog.records if r.name == "envp.envfiles"]
        assert [r.levelno for r in debug] == [logging.DEBUG]
        assert f"Loaded environment from {env_path}" in debug[0].getMessage()
