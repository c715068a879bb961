"""Unit tests for the migration runner script."""

from unittest.mock import patch

import pytest

from scripts import run_migrations


class TestRunMigrations:
    """Tests for scripts/run_migrations.py."""

    def test_alembic_config_is_found_next_to_the_scripts(self):
        assert run_migrations.ALEMBIC_INI.is_file()
        assert (run_migrations.ALEMBIC_INI.parent / "migrations" / "env.py").is_file()

    def test_upgrades_to_head_by_default(self):
        with (
            patch.object(run_migrations, "configure_logfire"),
            patch.object(run_migrations.command, "upgrade") as upgrade,
        ):
            assert run_migrations.main(["run_migrations.py"]) == 0

        config, revision = upgrade.call_args.args
        assert revision == "head"
        assert config.config_file_name == str(run_migrations.ALEMBIC_INI)

    def test_upgrades_to_requested_revision(self):
        with (
            patch.object(run_migrations, "configure_logfire"),
            patch.object(run_migrations.command, "upgrade") as upgrade,
        ):
            run_migrations.main(["run_migrations.py", "3c1f6a2b9d40"])

        assert upgrade.call_args.args[1] == "3c1f6a2b9d40"

    def test_failure_is_reraised(self):
        with (
            patch.object(run_migrations, "configure_logfire"),
            patch.object(
                run_migrations.command, "upgrade", side_effect=RuntimeError("boom")
            ),
        ):
            with pytest.raises(RuntimeError):
                run_migrations.main(["run_migrations.py"])
