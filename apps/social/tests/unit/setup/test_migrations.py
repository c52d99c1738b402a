"""Startup migration 설정 테스트."""

from unittest.mock import patch

from apps.social.setup.migrations import build_alembic_config, run_migrations


def test_build_alembic_config(settings) -> None:
    config = build_alembic_config(settings)

    assert config.get_main_option("script_location") == "migrations/social"
    assert config.get_main_option("sqlalchemy.url") == settings.database_url
    assert config.attributes["configure_logger"] is False


def test_run_migrations_upgrades_head(settings) -> None:
    with patch("apps.social.setup.migrations.command.upgrade") as upgrade:
        run_migrations(settings)

    upgrade.assert_called_once()
    assert upgrade.call_args.args[1] == "head"
