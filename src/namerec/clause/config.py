"""Column naming configuration for statement builders."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ClauseConfig:
    """
    Naming conventions shared by the statement builders.

    Tables are expected to carry a synthetic identity column and two
    bookkeeping timestamps. The defaults match a PostgreSQL schema where
    those are ``id``, ``created_at`` and ``updated_at``.
    """

    identity_column: str = 'id'
    created_at_column: str = 'created_at'
    updated_at_column: str = 'updated_at'
    update_timestamp: str = 'now()'
    dialect: str = 'postgres'


DEFAULT_CONFIG = ClauseConfig()

# Global state (changed by set_default_config)
_default_config: ClauseConfig = DEFAULT_CONFIG


def set_default_config(config: ClauseConfig) -> None:
    """
    Replace the configuration used when builders get no explicit config.

    Args:
        config: New default configuration
    """
    global _default_config  # noqa: PLW0603
    _default_config = config


def get_default_config() -> ClauseConfig:
    """Get the configuration used when builders get no explicit config."""
    return _default_config


def reset_default_config() -> None:
    """Restore the built-in default configuration."""
    set_default_config(DEFAULT_CONFIG)


def resolve_config(config: ClauseConfig | None) -> ClauseConfig:
    """Return ``config`` or the current default when it is None."""
    return config if config is not None else _default_config
