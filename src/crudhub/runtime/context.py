from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, replace
from pathlib import Path

from loguru import logger
from pydantic import BaseModel

from src.crudhub.runtime.config.config_data import ConfigData
from src.crudhub.runtime.config.config_template import load_templated_yaml
from src.crudhub.runtime.config.settings import EnvironmentVariables


@dataclass
class AppContext:
    """Application context containing configuration and other app-wide state."""

    config: ConfigData


def _load_default_config() -> ConfigData:
    config_path = Path(EnvironmentVariables().config_file)
    if not config_path.exists():
        logger.warning("{} not found; using built-in configuration defaults", config_path)
        return ConfigData()
    return load_templated_yaml(config_path)


_default_context = AppContext(config=_load_default_config())

# Unset unless a caller entered with_context; falls back to the process-wide default
_app_context: ContextVar[AppContext | None] = ContextVar("app_context", default=None)


def get_context() -> AppContext:
    """Get the current application context."""
    return _app_context.get() or _default_context


def set_context(context: AppContext) -> Token[AppContext | None]:
    """Set the current application context."""
    return _app_context.set(context)


def _dump_explicit(model: BaseModel) -> dict:
    """Dump only the fields that were explicitly set, at every nesting level.

    A nested model is included whole as soon as any field below it was set, so
    the merge below can descend into it.
    """
    result = {}
    for field_name in model.__class__.model_fields:
        value = getattr(model, field_name)
        if isinstance(value, BaseModel):
            if _dump_explicit(value) or field_name in model.model_fields_set:
                result[field_name] = _dump_explicit(value) or value.model_dump()
        elif field_name in model.model_fields_set:
            result[field_name] = value
    return result


def _recursive_dict_merge(base_dict: dict, override_dict: dict) -> dict:
    result = base_dict.copy()
    for key, value in override_dict.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _recursive_dict_merge(result[key], value)
        else:
            result[key] = value
    return result


def _merge_configs(base_config: ConfigData, override_config: ConfigData) -> ConfigData:
    """Merge the explicitly set fields of ``override_config`` into ``base_config``."""
    merged = _recursive_dict_merge(
        base_config.model_dump(),
        _dump_explicit(override_config),
    )
    return ConfigData.model_validate(merged)


@contextmanager
def with_context(config_override: ConfigData | None = None):
    """Temporarily override the application configuration.

    Only fields explicitly set on ``config_override`` replace the current
    values; everything else is inherited from the enclosing context.

    Example:
        override = ConfigData(app=AppConfig(session_max_age=60))
        with with_context(override):
            assert get_config().app.session_max_age == 60
    """
    if config_override is None:
        yield
        return

    if not isinstance(config_override, ConfigData):
        raise ValueError(
            f"config_override must be ConfigData, or None, got {type(config_override)}"
        )

    merged_config = _merge_configs(get_context().config, config_override)
    token = set_context(replace(get_context(), config=merged_config))
    try:
        yield
    finally:
        _app_context.reset(token)


def set_config(config: ConfigData) -> None:
    """Replace the process-wide configuration.

    Unlike :func:`with_context` this is visible from every thread, including the
    event loop thread of a test client.
    """
    global _default_context
    _default_context = replace(_default_context, config=config)


def get_config() -> ConfigData:
    """Convenience function to get the current configuration."""
    return get_context().config
