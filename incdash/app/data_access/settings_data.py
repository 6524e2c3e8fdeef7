import os
import yaml

from typing import Any
from incdash import SETTINGS_PATH, DEFAULT_DATA_URL
from incdash.naming_conventions import SettingsFields


DEFAULT_SETTINGS = {
    SettingsFields.DATA_URL.value: DEFAULT_DATA_URL,
    SettingsFields.BASE_URL.value: None,
    SettingsFields.REQUEST_TIMEOUT.value: None,
    SettingsFields.LOG_LEVEL.value: 'INFO',
}

ENV_OVERRIDES = {
    'INCDASH_DATA_URL': SettingsFields.DATA_URL.value,
    'INCDASH_BASE_URL': SettingsFields.BASE_URL.value,
    'INCDASH_LOG_LEVEL': SettingsFields.LOG_LEVEL.value,
}


def load_settings(path: str | None = None) -> dict[str, Any]:
    """
    Load the dashboard settings from the YAML file, on top of the default settings.

    Environment variables listed in ``ENV_OVERRIDES`` take precedence over the file.

    Parameters
    ----------
    path : str | None
        the path of the settings file. If None, ``SETTINGS_PATH`` is used

    Returns
    -------
    dict[str, Any]
        the settings, always holding every key of ``DEFAULT_SETTINGS``
    """
    path = SETTINGS_PATH if path is None else path
    settings = dict(DEFAULT_SETTINGS)
    try:
        with open(path, 'r') as file:
            user_settings = yaml.safe_load(file) or {}
    except FileNotFoundError:
        user_settings = {}
    if not isinstance(user_settings, dict):
        raise ValueError(f'Invalid settings file: {path}')
    settings.update({key: value for key, value in user_settings.items() if key in DEFAULT_SETTINGS})

    for env_var, key in ENV_OVERRIDES.items():
        value = os.getenv(env_var)
        if value:
            settings[key] = value
    return settings


def save_settings(settings: dict[str, Any], path: str | None = None) -> None:
    """Save the settings to the YAML file."""
    path = SETTINGS_PATH if path is None else path
    if os.path.dirname(path):
        os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, 'w') as file:
        yaml.dump(settings, file)
