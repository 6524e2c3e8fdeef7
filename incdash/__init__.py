import os


__version__ = "0.0.1"


SRC_PATH = os.path.dirname(os.path.abspath(__file__))
ROOT_PATH = os.path.dirname(SRC_PATH)
USER_DIR = os.path.join(os.path.expanduser('~'), '.income-dashboard')
SETTINGS_PATH = os.path.join(USER_DIR, 'settings.yaml')
DEFAULT_DATA_URL = 'data/income.json'
