import json
from functools import lru_cache

from django.conf import settings


@lru_cache(maxsize=None)
def _read_json(path):
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def load_home_page_data():
    """Static payload shown on the home page, read once per file."""
    return _read_json(str(settings.HOME_PAGE_DATA_FILE))
