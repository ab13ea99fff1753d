"""
Root conftest.py for the compensation service repository.

Makes the service's 'app' package importable when pytest is run from the
repository root without an editable install.
"""

import sys
from pathlib import Path


def pytest_configure(config):
    """
    Add each service directory to sys.path.

    Service directories live under services/ and each holds one 'app' package.
    """
    root_dir = Path(__file__).parent

    for service_path in sorted((root_dir / "services").iterdir()):
        if (service_path / "app").is_dir() and str(service_path) not in sys.path:
            sys.path.insert(0, str(service_path))
