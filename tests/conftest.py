import os
import sys
from pathlib import Path

import pytest

# Get absolute path to project root
project_root = Path(__file__).parent.parent.absolute()

# Add to Python path
sys.path.insert(0, str(project_root))

SERVER_NAME = "us_california-lax.pia.privateinternetaccess.com"


@pytest.fixture
def server_name():
    return SERVER_NAME


@pytest.fixture
def outfile(tmp_path):
    return tmp_path / "test-wg.conf"


@pytest.fixture(autouse=True)
def clean_env():
    # load_dotenv and the CLI write to os.environ directly
    saved = dict(os.environ)
    for var in ("SERVERNAME_FORMAT", "SERVERNAME_FILE_MODE", "SERVER_NAME"):
        os.environ.pop(var, None)
    yield
    os.environ.clear()
    os.environ.update(saved)
