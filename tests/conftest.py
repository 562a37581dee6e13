import warnings

# Ignore warnings from third-party packages
warnings.filterwarnings("ignore", category=DeprecationWarning, module="httpx.*")

from tests.fixtures.session_fixtures import *  # noqa: E402, F403
