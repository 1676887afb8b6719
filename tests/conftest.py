import os
import sys

import pytest

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

# The ament package and the logic simulator are not installed as
# distributions when running the suite from a source checkout.
for path in (os.path.join(ROOT, 'src', 'beginner_tutorials'),
             os.path.join(ROOT, 'logic_simulator')):
    if path not in sys.path:
        sys.path.insert(0, path)


@pytest.fixture
def bus():
    from bus import MessageBus
    return MessageBus()
