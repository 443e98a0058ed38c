import pytest

import trychain.utils.events as ev
import trychain.utils.logging as tlog


@pytest.fixture(autouse=True)
def _clean_event_registry():
    # tracing subscribers, test handlers and the trace limit are process-global
    ev.clear()
    tlog._truncate = 120
    yield
    ev.clear()
    tlog._truncate = 120
