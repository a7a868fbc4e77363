import pytest

from tmi_events.diagnostics import DiagnosticCollector


@pytest.fixture
def diagnostics() -> DiagnosticCollector:
    return DiagnosticCollector(max_records=100)
