import pytest
import xdn


@pytest.fixture(autouse=True)
def clock_ids(monkeypatch):
    """ Every test starts with the default clock strategy for request ids;
        any strategy a test selects is undone afterwards.
    """

    message = xdn.protocol.message
    monkeypatch.setattr(message, '_generator', message._id_clock)

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
