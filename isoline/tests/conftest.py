import datetime
import io
import logging
import pathlib

import pytest

LOG_DIR = pathlib.Path(__file__).parent / "test-logs"


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    # Attach the TestReport (with .outcome) to the item so fixtures can see the
    # outcome in teardown.
    outcome = yield
    rep = outcome.get_result()
    setattr(item, "rep_" + rep.when, rep)


@pytest.fixture(autouse=True)
def capture_isoline_logs(request):
    """Capture 'isoline' logging for each test into an in-memory buffer and write
    it to a file only when the test fails.

    The 'isoline' logger does not propagate to the root logger, so its handlers
    are swapped out for the duration of the test.
    """
    iso = logging.getLogger('isoline')
    prev_handlers = list(iso.handlers)
    prev_level = iso.level
    for h in prev_handlers:
        iso.removeHandler(h)

    buf = io.StringIO()
    handler = logging.StreamHandler(buf)
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    iso.addHandler(handler)
    iso.setLevel(logging.DEBUG)

    try:
        yield buf
    finally:
        iso.removeHandler(handler)
        iso.setLevel(prev_level)
        for h in prev_handlers:
            iso.addHandler(h)

        rep = getattr(request.node, "rep_call", None)
        if rep is not None and rep.outcome == "failed":
            LOG_DIR.mkdir(exist_ok=True)
            nodeid = request.node.nodeid.replace("::", "__").replace("/", "_")
            ts = datetime.datetime.now().strftime("%Y%m%dT%H%M%S")
            fname = LOG_DIR / "{}__{}.log".format(nodeid, ts)
            with open(fname, "w", encoding="utf-8") as f:
                f.write("=== Test: {}\n".format(request.node.nodeid))
                f.write("=== Timestamp: {}\n\n".format(ts))
                f.write(buf.getvalue())
