import pytest

from courier.constants import EnvVars


@pytest.fixture(autouse=True)
def _isolate_courier_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's COURIER_* variables out of the tests.

    Tests that exercise environment handling set the variables they need
    explicitly.
    """
    for name in (EnvVars.FORMATS, EnvVars.MAX_AGE_MONTHS, EnvVars.VERBOSITY):
        monkeypatch.delenv(name, raising=False)
