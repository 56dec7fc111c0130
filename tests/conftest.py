import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


def _is_e2e_test(request: pytest.FixtureRequest) -> bool:
    return "tests/e2e/" in str(request.node.fspath).replace("\\", "/")


@pytest.fixture(autouse=True)
def isolated_loadout_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("LOADOUT_EQUIPMENT_DATA", raising=False)
    monkeypatch.delenv("LOADOUT_LOG_LEVEL", raising=False)


@pytest.fixture(autouse=True)
def e2e_wide_console(request: pytest.FixtureRequest, monkeypatch: pytest.MonkeyPatch) -> None:
    if not _is_e2e_test(request):
        return

    monkeypatch.setenv("COLUMNS", "200")
    monkeypatch.setattr("loadout.__main__.load_dotenv", lambda *_args, **_kwargs: False)
