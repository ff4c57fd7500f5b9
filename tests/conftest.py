from pathlib import Path

import pytest

from helmfile_deps.config.settings import ExtractConfig

FIXTURES = Path(__file__).parent / "fixtures"

STABLE_URL = "https://charts.helm.sh/stable"


def load_fixture(name: str) -> str:
    return (FIXTURES / name).read_text(encoding="utf-8")


@pytest.fixture
def config() -> ExtractConfig:
    return ExtractConfig(aliases={"stable": STABLE_URL})
