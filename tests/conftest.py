from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Make the project importable when running tests from the repository root.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from hsk.models import VocabularyEntry  # noqa: E402


@pytest.fixture
def entries() -> list[VocabularyEntry]:
    return [
        VocabularyEntry(1, "爱", "ài", "v.", "amar"),
        VocabularyEntry(2, "杯子", "bēizi", "n.", "copo, xícara"),
        VocabularyEntry(3, "北京", "Běijīng", "n.", "Pequim"),
        VocabularyEntry(4, "女儿", "nǚ'ér", "n.", "filha"),
        VocabularyEntry(5, "中国", "Zhōngguó", "n.", "China"),
    ]
