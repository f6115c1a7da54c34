from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
SRC_PATH = ROOT_DIR / "src"
if SRC_PATH.exists():
    sys.path.insert(0, str(SRC_PATH))
# ``scripts`` is imported as a namespace package by the command tests.
if str(ROOT_DIR) not in sys.path:
    sys.path.append(str(ROOT_DIR))


SAMPLE_DATA = {
    "characters": [
        {
            "id": "flame_sovereign",
            "name_zh": "焰皇",
            "name_en": "Flame Sovereign",
            "role": "爆發型輸出",
            "main_image": "flame_sovereign.png",
            "stats": [{"label": "HP", "value": "1000"}, {"label": "ATK", "value": 250}],
            "skills": [
                {
                    "name_zh": "烈焰衝擊",
                    "name_en": "Flame Strike",
                    "type": "主動",
                    "effect": "對範圍內敵人造成火焰傷害",
                    "icon": "flame_strike.png",
                    "details": [{"label": "冷卻", "value": "12s"}],
                }
            ],
            "tactics": ["優先集火後排", "搭配坦克推進"],
        },
        {"id": "frost_queen", "name_zh": "冰后"},
    ],
    "units": [
        {"id": "tank1", "name_zh": "坦克", "description": "重裝前線單位", "cost": "300 金"},
        {"id": "tank2", "name_zh": "重型坦克"},
    ],
    "buildings": [],
    "guides": [
        {
            "id": "beginner",
            "name_zh": "新手攻略",
            "content": "從零開始",
            "sections": [
                {"title": "資源", "text": "先升級金礦"},
                {"title": "兵種", "text": "早期以步兵為主"},
            ],
        }
    ],
}

PAGE_SHELL = (
    "<html><head><title>War Inc Rising</title></head>"
    '<body><nav>menu</nav><div id="main-content-area"><p>static copy</p></div></body></html>'
)


@pytest.fixture
def sample_data() -> dict:
    return SAMPLE_DATA


@pytest.fixture
def page_shell() -> str:
    return PAGE_SHELL
