from pathlib import Path

from utils import ui_layout

REPO_ROOT = Path(__file__).resolve().parents[1]


def test_navigation_targets_exist() -> None:
    targets = [link.target for link in ui_layout._NAV_LINKS]

    assert "pages/01_Comparison.py" in targets
    for target in targets:
        assert (REPO_ROOT / target).is_file(), target


def test_comparison_page_reuses_run_app() -> None:
    source = (REPO_ROOT / "pages" / "01_Comparison.py").read_text(encoding="utf-8")

    assert "from app import run_app" in source
    assert "run_app()" in source
