"""
pytest configuration for patchdiff tests.
Sets up Python path and shared patch notes fixtures.
"""

import sys
from pathlib import Path

import pytest

# Add the repository root to Python path
# This allows imports like 'from patchdiff.core.exceptions import ...' to work
repo_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(repo_root))


PATCH_7_32_HTML = """
<html><body>
<div class="mw-parser-output">
<p>Patch 7.32 notes.</p>
<h2><span class="mw-headline">General</span><span class="mw-editsection">[edit]</span></h2>
<ul>
<li>Roshan respawn timer decreased by 60</li>
</ul>
<h2><span class="mw-headline">Items</span><span class="mw-editsection">[edit]</span></h2>
<h3><span class="mw-headline">Blade Mail</span></h3>
<ul>
<li>Duration increased from 4.5s to 5.5s</li>
<li>Armor increased from 4 to 5 (from 7.31d)</li>
</ul>
<h2><span class="mw-headline">Heroes</span></h2>
<h3><span class="mw-headline">Zeus</span></h3>
<ul>
<li>Base armor increased by 2</li>
<li><b>Lightning Bolt</b>
<ul>
<li>Cooldown decreased from 6/5.5/5/4.5s to 5/4.5/4/3.5s</li>
</ul>
</li>
</ul>
<h3><span class="mw-headline">Dark Willow</span></h3>
<ul>
<li><b>Talent</b>
<ul>
<li>Level 10 Talent OP replaced with +20 Damage</li>
</ul>
</li>
</ul>
</div>
</body></html>
"""

PATCH_7_32A_HTML = """
<html><body>
<div class="mw-parser-output">
<h2><span class="mw-headline">Items</span></h2>
<h3><span class="mw-headline">Blade Mail</span></h3>
<ul>
<li>Duration increased from 5.5s to 6.5s</li>
</ul>
<h3><span class="mw-headline">Blink Dagger</span></h3>
<ul>
<li>Now has a 3s cooldown</li>
</ul>
<h2><span class="mw-headline">Heroes</span></h2>
<h3><span class="mw-headline">Zeus</span></h3>
<ul>
<li>Base armor decreased by 2</li>
</ul>
<h3><span class="mw-headline">Crystal Maiden</span></h3>
<ul>
<li>Auto-attacks now take priority when determining kill credit</li>
</ul>
<h2><span class="mw-headline">Additional Content</span></h2>
<ul>
<li>New arcana added</li>
</ul>
</div>
</body></html>
"""

PATCH_7_33_HTML = """
<html><body>
<div class="mw-parser-output">
<h2><span class="mw-headline">Items</span></h2>
<h3><span class="mw-headline">Blade Mail</span></h3>
<ul>
<li>Duration decreased from 6.5s to 3s</li>
</ul>
</div>
</body></html>
"""


@pytest.fixture
def patch_notes_dir(tmp_path):
    """Corpus directory with three patch pages and a stale diff document."""
    html_dir = tmp_path / "html"
    html_dir.mkdir()
    (html_dir / "7.32.html").write_text(PATCH_7_32_HTML, encoding="utf-8")
    (html_dir / "7.32a.html").write_text(PATCH_7_32A_HTML, encoding="utf-8")
    (html_dir / "7.33.html").write_text(PATCH_7_33_HTML, encoding="utf-8")
    (html_dir / "patch_diff.html").write_text("<div></div>", encoding="utf-8")
    (html_dir / "notes.txt").write_text("not a patch page", encoding="utf-8")
    return html_dir


@pytest.fixture
def patch_7_32_html():
    return PATCH_7_32_HTML


@pytest.fixture
def patch_7_32a_html():
    return PATCH_7_32A_HTML
