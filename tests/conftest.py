import pytest

CHECKERBOARD = """
---
b:00,00,00,FF
w:FF,FF,FF,FF
---
b,w
w,b
"""

TWO_FRAMES = """scale:2
delay:10
---
r:ff,00,00,ff
g:00,ff,00,ff
b:00,00,ff,ff
---
r,g,b
b,g,r
-
d:25
g,g,g
r,r,r
"""


@pytest.fixture
def checkerboard_text() -> str:
    """Single 2x2 black/white frame with default settings."""
    return CHECKERBOARD


@pytest.fixture
def two_frame_text() -> str:
    """Two 3x2 frames, scale 2, second frame with its own delay."""
    return TWO_FRAMES


@pytest.fixture
def document_file(tmp_path, two_frame_text):
    """Write the two-frame document to disk and return its path."""
    path = tmp_path / "anim.txt"
    path.write_text(two_frame_text, encoding="utf-8")
    return path
