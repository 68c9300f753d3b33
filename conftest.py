import os

# Qt must not try to open a display during test runs
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


def pytest_ignore_collect(collection_path, config):
    """Skip editor, VCS and OS metadata folders during collection."""
    if collection_path.name in ('.DS_Store', '.git', '.idea', '__pycache__'):
        return True
    return None
