import datetime as dt
import os

TEST_FILE_DIR = os.path.join(os.path.dirname(__file__), "test_files")

five_hours = dt.timedelta(hours=5)


def get_test_file(file_name: str) -> str:
    """Helper function to open and read test files."""
    filepath = os.path.join(TEST_FILE_DIR, file_name)
    with open(filepath, "r", encoding="utf-8", newline="") as f:
        text = f.read()
    return text
