import sys
import os
import pytest

# Ensure src and project root are in the python path for all tests
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../src')))
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))


@pytest.fixture
def word_file(tmp_path):
    """
    Fixture that writes a word list to a temporary file.
    Returns a function taking the lines and returning the path.
    """
    def write(lines):
        path = tmp_path / "words.txt"
        path.write_text("\n".join(lines) + "\n")
        return str(path)
    return write

