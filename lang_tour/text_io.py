from importlib import resources
from pathlib import Path

RESOURCE_NAME = "text.txt"


def read_line():
    try:
        return True, input() + "\n"
    except EOFError:
        return False, "end of input"
    except OSError as e:
        return False, str(e)


def read_text_file(path=RESOURCE_NAME):
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as handle:
            return True, handle.read()
    except (OSError, UnicodeDecodeError) as e:
        return False, f"cannot read {path}: {e}"


def read_bundled_text(name=RESOURCE_NAME):
    try:
        return True, resources.files("lang_tour").joinpath(name).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        return False, f"cannot read bundled {name}: {e}"
