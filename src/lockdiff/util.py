import pathlib


def ensure_path(path: pathlib.Path):
    """
    Ensure the given directory exists.
    """
    if not path.exists():
        path.mkdir(parents=True)
    elif not path.is_dir():
        raise NotADirectoryError(f"Unexpected: {path} is not a directory")
