import pathlib


def get_root_project_directory() -> pathlib.Path:
    """Gets the root directory (omnidrive) of this project's repository. Falls back to
    the working directory when not running from a source checkout.
    """
    current_module = pathlib.Path(__file__).resolve()
    directories = current_module.parts
    if "src" not in directories:
        return pathlib.Path.cwd()

    idx = directories.index("src")
    return pathlib.Path().joinpath(*directories[:idx])
