import os
from pathlib import Path
from tomllib import load as toml_load
from typing import Final

_PROJECT_ABS_PATH: Final[Path] = Path(
    os.path.abspath(os.getenv("APP_DIR", Path(__file__).resolve().parent.parent))
)
_PYPROJECT_TOML_FILEPATH: Final[Path] = _PROJECT_ABS_PATH / "pyproject.toml"
_UNKNOWN_VERSION: Final[str] = "0.0.0+unknown"


def get_project_version() -> str:
    """
    Helper function to return the semver version of
    echonest, as defined in the pyproject.toml file.
    """
    if not _PYPROJECT_TOML_FILEPATH.exists():
        return _UNKNOWN_VERSION
    with open(_PYPROJECT_TOML_FILEPATH, "rb") as f:
        toml_data = toml_load(f)
    return toml_data["project"]["version"]
