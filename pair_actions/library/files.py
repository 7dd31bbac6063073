"""File system actions."""

import shutil
from pathlib import Path
from typing import Union

from ..core import Action, wrap_errors
from ..logging import get_logger

PathLike = Union[str, Path]


def copy_file() -> Action[PathLike, PathLike]:
    """
    Copy the file at ``source`` to ``destination``.

    Any OSError is re-raised as ActionExecutionError with the paths attached.
    """
    def copy(source: PathLike, destination: PathLike) -> None:
        shutil.copyfile(Path(source), Path(destination))
        get_logger(__name__).debug(
            "File copied",
            source=str(source),
            destination=str(destination),
        )

    return wrap_errors(Action(copy, name="copy_file"))
