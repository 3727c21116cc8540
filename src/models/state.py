"""
CLI run state and the stage pipeline

Each CLI stage takes a ProgramState, copies it, fills in its own fields and
returns the copy; pipeline() chains the stages.
"""

from pathlib import Path
from argparse import Namespace
from typing import Any, Optional, Type, TypeVar, Dict, Callable, TYPE_CHECKING
from dataclasses import dataclass, field, fields

if TYPE_CHECKING:
    from .parser import StyleSequence


PS = TypeVar("PS", bound="ProgramState")


@dataclass
class ProgramState:
    """
    State carried through one CLI run.

    Fields filled by stage:
        env_check       inputSourceFile, jsonOutputdir, envOK
        sheet_load      sheetSource      (element -> class string)
        styles_resolve  resolvedSheet    (element -> StyleSequence)
        json_compile    compileResult    (output_file, element_count, unresolved_count)
    """

    # From the command line
    inputdir: Optional[Path] = field(default=None)
    outputdir: Optional[Path] = field(default=None)
    verbosity: int = field(default=1)
    inputFile: str = field(default="")
    outputSubdir: str = field(default=".")

    # Filled in by the stages
    envOK: bool = field(default=False)
    inputSourceFile: Path = field(default=Path("/"))
    jsonOutputdir: Path = field(default=Path("/"))
    sheetSource: Optional[Dict[str, str]] = field(default=None)
    resolvedSheet: Optional[Dict[str, "StyleSequence"]] = field(default=None)
    compileResult: Optional[Dict[str, Any]] = field(default=None)

    @classmethod
    def state_createFromNamespace(
        cls: Type[PS], options: Namespace, inputdir: Path, outputdir: Path
    ) -> PS:
        """
        Build the initial state from parsed CLI options.

        Options the state has no field for (chris_plugin adds its own) are
        dropped.
        """
        known = {f.name for f in fields(cls)}
        options_known = {k: v for k, v in vars(options).items() if k in known}
        return cls(**{**options_known, "inputdir": inputdir, "outputdir": outputdir})

    def copy(self: PS) -> PS:
        """Shallow copy, so a stage never mutates its input state"""
        return type(self)(**self.__dict__)


def pipeline(
    initial_state: ProgramState, *stages: Callable[[ProgramState], ProgramState]
) -> ProgramState:
    """
    Run stages left to right, feeding each the previous stage's state.

    pipeline(s, a, b, c) is c(b(a(s))).
    """
    from functools import reduce
    return reduce(lambda state, stage: stage(state), stages, initial_state)
