#!/usr/bin/env python3
"""
classname - Utility-class style resolver

Resolves Tailwind-like class strings ("p-4 bg-[#112233]/50 r-2") into
ordered style directives and writes them, with the folded style of each
element, to a JSON document.

As an aside, this codebase leverages the ChRIS "plugin" concept/pattern as
general purpose python app development framework.

Grammar at a glance:
    p- px- py- pt- pb- pl- pr-    padding      (count x 4, or [raw dp])
    m- mx- my- mt- mb- ml- mr-    offset       (mb-/mr- are negative)
    r-                            corner radius
    bg-<color>[/<opacity>]        background   (name, #hex, rgb(), [raw])
    bg-gradient-to-r|b            fixed two-stop gradient
    anything else                 ignored

Usage:
    classname inputdir/ outputdir/ --inputFile styles.yaml

    The resolved sheet is written to outputdir/ as styles.json.

Examples:
    # Basic run
    classname . output/ --inputFile styles.yaml

    # Fail on any unresolved token
    CLASSNAME_STRICT_MODE=true classname . output/ --inputFile styles.yaml

    # Verbose output with highlighted class strings
    classname . output/ --inputFile styles.yaml -vv
"""

import sys
from pathlib import Path
from argparse import ArgumentParser, Namespace, ArgumentDefaultsHelpFormatter

from chris_plugin import chris_plugin
from .config import appsettings
from .lib import Parser, Compiler, Sheet, SheetError, __version__, LOG, state_connectToLogger
from .lib.lexer import classes_highlight
from .models import ProgramState, pipeline


DISPLAY_TITLE = r"""
       _
   ___| | __ _ ___ ___ _ __   __ _ _ __ ___   ___
  / __| |/ _` / __/ __| '_ \ / _` | '_ ` _ \ / _ \
 | (__| | (_| \__ \__ \ | | | (_| | | | | | |  __/
  \___|_|\__,_|___/___/_| |_|\__,_|_| |_| |_|\___|

  Utility-class style resolver
"""

# Define CLI arguments
parser = ArgumentParser(
    description="classname - resolve utility-class strings into style directives",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument(
    "--inputFile",
    required=True,
    type=str,
    help="Style sheet (.yaml mapping of element -> classes, or one class string per line)",
)

parser.add_argument(
    "--outputSubdir",
    default=".",
    type=str,
    help="Subdirectory within outputdir for the compiled JSON",
)

parser.add_argument(
    "-v",
    "--verbosity",
    action="count",
    default=1,
    help="Increase verbosity (-v, -vv, -vvv)",
)

parser.add_argument(
    "-V", "--version", action="version", version=f"%(prog)s {__version__}"
)


def env_check(inputstate: ProgramState) -> ProgramState:
    """
    Validate input paths and prepare the output directory.

    Args:
        inputstate: Initial program state with CLI options

    Returns:
        ProgramState with added fields:
            - inputSourceFile: Resolved path to the style sheet
            - jsonOutputdir: Created output directory path
            - envOK: True if environment is valid

    Exits:
        1 if the style sheet is not found
    """

    state = inputstate.copy()

    if state.verbosity >= 2:
        LOG(DISPLAY_TITLE, level=2)

    LOG("Checking environment...", level=2)

    input_file = state.inputdir / state.inputFile

    if not input_file.exists():
        print(f"Error: Input file not found: {input_file}", file=sys.stderr)
        state.envOK = False
        sys.exit(1)

    state.inputSourceFile = input_file
    LOG(f"Input file: {input_file}", level=2)

    state.jsonOutputdir = state.outputdir / state.outputSubdir
    state.jsonOutputdir.mkdir(parents=True, exist_ok=True)
    LOG(f"Output directory: {state.jsonOutputdir}", level=2)

    state.envOK = True
    return state


def sheet_load(inputstate: ProgramState) -> ProgramState:
    """
    Read the style sheet into element name -> class string.

    Args:
        inputstate: Program state with inputSourceFile path set

    Returns:
        ProgramState with added field:
            - sheetSource: Dict[str, str] of class strings

    Exits:
        1 if the sheet cannot be read or has the wrong shape
    """

    state = inputstate.copy()

    LOG("Loading style sheet...", level=1)

    try:
        sheet = Sheet(state.inputSourceFile)
    except SheetError as e:
        print(f"Sheet error: {e}", file=sys.stderr)
        sys.exit(1)

    state.sheetSource = sheet.entries
    LOG(f"Loaded {len(sheet)} elements from {state.inputSourceFile.name}", level=2)
    return state


def styles_resolve(inputstate: ProgramState) -> ProgramState:
    """
    Resolve every class string in the sheet.

    Resolution itself never fails; unresolved tokens become no-ops. In
    strict mode they are listed and the run aborts.

    Args:
        inputstate: Program state with sheetSource

    Returns:
        ProgramState with added field:
            - resolvedSheet: Dict[str, StyleSequence]

    Exits:
        1 if sheetSource is None, or strict mode finds unresolved tokens
    """

    state = inputstate.copy()

    LOG("Resolving class strings...", level=1)

    if state.sheetSource is None:
        print("Error: No style sheet loaded", file=sys.stderr)
        sys.exit(1)

    state.resolvedSheet = {
        name: Parser(classes).parse() for name, classes in state.sheetSource.items()
    }

    unresolved = {
        name: sequence.unresolved()
        for name, sequence in state.resolvedSheet.items()
        if sequence.unresolved()
    }
    if unresolved and appsettings.strict_mode:
        for name, tokens in unresolved.items():
            print(f"Unresolved in '{name}': {' '.join(tokens)}", file=sys.stderr)
        sys.exit(1)

    return state


def json_compile(inputstate: ProgramState) -> ProgramState:
    """
    Write the resolved sheet to JSON.

    Args:
        inputstate: Program state with resolvedSheet

    Returns:
        ProgramState with added field:
            - compileResult: Dict containing:
                - status: bool (compilation success)
                - output_file: str (path to the JSON file)
                - element_count: int
                - unresolved_count: int

    Exits:
        1 if resolvedSheet is None or writing fails
    """

    state = inputstate.copy()

    LOG("Compiling resolved sheet...", level=1)

    if state.resolvedSheet is None:
        print("Error: No resolved sheet available", file=sys.stderr)
        sys.exit(1)

    try:
        compiler = Compiler(
            sheet=state.resolvedSheet,
            output_dir=str(state.jsonOutputdir),
            sources=state.sheetSource,
        )
        state.compileResult = compiler.compile()
        LOG(f"Compilation complete: {state.compileResult['element_count']} elements", level=2)
    except OSError as e:
        print(f"Compilation error: {e}", file=sys.stderr)
        if state.verbosity >= 3:
            import traceback

            traceback.print_exc()
        sys.exit(1)

    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Display a summary of the run.

    Args:
        inputstate: Program state with compileResult populated

    Returns:
        ProgramState unchanged (terminal pipeline stage)

    Exits:
        1 if compileResult is None
    """
    state: ProgramState = inputstate.copy()
    if not state.compileResult:
        print("Error: Compilation failed", file=sys.stderr)
        sys.exit(1)

    if state.verbosity >= 2 and state.sheetSource:
        for name, classes in state.sheetSource.items():
            LOG(f"  {name}: {classes_highlight(classes)}", level=2)

    LOG("\n✓ Resolution successful!", level=1)
    LOG(f"  Output: {state.compileResult['output_file']}", level=1)
    LOG(f"  Elements: {state.compileResult['element_count']}", level=1)
    LOG(f"  Unresolved tokens: {state.compileResult['unresolved_count']}", level=1)
    return state


@chris_plugin(
    parser=parser,
    title="classname - Utility-class style resolver",
    category="Utility",
    min_memory_limit="100Mi",
    min_cpu_limit="500m",
)
def main(options: Namespace, inputdir: Path, outputdir: Path):
    """
    Main entry point - resolve a style sheet of class strings to JSON.

    Orchestrates the full pipeline:
        1. env_check: Validate paths and environment
        2. sheet_load: Read the style sheet
        3. styles_resolve: Tokenize and resolve every class string
        4. json_compile: Write directives and computed styles
        5. results_report: Display results to user

    Args:
        options: CLI arguments from argparse
            - inputFile: str - Style sheet filename
            - outputSubdir: str - Output subdirectory name
            - verbosity: int - Logging verbosity level (1-3)
        inputdir: Directory containing the style sheet
        outputdir: Directory where the JSON will be written

    Note:
        This function is wrapped by @chris_plugin which handles CLI
        argument parsing and invokes this function with parsed values.
    """

    state: ProgramState = ProgramState.state_createFromNamespace(
        options=options, inputdir=inputdir, outputdir=outputdir
    )

    state_connectToLogger(state)

    pipeline(state, env_check, sheet_load, styles_resolve, json_compile, results_report)


if __name__ == "__main__":
    main()  # type: ignore  # @chris_plugin decorator transforms signature
